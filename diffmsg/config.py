"""Configuration for diffmsg.

Constants describing the supported providers live at module level. Values
that come from the environment are collected once, at process start, into a
Settings object that is handed to the git layer and the provider constructors.
"""

import os
from enum import Enum
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    CLAUDE = "claude"
    GOOGLE = "google"


# Order matters: it is the order shown in help and error messages
SUPPORTED_PROVIDERS = [provider.value for provider in LLMProvider]

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_SOURCE = "staged"


# ============================================================
# GENERATION SETTINGS
# ============================================================

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-3.5-turbo",
    LLMProvider.GOOGLE: "gemini-2.0-flash",
}

MAX_TOKENS = 100


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

GIT_COMMAND_ENV_VAR = "GIT_COMMAND"
DEFAULT_GIT_COMMAND = "git"

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


class Settings(BaseModel):
    """Process-wide settings, read once per invocation."""

    git_command: str = DEFAULT_GIT_COMMAND
    openai_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("openai_api_key", "google_api_key", mode="before")
    @classmethod
    def _blank_key_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("git_command", mode="before")
    @classmethod
    def _blank_git_command_is_default(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_GIT_COMMAND
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A populated Settings instance.
        """
        env = os.environ if environ is None else environ
        return cls(
            git_command=env.get(GIT_COMMAND_ENV_VAR),
            openai_api_key=env.get(API_KEY_ENV_VARS[LLMProvider.OPENAI]),
            google_api_key=env.get(API_KEY_ENV_VARS[LLMProvider.GOOGLE]),
        )

    def get_api_key(self, provider: LLMProvider) -> Optional[str]:
        """Return the configured credential for a provider, if any."""
        if provider == LLMProvider.OPENAI:
            return self.openai_api_key
        if provider == LLMProvider.GOOGLE:
            return self.google_api_key
        return None


def load_settings() -> Settings:
    """Load settings for this run.

    A .env file in the working directory is loaded first; variables already
    set in the environment take precedence over it.

    Returns:
        The Settings for this invocation.
    """
    load_dotenv()
    return Settings.from_env()
