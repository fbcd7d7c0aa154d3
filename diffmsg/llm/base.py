"""Base classes and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from typing import Optional

from diffmsg.config import LLMProvider, Settings, get_api_key_env_var
from diffmsg.llm.exceptions import MissingAPIKeyError

# Prompt template (shared across all providers)
PROMPT_TEMPLATE = (
    "Write a concise Git commit message that summarizes the following code changes:"
    "\n\n{diff}"
)


def build_prompt(diff: str) -> str:
    """Build the prompt sent to the LLM.

    Args:
        diff: The raw diff text.

    Returns:
        The formatted prompt.
    """
    return PROMPT_TEMPLATE.format(diff=diff)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    provider: LLMProvider

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    @abstractmethod
    def generate_message(self, diff: str) -> str:
        """Generate a commit message from the diff text.

        Args:
            diff: The raw diff text.

        Returns:
            The commit message, stripped of surrounding whitespace.

        Raises:
            BackendRequestError: If the API call fails.
            MalformedResponseError: If the response carries no message.
            LLMError: For other LLM-related errors.
        """
        pass

    def get_api_key(self) -> str:
        """Get the API key for this provider from the settings.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not set.
        """
        api_key = self.settings.get_api_key(self.provider)
        if not api_key:
            env_var = get_api_key_env_var(self.provider)
            raise MissingAPIKeyError(
                f"{env_var} environment variable is not set. "
                f"Please set it with: export {env_var}=your-key"
            )
        return api_key
