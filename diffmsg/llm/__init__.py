"""LLM provider module for diffmsg.

This module provides a unified interface to the supported LLM providers.
The provider set is closed: it is exactly the members of LLMProvider.
"""

from typing import Optional

from diffmsg.config import LLMProvider, Settings, SUPPORTED_PROVIDERS
from diffmsg.llm.base import BaseLLMProvider, build_prompt
from diffmsg.llm.exceptions import (
    BackendRequestError,
    InvalidProviderError,
    LLMError,
    MalformedResponseError,
    MissingAPIKeyError,
    ProviderNotImplementedError,
    UnsupportedProviderError,
)


def parse_provider(name: str) -> LLMProvider:
    """Parse a provider name given on the command line.

    Args:
        name: The provider name (openai, claude, google).

    Returns:
        The matching LLMProvider.

    Raises:
        UnsupportedProviderError: If the name is not a supported provider.
    """
    try:
        return LLMProvider(name)
    except ValueError:
        raise UnsupportedProviderError(
            f"Unsupported AI provider: {name}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        ) from None


def get_provider(
    provider: LLMProvider,
    settings: Optional[Settings] = None,
    model: Optional[str] = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use.
        settings: Settings holding credentials. Defaults to empty settings.
        model: The model to use. Defaults to the provider's default model.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        MissingAPIKeyError: If the provider needs an API key that is not set.
        InvalidProviderError: If the provider is not supported.
    """
    settings = settings or Settings()

    if provider == LLMProvider.OPENAI:
        from diffmsg.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(settings=settings, model=model)

    elif provider == LLMProvider.CLAUDE:
        from diffmsg.llm.claude_provider import ClaudeProvider

        return ClaudeProvider(settings=settings)

    elif provider == LLMProvider.GOOGLE:
        from diffmsg.llm.google_provider import GoogleProvider

        return GoogleProvider(settings=settings, model=model)

    else:
        raise InvalidProviderError(f"Invalid AI provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "UnsupportedProviderError",
    "InvalidProviderError",
    "BackendRequestError",
    "MalformedResponseError",
    "ProviderNotImplementedError",
    "build_prompt",
    "parse_provider",
    "get_provider",
]
