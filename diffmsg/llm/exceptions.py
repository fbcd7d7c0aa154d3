"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- UnsupportedProviderError: Raised when the provider name is not recognized
- InvalidProviderError: Raised when the provider factory gets an unknown value
- BackendRequestError: Raised when the provider API call fails
- MalformedResponseError: Raised when the response lacks generated text
- ProviderNotImplementedError: Raised by providers that are not available yet
"""

from diffmsg.exceptions import DiffmsgError


class LLMError(DiffmsgError):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class UnsupportedProviderError(LLMError):
    """Raised when the requested provider is not one of the supported ones."""

    pass


class InvalidProviderError(UnsupportedProviderError):
    """Raised when the provider factory is handed a value it cannot build."""

    pass


class BackendRequestError(LLMError):
    """Raised when the request to the provider API fails."""

    pass


class MalformedResponseError(LLMError):
    """Raised when the provider response does not contain a message."""

    pass


class ProviderNotImplementedError(LLMError):
    """Raised by a provider that is selectable but not implemented."""

    pass
