"""Anthropic Claude provider placeholder."""

from diffmsg.config import LLMProvider
from diffmsg.llm.base import BaseLLMProvider
from diffmsg.llm.exceptions import ProviderNotImplementedError


class ClaudeProvider(BaseLLMProvider):
    """Claude provider. Selectable, but every call fails."""

    provider = LLMProvider.CLAUDE

    def generate_message(self, diff: str) -> str:
        """Fail without contacting any API.

        Args:
            diff: The raw diff text (ignored).

        Raises:
            ProviderNotImplementedError: Always.
        """
        raise ProviderNotImplementedError("Claude service not implemented yet")
