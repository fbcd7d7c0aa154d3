"""OpenAI GPT provider implementation."""

from typing import Optional

import openai
from openai import OpenAI

from diffmsg.config import DEFAULT_MODELS, LLMProvider, MAX_TOKENS, Settings
from diffmsg.llm.base import BaseLLMProvider, build_prompt
from diffmsg.llm.exceptions import BackendRequestError, MalformedResponseError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    provider = LLMProvider.OPENAI

    def __init__(self, settings: Optional[Settings] = None, model: Optional[str] = None):
        """Initialize the OpenAI provider.

        The API key is checked here so a missing key is reported before any
        git or network work happens.

        Args:
            settings: Settings holding the OpenAI API key.
            model: The model to use. Defaults to gpt-3.5-turbo.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not set.
        """
        super().__init__(settings)
        self.model = model or DEFAULT_MODELS[LLMProvider.OPENAI]
        self.api_key = self.get_api_key()

    def generate_message(self, diff: str) -> str:
        """Generate a commit message using OpenAI chat completions.

        Args:
            diff: The raw diff text.

        Returns:
            The stripped commit message.

        Raises:
            BackendRequestError: If the request fails or returns a non-2xx status.
            MalformedResponseError: If the response has no message content.
        """
        # Retries disabled: a failed request is reported, not repeated
        client = OpenAI(api_key=self.api_key, max_retries=0)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                messages=[{"role": "user", "content": build_prompt(diff)}],
            )
        except openai.APIStatusError as e:
            status_text = e.response.reason_phrase or str(e.status_code)
            raise BackendRequestError(f"OpenAI API request failed: {status_text}") from e
        except openai.APIError as e:
            raise BackendRequestError(f"OpenAI API request failed: {e}") from e

        content = None
        if response.choices:
            message = response.choices[0].message
            content = message.content if message else None
        if not content:
            raise MalformedResponseError("Invalid response format from OpenAI API")

        return content.strip()
