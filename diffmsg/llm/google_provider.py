"""Google Gemini provider implementation."""

from typing import Optional

from google import genai
from google.genai import errors

from diffmsg.config import DEFAULT_MODELS, LLMProvider, Settings
from diffmsg.llm.base import BaseLLMProvider, build_prompt
from diffmsg.llm.exceptions import BackendRequestError, MalformedResponseError


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    provider = LLMProvider.GOOGLE

    def __init__(self, settings: Optional[Settings] = None, model: Optional[str] = None):
        """Initialize the Google provider.

        Args:
            settings: Settings holding the Google API key.
            model: The model to use. Defaults to gemini-2.0-flash.

        Raises:
            MissingAPIKeyError: If GOOGLE_API_KEY is not set.
        """
        super().__init__(settings)
        self.model = model or DEFAULT_MODELS[LLMProvider.GOOGLE]
        self.api_key = self.get_api_key()

    def generate_message(self, diff: str) -> str:
        """Generate a commit message using Google Gemini.

        Args:
            diff: The raw diff text.

        Returns:
            The stripped commit message.

        Raises:
            BackendRequestError: If the Gemini API call fails or cannot be sent.
            MalformedResponseError: If Gemini returns no text.
        """
        client = genai.Client(api_key=self.api_key)

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=build_prompt(diff),
            )
        except errors.APIError as e:
            raise BackendRequestError(f"Google Gemini API request failed: {e}") from e
        except Exception as e:
            # Transport failures (httpx connect errors, timeouts) are not APIErrors
            raise BackendRequestError(f"Google Gemini API request failed: {e}") from e

        text = response.text
        if not text:
            raise MalformedResponseError("No content generated from Google Gemini API")

        return text.strip()
