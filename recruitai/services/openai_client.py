"""
OpenAI API Client

Thin wrapper over the openai SDK. The base URL is configurable, so any
OpenAI-compatible provider works. The API key lives only on the server;
clients never see it.
"""
import logging
from typing import Dict, List, Optional

from openai import APIConnectionError, APIError, APIStatusError, OpenAI

from recruitai.core.config import get_settings
from recruitai.core.errors import AIServiceError

logger = logging.getLogger(__name__)

Message = Dict[str, str]


class OpenAIClient:
    """
    Wrapper for the chat-completion endpoint.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 default_model: Optional[str] = None):
        settings = get_settings()
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.base_url = base_url or settings.openai_base_url
        self.default_model = default_model or settings.default_model
        self.timeout = settings.openai_timeout_seconds
        self._client: Optional[OpenAI] = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            # One attempt per request; failures go straight back to the caller
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                max_retries=0,
                timeout=self.timeout
            )
        return self._client

    def chat(self, messages: List[Message], model: Optional[str] = None,
             temperature: float = 0.3) -> str:
        """
        Send a chat completion and return the first choice's text, stripped.
        Returns "" when the provider sends no content.
        """
        if not self.api_key:
            raise AIServiceError("Missing OPENAI_API_KEY")

        try:
            response = self.client.chat.completions.create(
                model=model or self.default_model,
                messages=messages,
                temperature=temperature
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else e.message
            raise AIServiceError(f"OpenAI error {e.status_code}: {body}") from e
        except APIConnectionError as e:
            raise AIServiceError(f"OpenAI connection failed: {e}") from e
        except APIError as e:
            raise AIServiceError(f"OpenAI error: {e}") from e

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return (content or "").strip()

    def complete(self, system_prompt: str, user_content: str, model: Optional[str] = None,
                 temperature: float = 0.3) -> str:
        """System + user message round trip."""
        return self.chat(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content}
            ],
            model=model,
            temperature=temperature
        )

    def test_connection(self) -> bool:
        """Test if the API is reachable"""
        try:
            reply = self.complete("You are a test assistant.", "Reply with exactly: OK")
            return "OK" in reply.upper()
        except AIServiceError as e:
            logger.warning("OpenAI connection failed: %s", e)
            return False


# Singleton instance
_openai_client: Optional[OpenAIClient] = None


def get_ai_client() -> OpenAIClient:
    """Get or create the API client (singleton pattern)"""
    global _openai_client
    if _openai_client is None:
        _openai_client = OpenAIClient()
    return _openai_client
