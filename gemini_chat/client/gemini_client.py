"""Gemini generateContent client with a single quota fallback.

Every call is stateless: one user-role content turn, no history. When the
primary model answers with a "Quota exceeded" error, the identical request is
sent once to the fallback model. Transport failures never propagate: they
become a fixed reply text so the transcript always gets a bot turn.
"""

import logging
from types import TracebackType
from typing import Any

import httpx

from gemini_chat.client.config import ClientConfig, get_client_config
from gemini_chat.client.request_builder import build_request_body
from gemini_chat.models.schemas import (
    ParsedReply,
    ReplyMalformed,
    ReplyProviderError,
    ReplySuccess,
    RequestPart,
)

logger = logging.getLogger(__name__)

QUOTA_EXCEEDED_MARKER = "Quota exceeded"
FALLBACK_REPLY = "Sorry, I couldn't understand that."
NETWORK_ERROR_REPLY = "⚠️ Network error. Try again later."


def _error_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) and message else None


def _candidate_text(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return None
    part = parts[0]
    text = part.get("text") if isinstance(part, dict) else None
    return text if isinstance(text, str) and text else None


def parse_response(data: Any) -> ParsedReply:
    """Classify a decoded generateContent response.

    Args:
        data: Decoded JSON body of any shape.

    Returns:
        ReplySuccess when candidate text is present, otherwise
        ReplyProviderError when the body carries an error message,
        otherwise ReplyMalformed.
    """
    text = _candidate_text(data)
    if text is not None:
        return ReplySuccess(text=text)

    message = _error_message(data)
    if message is not None:
        return ReplyProviderError(message=message)

    return ReplyMalformed()


def is_quota_exceeded(data: Any) -> bool:
    """Check whether a response reports quota exhaustion."""
    message = _error_message(data)
    return message is not None and QUOTA_EXCEEDED_MARKER in message


def reply_text(parsed: ParsedReply) -> str:
    """Text shown to the user for a parsed response."""
    if isinstance(parsed, ReplySuccess):
        return parsed.text
    if isinstance(parsed, ReplyProviderError):
        return parsed.message
    return FALLBACK_REPLY


class GeminiClient:
    """Async client for the generateContent endpoint.

    Wraps an httpx.AsyncClient with:
    - Explicit, injected configuration (API key, models, timeout)
    - One retry against the fallback model on quota errors
    - Network failures mapped to a fixed reply text
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (used by tests).
        """
        self._config = config or get_client_config()
        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        await self._http.aclose()

    @staticmethod
    def generate_path(model: str) -> str:
        """Path of the generateContent endpoint for a model."""
        return f"/v1beta/models/{model}:generateContent"

    async def _post(self, model: str, body: dict[str, Any]) -> Any:
        """POST the body to a model and decode the JSON response.

        Non-2xx statuses are not raised: the body decides what happened.

        Raises:
            httpx.HTTPError: On transport failures.
            ValueError: If the body is not valid JSON.
        """
        response = await self._http.post(
            self.generate_path(model),
            params={"key": self._config.api_key},
            json=body,
        )
        logger.debug(f"{model} responded with HTTP {response.status_code}")
        return response.json()

    async def send(self, parts: list[RequestPart]) -> str:
        """Send one turn and return the reply text.

        Never raises for transport problems.

        Args:
            parts: Ordered request parts (at least one).

        Returns:
            Candidate text, the provider's error message, a generic fallback
            string, or the network error message.
        """
        body = build_request_body(parts)

        try:
            data = await self._post(self._config.primary_model, body)

            if is_quota_exceeded(data):
                logger.warning(
                    f"Quota exceeded on {self._config.primary_model}, "
                    f"retrying with {self._config.fallback_model}"
                )
                data = await self._post(self._config.fallback_model, body)

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Request to Gemini failed: {e!r}")
            return NETWORK_ERROR_REPLY

        parsed = parse_response(data)
        if isinstance(parsed, ReplyProviderError):
            logger.warning(f"Provider error: {parsed.message}")
        elif isinstance(parsed, ReplyMalformed):
            logger.warning("Response carried neither candidate text nor an error message")

        return reply_text(parsed)


# Module-level shared instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the shared Gemini client.

    Returns:
        The GeminiClient instance.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client


async def close_gemini_client() -> None:
    """Close the shared client, if one was created, and forget it."""
    global _gemini_client
    if _gemini_client is not None:
        await _gemini_client.aclose()
        _gemini_client = None
