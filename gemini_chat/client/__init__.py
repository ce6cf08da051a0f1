"""HTTP client for the Gemini generateContent endpoint.

Responsibilities:
    - Client configuration from the environment
    - Request part assembly from user text and attachments
    - Stateless POST with a single quota fallback retry
    - Response classification into success, provider error or malformed
"""

from gemini_chat.client.config import ClientConfig, get_client_config
from gemini_chat.client.gemini_client import (
    FALLBACK_REPLY,
    NETWORK_ERROR_REPLY,
    GeminiClient,
    close_gemini_client,
    get_gemini_client,
    is_quota_exceeded,
    parse_response,
    reply_text,
)
from gemini_chat.client.request_builder import build_request_body, build_request_parts, display_text

__all__ = [
    "FALLBACK_REPLY",
    "NETWORK_ERROR_REPLY",
    "ClientConfig",
    "GeminiClient",
    "build_request_body",
    "build_request_parts",
    "close_gemini_client",
    "display_text",
    "get_client_config",
    "get_gemini_client",
    "is_quota_exceeded",
    "parse_response",
    "reply_text",
]
