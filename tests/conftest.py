"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: ClientConfig with a fake API key
    - png_attachment / pdf_attachment / text_attachment: Selected files
    - gemini_reply: Builds a successful generateContent body
    - async_client: HTTPX client for the host application
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from gemini_chat.api.app import create_app
from gemini_chat.client.config import ClientConfig
from gemini_chat.models.schemas import PendingAttachment

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF"


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a client configuration pointing at a fake endpoint."""
    return ClientConfig(
        api_key="test-key-12345",
        base_url="https://gemini.test",
        primary_model="gemini-2.5-flash",
        fallback_model="gemini-pro",
    )


@pytest.fixture
def png_attachment() -> PendingAttachment:
    return PendingAttachment(
        name="cat.png",
        mime_type="image/png",
        size_bytes=len(PNG_BYTES),
        content=PNG_BYTES,
    )


@pytest.fixture
def pdf_attachment() -> PendingAttachment:
    return PendingAttachment(
        name="report.pdf",
        mime_type="application/pdf",
        size_bytes=len(PDF_BYTES),
        content=PDF_BYTES,
    )


@pytest.fixture
def text_attachment() -> PendingAttachment:
    return PendingAttachment(
        name="notes.txt",
        mime_type="text/plain",
        size_bytes=5,
        content=b"hello",
    )


@pytest.fixture
def gemini_reply() -> Callable[[str], dict[str, Any]]:
    """Return a factory for successful generateContent bodies."""

    def _reply(text: str) -> dict[str, Any]:
        return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}

    return _reply


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
