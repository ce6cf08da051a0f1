"""Client configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent client.
The API key is injected into the client through this object, never read
from module globals by the client itself.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_PRIMARY_MODEL = "gemini-2.5-flash"
DEFAULT_FALLBACK_MODEL = "gemini-pro"


class ClientConfig(BaseModel):
    """Configuration for the Gemini client.

    Attributes:
        api_key: API key sent as the `key` query parameter.
        base_url: Generation endpoint root.
        primary_model: Model tried first.
        fallback_model: Model retried once when the primary reports quota exhaustion.
        timeout: Request timeout in seconds (None waits indefinitely).
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GOOGLE_API_KEY") or os.getenv("VITE_GOOGLE_API", ""),
        description="API key for the generative language endpoint",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Generation endpoint root URL",
    )
    primary_model: str = Field(
        default=DEFAULT_PRIMARY_MODEL,
        min_length=1,
        description="Model to use",
    )
    fallback_model: str = Field(
        default=DEFAULT_FALLBACK_MODEL,
        min_length=1,
        description="Model retried once on quota errors",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GOOGLE_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return ClientConfig()
