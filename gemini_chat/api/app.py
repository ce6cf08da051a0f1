"""Host application for the chat page.

The NiceGUI page is mounted on this app by gemini_chat.main. The app owns
the lifetime of the shared Gemini client: its connection pool is released
when the server shuts down.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from gemini_chat import __version__
from gemini_chat.client.gemini_client import close_gemini_client

logger = logging.getLogger(__name__)

SERVICE_NAME = "gemini-chat"


class HealthStatus(BaseModel):
    """Body of GET /health."""

    status: str = "healthy"
    service: str = SERVICE_NAME
    version: str = __version__


def cors_origins_from_env() -> list[str]:
    """Origins allowed by CORS, from comma-separated CORS_ORIGINS (default: any)."""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"{app.title} {app.version} starting")
    try:
        yield
    finally:
        await close_gemini_client()
        logger.info(f"{app.title} stopped, Gemini client closed")


def create_app(cors_origins: list[str] | None = None) -> FastAPI:
    """Build the host application.

    Args:
        cors_origins: Allowed CORS origins. Read from CORS_ORIGINS when omitted.

    Returns:
        FastAPI app with CORS and the health route, ready for ui.run_with.
    """
    application = FastAPI(
        title="Gemini Chat",
        version=__version__,
        lifespan=lifespan,
    )

    origins = cors_origins if cors_origins is not None else cors_origins_from_env()
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @application.get("/health", response_model=HealthStatus)
    async def health() -> HealthStatus:
        return HealthStatus()

    return application
