"""FastAPI host for the chat UI.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted by gemini_chat.main)
"""

from gemini_chat.api.app import create_app

__all__ = ["create_app"]
