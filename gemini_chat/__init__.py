"""Gemini Chat - browser chat client for the Gemini generateContent API.

Combines NiceGUI for the chat interface, httpx for the model call,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - attachments: File validation and encoding
    - client: Request building and the HTTP client with quota fallback
    - chat: Transcript state machine and request cycle
    - ui: Web interface for chat interactions
    - api: Host application and health route
    - models: Shared schemas
"""

__version__ = "0.1.0"
