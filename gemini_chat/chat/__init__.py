"""Chat session state and request cycle orchestration.

Responsibilities:
    - Ordered transcript of user and bot turns
    - Single pending-attachment slot
    - Idle/Sending state with an explicit single-request guard
    - Running one cycle from submit to resolved reply
"""

from gemini_chat.chat.service import ChatService
from gemini_chat.chat.session import (
    GREETING,
    ChatBusyError,
    ChatSession,
    ChatState,
    InvalidTransitionError,
    Submission,
)

__all__ = [
    "GREETING",
    "ChatBusyError",
    "ChatService",
    "ChatSession",
    "ChatState",
    "InvalidTransitionError",
    "Submission",
]
