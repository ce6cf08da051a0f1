"""Transcript state machine for one chat session.

Holds the ordered turns, the input text, the single pending-attachment slot
and the Idle/Sending state. Only one request cycle may be outstanding: a
submit while sending is rejected here, whatever the UI does.
"""

import logging
from enum import Enum

from pydantic import BaseModel

from gemini_chat.attachments.encoder import validate_attachment
from gemini_chat.client.request_builder import display_text
from gemini_chat.models.schemas import PendingAttachment, Role, Turn

logger = logging.getLogger(__name__)

GREETING = "Hey 👋 I'm Gemini Flash. Ask me anything!"


class ChatState(str, Enum):
    """Request cycle state."""

    IDLE = "idle"
    SENDING = "sending"


class InvalidTransitionError(Exception):
    """Raised when an operation is not allowed in the current state."""

    pass


class ChatBusyError(InvalidTransitionError):
    """Raised when submitting while a request is still outstanding."""

    pass


class Submission(BaseModel):
    """What a submit hands over to the request pipeline.

    Attributes:
        text: Trimmed user text (may be empty when a file is attached).
        attachment: The file that was pending at submit time.
    """

    text: str
    attachment: PendingAttachment | None = None


class ChatSession:
    """Manages chat state for a user session."""

    def __init__(self, greeting: str | None = GREETING) -> None:
        self._greeting = greeting
        self._turns: list[Turn] = []
        self.input_text: str = ""
        self.pending_attachment: PendingAttachment | None = None
        self.state: ChatState = ChatState.IDLE
        self._add_greeting()

    def _add_greeting(self) -> None:
        if self._greeting:
            self._turns.append(Turn(role=Role.BOT, text=self._greeting))

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def loading(self) -> bool:
        return self.state is ChatState.SENDING

    @property
    def can_submit(self) -> bool:
        """Whether the send control should be enabled."""
        return not self.loading and (
            bool(self.input_text.strip()) or self.pending_attachment is not None
        )

    def select_attachment(self, pending: PendingAttachment) -> None:
        """Put a file into the pending slot, replacing any previous one.

        Raises:
            AttachmentError: If the file is too large or of an unsupported
                type. The slot is left untouched.
        """
        validate_attachment(pending)
        self.pending_attachment = pending
        logger.info(f"Attached {pending.name} ({pending.mime_type}, {pending.size_bytes} bytes)")

    def remove_attachment(self) -> None:
        self.pending_attachment = None

    def submit(
        self,
        text: str,
        attachment: PendingAttachment | None = None,
    ) -> Submission | None:
        """Append the user turn and enter the sending state.

        Args:
            text: What the user typed.
            attachment: The pending file, if any.

        Returns:
            The submission to send, or None when there was nothing to send.

        Raises:
            ChatBusyError: If a request is already outstanding.
        """
        if self.state is not ChatState.IDLE:
            raise ChatBusyError("A message is already being sent")

        stripped = text.strip()
        if not stripped and attachment is None:
            return None

        self._turns.append(
            Turn(
                role=Role.USER,
                text=display_text(stripped),
                attachment=attachment.to_ref() if attachment else None,
            )
        )
        self.input_text = ""
        self.pending_attachment = None
        self.state = ChatState.SENDING

        return Submission(text=stripped, attachment=attachment)

    def resolve(self, reply_text: str) -> Turn:
        """Append the bot reply and return to idle.

        Raises:
            InvalidTransitionError: If no request is outstanding.
        """
        if self.state is not ChatState.SENDING:
            raise InvalidTransitionError("No message is being sent")

        turn = Turn(role=Role.BOT, text=reply_text)
        self._turns.append(turn)
        self.state = ChatState.IDLE
        return turn

    def clear(self) -> None:
        """Start a new conversation.

        Raises:
            ChatBusyError: If a request is still outstanding.
        """
        if self.state is not ChatState.IDLE:
            raise ChatBusyError("Cannot clear while a message is being sent")

        self._turns.clear()
        self.input_text = ""
        self.pending_attachment = None
        self._add_greeting()
