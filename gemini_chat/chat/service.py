"""Runs one request cycle: submit, encode, build, send, resolve."""

import logging

from gemini_chat.attachments.encoder import encode_attachment_async
from gemini_chat.chat.session import ChatSession, Submission
from gemini_chat.client.gemini_client import NETWORK_ERROR_REPLY, GeminiClient
from gemini_chat.client.request_builder import build_request_parts
from gemini_chat.models.schemas import Turn

logger = logging.getLogger(__name__)


class ChatService:
    """Connects a ChatSession to a GeminiClient.

    Every cycle ends with exactly one bot turn and the session back in idle,
    whatever goes wrong in between.
    """

    def __init__(self, session: ChatSession, client: GeminiClient) -> None:
        self._session = session
        self._client = client

    @property
    def session(self) -> ChatSession:
        return self._session

    def begin(self, text: str | None = None) -> Submission | None:
        """Submit the current input (or the given text) with the pending file.

        The user turn is appended right away so the caller can render it
        before awaiting the reply.

        Raises:
            ChatBusyError: If a request is already outstanding.
        """
        if text is None:
            text = self._session.input_text
        return self._session.submit(text, self._session.pending_attachment)

    async def complete(self, submission: Submission) -> Turn:
        """Send a submission and append the reply as a bot turn."""
        reply = NETWORK_ERROR_REPLY
        try:
            encoded = None
            if submission.attachment is not None:
                encoded = await encode_attachment_async(submission.attachment)
            parts = build_request_parts(submission.text, encoded)
            reply = await self._client.send(parts)
        except Exception:
            logger.exception("Request cycle failed")
        finally:
            turn = self._session.resolve(reply)

        return turn

    async def send(self, text: str | None = None) -> Turn | None:
        """Run a full cycle.

        Returns:
            The bot turn, or None when there was nothing to send.

        Raises:
            ChatBusyError: If a request is already outstanding.
        """
        submission = self.begin(text)
        if submission is None:
            return None
        return await self.complete(submission)
