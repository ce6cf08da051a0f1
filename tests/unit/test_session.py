"""Unit tests for the transcript state machine."""

import pytest
import pytest_check as check

from gemini_chat.attachments.encoder import MAX_FILE_SIZE, FileTooLarge, UnsupportedType
from gemini_chat.chat.session import (
    GREETING,
    ChatBusyError,
    ChatSession,
    ChatState,
    InvalidTransitionError,
)
from gemini_chat.models.schemas import AttachmentRef, PendingAttachment, Role


class TestInitialState:
    def test_starts_idle_with_greeting(self) -> None:
        session = ChatSession()

        check.equal(session.state, ChatState.IDLE)
        check.is_false(session.loading)
        check.equal(len(session.turns), 1)
        check.equal(session.turns[0].role, Role.BOT)
        check.equal(session.turns[0].text, GREETING)

    def test_greeting_can_be_disabled(self) -> None:
        assert ChatSession(greeting=None).turns == ()


class TestSubmit:
    """Tests for the submit transition."""

    def test_empty_submit_is_noop(self) -> None:
        session = ChatSession(greeting=None)

        result = session.submit("   ")

        check.is_none(result)
        check.equal(session.turns, ())
        check.equal(session.state, ChatState.IDLE)

    def test_text_submit_appends_user_turn(self) -> None:
        session = ChatSession(greeting=None)
        session.input_text = "  Hello  "

        submission = session.submit(session.input_text)

        check.equal(submission.text, "Hello")
        check.is_none(submission.attachment)
        check.equal(session.turns[-1].role, Role.USER)
        check.equal(session.turns[-1].text, "Hello")
        check.equal(session.input_text, "")
        check.equal(session.state, ChatState.SENDING)
        check.is_true(session.loading)

    def test_file_only_submit(self, png_attachment: PendingAttachment) -> None:
        session = ChatSession(greeting=None)
        session.select_attachment(png_attachment)

        submission = session.submit("", session.pending_attachment)

        turn = session.turns[-1]
        check.equal(turn.text, "📎 Uploaded a file")
        check.equal(turn.attachment, AttachmentRef(name="cat.png", mime_type="image/png"))
        check.equal(submission.attachment, png_attachment)
        check.is_none(session.pending_attachment)

    def test_submit_while_sending_is_rejected(self) -> None:
        session = ChatSession(greeting=None)
        session.submit("first")

        with pytest.raises(ChatBusyError):
            session.submit("second")

        check.equal(len(session.turns), 1)

    def test_can_submit(self, text_attachment: PendingAttachment) -> None:
        session = ChatSession()
        check.is_false(session.can_submit)

        session.input_text = "hi"
        check.is_true(session.can_submit)

        session.input_text = ""
        session.select_attachment(text_attachment)
        check.is_true(session.can_submit)

        session.submit("", text_attachment)
        check.is_false(session.can_submit)


class TestResolve:
    def test_resolve_appends_bot_turn_and_returns_to_idle(self) -> None:
        session = ChatSession(greeting=None)
        session.submit("Hi")

        turn = session.resolve("Hello!")

        check.equal(turn.role, Role.BOT)
        check.equal(turn.text, "Hello!")
        check.equal([t.role for t in session.turns], [Role.USER, Role.BOT])
        check.equal(session.state, ChatState.IDLE)

    def test_resolve_while_idle_is_rejected(self) -> None:
        with pytest.raises(InvalidTransitionError):
            ChatSession().resolve("orphan")


class TestAttachments:
    """Tests for the pending attachment slot."""

    def test_oversized_file_never_enters_slot(self) -> None:
        session = ChatSession()
        big = PendingAttachment(
            name="huge.png", mime_type="image/png", size_bytes=MAX_FILE_SIZE + 1, content=b""
        )

        with pytest.raises(FileTooLarge):
            session.select_attachment(big)

        assert session.pending_attachment is None

    def test_rejected_file_keeps_previous_selection(self, text_attachment: PendingAttachment) -> None:
        session = ChatSession()
        session.select_attachment(text_attachment)
        bad = PendingAttachment(name="a.zip", mime_type="application/zip", size_bytes=1, content=b"x")

        with pytest.raises(UnsupportedType):
            session.select_attachment(bad)

        assert session.pending_attachment == text_attachment

    def test_new_selection_replaces_old(
        self, text_attachment: PendingAttachment, png_attachment: PendingAttachment
    ) -> None:
        session = ChatSession()
        session.select_attachment(text_attachment)
        session.select_attachment(png_attachment)

        assert session.pending_attachment == png_attachment

    def test_remove_attachment(self, png_attachment: PendingAttachment) -> None:
        session = ChatSession()
        session.select_attachment(png_attachment)
        session.remove_attachment()

        assert session.pending_attachment is None


class TestClear:
    def test_clear_resets_to_greeting(self) -> None:
        session = ChatSession()
        session.submit("Hi")
        session.resolve("Hello")

        session.clear()

        check.equal(len(session.turns), 1)
        check.equal(session.turns[0].text, GREETING)

    def test_clear_while_sending_is_rejected(self) -> None:
        session = ChatSession()
        session.submit("Hi")

        with pytest.raises(ChatBusyError):
            session.clear()
