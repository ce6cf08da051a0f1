"""NiceGUI chat interface with single-file attachments."""

import logging

from nicegui import events, ui

from gemini_chat.attachments.encoder import ALLOWED_MIME_TYPES, MAX_FILE_SIZE, AttachmentError
from gemini_chat.chat.service import ChatService
from gemini_chat.chat.session import ChatSession
from gemini_chat.client.gemini_client import get_gemini_client
from gemini_chat.models.schemas import PendingAttachment, Role, Turn
from gemini_chat.ui.formatting import attachment_icon, clean_mime_type, markdown_to_html, plain_to_html

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body {
        background: linear-gradient(135deg, #1e1b4b 0%, #581c87 50%, #0f172a 100%);
        min-height: 100vh;
    }

    .app-container {
        background: rgba(255, 255, 255, 0.05);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 24px;
        backdrop-filter: blur(16px);
        overflow: hidden;
    }

    .header {
        background: linear-gradient(90deg, rgba(79, 70, 229, 0.2), rgba(147, 51, 234, 0.2));
        border-bottom: 1px solid rgba(255, 255, 255, 0.1);
    }

    .message-user {
        background: linear-gradient(135deg, #4f46e5 0%, #9333ea 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-bot {
        background: rgba(255, 255, 255, 0.1);
        border: 1px solid rgba(255, 255, 255, 0.1);
        color: #f3f4f6;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: linear-gradient(135deg, #3b82f6 0%, #06b6d4 100%); }
    .avatar-bot { background: linear-gradient(135deg, #6366f1 0%, #9333ea 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #818cf8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; background: #c084fc; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; background: #f472b6; }

    @keyframes bounce {
        0%, 60%, 100% { transform: scale(1); }
        30% { transform: scale(1.3); }
    }

    .input-box {
        background: rgba(255, 255, 255, 0.05);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 16px;
        transition: border-color 0.2s;
    }
    .input-box:focus-within { border-color: rgba(99, 102, 241, 0.5); }

    .send-btn { background: linear-gradient(90deg, #4f46e5 0%, #9333ea 100%) !important; }
</style>
"""

ACCEPT = ",".join(sorted(ALLOWED_MIME_TYPES))


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()
    service = ChatService(session, get_gemini_client())

    messages_container: ui.column
    scroll_area: ui.scroll_area
    attachment_row: ui.row
    input_field: ui.input
    send_btn: ui.button
    upload: ui.upload

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-bot"
        icon = "person" if is_user else "smart_toy"
        avatar_classes = f"w-9 h-9 shrink-0 rounded-full flex items-center justify-center {css}"
        with ui.element("div").classes(avatar_classes):
            ui.icon(icon).classes("text-white text-lg")

    def render_turn(turn: Turn) -> None:
        is_user = turn.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"

        with ui.row().classes(f"w-full {align} gap-3 items-end no-wrap"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[75%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                    if turn.attachment:
                        with ui.row().classes("items-center gap-1 text-xs opacity-80 mb-1"):
                            ui.icon(attachment_icon(turn.attachment)).classes("text-sm")
                            ui.label(turn.attachment.name)
                    # Render markdown for bot, plain text for user
                    content = plain_to_html(turn.text) if is_user else markdown_to_html(turn.text)
                    ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                ui.label(turn.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar(False)
            with ui.element("div").classes("message-bot px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for turn in session.turns:
                render_turn(turn)
            if session.loading:
                render_typing_indicator()
        scroll_area.scroll_to(percent=1.0)

    def refresh_attachment() -> None:
        attachment_row.clear()
        pending = session.pending_attachment
        attachment_row.set_visibility(pending is not None)
        if pending is None:
            return
        with attachment_row:
            ui.chip(
                pending.name,
                icon=attachment_icon(pending.to_ref()),
                removable=True,
                on_value_change=lambda e: remove_attachment() if not e.value else None,
            ).props("color=indigo-7 text-color=white dense")

    def refresh_controls() -> None:
        session.input_text = input_field.value or ""
        send_btn.set_enabled(session.can_submit)
        input_field.set_enabled(not session.loading)
        upload.set_enabled(not session.loading)

    def remove_attachment() -> None:
        session.remove_attachment()
        refresh_attachment()
        refresh_controls()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        pending = PendingAttachment(
            name=e.file.name,
            mime_type=clean_mime_type(e.file.content_type),
            size_bytes=len(content),
            content=content,
        )
        try:
            session.select_attachment(pending)
        except AttachmentError as err:
            logger.info(f"Rejected attachment {pending.name}: {err}")
            ui.notify(str(err), type="negative")
        upload.reset()
        refresh_attachment()
        refresh_controls()

    def handle_rejected() -> None:
        ui.notify("File is too large. Maximum allowed is 10MB.", type="negative")

    async def send_message() -> None:
        session.input_text = input_field.value or ""
        if not session.can_submit:
            return

        submission = service.begin()
        if submission is None:
            return

        input_field.value = ""
        refresh_attachment()
        refresh_messages()
        refresh_controls()

        await service.complete(submission)

        refresh_messages()
        refresh_controls()

    def new_chat() -> None:
        if session.loading:
            return
        session.clear()
        input_field.value = ""
        refresh_attachment()
        refresh_messages()
        refresh_controls()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-4xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-6 py-5 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-white text-3xl")
                with ui.column().classes("gap-0"):
                    ui.label("Gemini AI").classes("text-xl font-bold text-indigo-100")
                    ui.label("Always here to help").classes("text-xs text-indigo-300")
            with ui.row().classes("items-center gap-3"):
                ui.badge("Online", color="green-5").props("rounded")
                ui.button(icon="add", on_click=new_chat).props("flat round color=white")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full") as scroll_area,
            ui.column().classes("w-full p-6"),
        ):
            messages_container = ui.column().classes("w-full gap-6")

        # Input
        with ui.column().classes("w-full p-4 gap-2"):
            attachment_row = ui.row().classes("w-full gap-2")
            with ui.row().classes("w-full items-center gap-3 input-box p-2 no-wrap"):
                upload = (
                    ui.upload(
                        on_upload=handle_upload,
                        on_rejected=handle_rejected,
                        max_file_size=MAX_FILE_SIZE,
                        max_files=1,
                        auto_upload=True,
                    )
                    .props(f'accept="{ACCEPT}" flat dense hide-upload-btn')
                    .classes("max-w-[3rem]")
                )
                input_field = (
                    ui.input(placeholder="Type your message...", on_change=lambda _: refresh_controls())
                    .props("borderless dense dark")
                    .classes("flex-grow px-2")
                    .on("keydown.enter.prevent", send_message)
                )
                send_btn = (
                    ui.button(icon="send", on_click=send_message)
                    .props("round unelevated")
                    .classes("send-btn")
                )

    refresh_messages()
    refresh_attachment()
    refresh_controls()
