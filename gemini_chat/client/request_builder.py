"""Assembles the parts of a single user turn sent to the model."""

from typing import Any

from gemini_chat.models.schemas import (
    AttachmentKind,
    EncodedAttachment,
    InlineDataPart,
    RequestPart,
    TextPart,
)

DEFAULT_IMAGE_PROMPT = "What's in this image?"
DEFAULT_PDF_PROMPT = "Please analyze this PDF document."
DEFAULT_FILE_PROMPT = "Please analyze this file."
UPLOAD_DISPLAY_TEXT = "📎 Uploaded a file"


def build_request_parts(
    user_text: str | None,
    attachment: EncodedAttachment | None = None,
) -> list[RequestPart]:
    """Build the ordered parts for one request.

    Text-like attachments absorb the user text into a single combined part.
    Images and PDFs get an inline data part, preceded by the user text or a
    default prompt when the user typed nothing.

    Args:
        user_text: What the user typed (may be empty).
        attachment: Encoded file, if one was selected.

    Returns:
        Non-empty list of request parts.

    Raises:
        ValueError: If neither text nor attachment is given.
    """
    text = (user_text or "").strip()

    if not text and attachment is None:
        raise ValueError("A request needs text or an attachment")

    if attachment is None:
        return [TextPart(text=text)]

    if attachment.kind is AttachmentKind.TEXT:
        combined = (
            f"File: {attachment.name}\n\n"
            f"{attachment.data}\n\n"
            f"{text or DEFAULT_FILE_PROMPT}"
        )
        return [TextPart(text=combined)]

    if not text:
        text = DEFAULT_IMAGE_PROMPT if attachment.kind is AttachmentKind.IMAGE else DEFAULT_PDF_PROMPT

    return [
        TextPart(text=text),
        InlineDataPart(mime_type=attachment.mime_type, data=attachment.data),
    ]


def display_text(user_text: str | None) -> str:
    """Text shown in the transcript for a user turn."""
    text = (user_text or "").strip()
    return text or UPLOAD_DISPLAY_TEXT


def build_request_body(parts: list[RequestPart]) -> dict[str, Any]:
    """Wrap parts in a single stateless user-role content turn."""
    return {"contents": [{"role": "user", "parts": [part.to_wire() for part in parts]}]}
