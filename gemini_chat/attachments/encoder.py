"""Attachment validation and encoding.

Checks a selected file against the size limit and MIME allow-list, then turns
it into a base64 payload (images, PDFs) or plain text (text-like files).
"""

import asyncio
import base64
import logging

from gemini_chat.models.schemas import AttachmentKind, EncodedAttachment, PendingAttachment

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
ALLOWED_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "text/plain",
        "text/csv",
        "text/html",
        "text/css",
        "text/javascript",
        "application/json",
    }
)


class AttachmentError(Exception):
    """Raised when a selected file cannot be attached."""

    pass


class FileTooLarge(AttachmentError):
    """Raised when a file exceeds MAX_FILE_SIZE."""

    def __init__(self, name: str, size_bytes: int) -> None:
        size_mb = size_bytes / (1024 * 1024)
        super().__init__(f"{name} is too large ({size_mb:.1f}MB). Maximum allowed is 10MB.")
        self.name = name
        self.size_bytes = size_bytes


class UnsupportedType(AttachmentError):
    """Raised when a file's MIME type is not in ALLOWED_MIME_TYPES."""

    def __init__(self, name: str, mime_type: str) -> None:
        super().__init__(
            f"{name} has an unsupported file type ({mime_type or 'unknown'}). "
            "Upload an image, a PDF or a text file."
        )
        self.name = name
        self.mime_type = mime_type


def classify(mime_type: str) -> AttachmentKind:
    """Decide how a file of the given (allowed) MIME type is encoded."""
    if mime_type.startswith("image/"):
        return AttachmentKind.IMAGE
    if mime_type == "application/pdf":
        return AttachmentKind.PDF
    return AttachmentKind.TEXT


def validate_attachment(pending: PendingAttachment) -> None:
    """Validate a selected file before it enters the pending slot.

    Args:
        pending: The selected file.

    Raises:
        FileTooLarge: If the file is larger than 10MB.
        UnsupportedType: If the MIME type is not allowed.
    """
    if pending.size_bytes > MAX_FILE_SIZE:
        raise FileTooLarge(pending.name, pending.size_bytes)

    if pending.mime_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedType(pending.name, pending.mime_type)


def encode_attachment(pending: PendingAttachment) -> EncodedAttachment:
    """Validate and encode a selected file.

    Args:
        pending: The selected file.

    Returns:
        EncodedAttachment with base64 data (image/pdf) or decoded text.

    Raises:
        FileTooLarge: If the file is larger than 10MB.
        UnsupportedType: If the MIME type is not allowed.
    """
    validate_attachment(pending)

    kind = classify(pending.mime_type)

    if kind is AttachmentKind.TEXT:
        # Undecodable bytes become U+FFFD, like a browser text reader
        data = pending.content.decode("utf-8", errors="replace")
    else:
        data = base64.b64encode(pending.content).decode("ascii")

    logger.debug(f"Encoded {pending.name} as {kind.value} ({pending.size_bytes} bytes)")

    return EncodedAttachment(
        name=pending.name,
        mime_type=pending.mime_type,
        kind=kind,
        data=data,
    )


async def encode_attachment_async(pending: PendingAttachment) -> EncodedAttachment:
    """Encode a file in a worker thread so the event loop stays responsive."""
    return await asyncio.to_thread(encode_attachment, pending)
