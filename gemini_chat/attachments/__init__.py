"""Attachment handling for files sent alongside chat messages.

Responsibilities:
    - Size limit (10MB) and MIME allow-list validation
    - Classification into image, PDF or text-like files
    - Base64 encoding of binary files, UTF-8 decoding of text files

Invalid files are rejected here and never reach the request builder.
"""

from gemini_chat.attachments.encoder import (
    ALLOWED_MIME_TYPES,
    MAX_FILE_SIZE,
    AttachmentError,
    FileTooLarge,
    UnsupportedType,
    encode_attachment,
    encode_attachment_async,
    validate_attachment,
)

__all__ = [
    "ALLOWED_MIME_TYPES",
    "MAX_FILE_SIZE",
    "AttachmentError",
    "FileTooLarge",
    "UnsupportedType",
    "encode_attachment",
    "encode_attachment_async",
    "validate_attachment",
]
