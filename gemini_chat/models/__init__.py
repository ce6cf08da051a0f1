"""Pydantic models for the chat pipeline.

Provides type safety and validation for everything that flows between the
input form, the request builder, the HTTP client and the transcript.

Models:
    - Turn: Individual message in the transcript
    - AttachmentRef / PendingAttachment / EncodedAttachment: File lifecycle
    - TextPart / InlineDataPart: Fragments of an outgoing request
    - ReplySuccess / ReplyProviderError / ReplyMalformed: Parsed responses
"""

from gemini_chat.models.schemas import (
    AttachmentKind,
    AttachmentRef,
    EncodedAttachment,
    InlineDataPart,
    ParsedReply,
    PendingAttachment,
    ReplyMalformed,
    ReplyProviderError,
    ReplySuccess,
    RequestPart,
    Role,
    TextPart,
    Turn,
)

__all__ = [
    "AttachmentKind",
    "AttachmentRef",
    "EncodedAttachment",
    "InlineDataPart",
    "ParsedReply",
    "PendingAttachment",
    "ReplyMalformed",
    "ReplyProviderError",
    "ReplySuccess",
    "RequestPart",
    "Role",
    "TextPart",
    "Turn",
]
