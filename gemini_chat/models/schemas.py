from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a transcript turn."""

    USER = "user"
    BOT = "bot"


class AttachmentKind(str, Enum):
    """How an attachment is sent to the model."""

    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"


class AttachmentRef(BaseModel):
    """Display-only reference to a file that was sent with a turn.

    Attributes:
        name: Original file name.
        mime_type: MIME type reported at selection time.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    mime_type: str


class PendingAttachment(BaseModel):
    """A selected file waiting to be sent.

    Lives only between selection and submit (or removal).

    Attributes:
        name: Original file name.
        mime_type: MIME type reported by the browser.
        size_bytes: File size in bytes.
        content: Raw file bytes.
    """

    name: str
    mime_type: str
    size_bytes: int = Field(ge=0)
    content: bytes = Field(repr=False)

    def to_ref(self) -> AttachmentRef:
        return AttachmentRef(name=self.name, mime_type=self.mime_type)


class EncodedAttachment(BaseModel):
    """A validated attachment ready for the request builder.

    Attributes:
        name: Original file name.
        mime_type: Normalized MIME type.
        kind: Classification (image, pdf or text).
        data: Base64 payload for image/pdf, decoded text for text-like files.
    """

    name: str
    mime_type: str
    kind: AttachmentKind
    data: str = Field(repr=False)


class TextPart(BaseModel):
    """Plain text fragment of a request turn."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_wire(self) -> dict[str, Any]:
        return {"text": self.text}


class InlineDataPart(BaseModel):
    """Base64 binary fragment of a request turn."""

    model_config = ConfigDict(frozen=True)

    type: Literal["inline_data"] = "inline_data"
    mime_type: str
    data: str = Field(repr=False)

    def to_wire(self) -> dict[str, Any]:
        return {"inline_data": {"mime_type": self.mime_type, "data": self.data}}


RequestPart = TextPart | InlineDataPart


class Turn(BaseModel):
    """One message in the transcript.

    Attributes:
        role: Who wrote it (user or bot).
        text: Text shown in the transcript.
        attachment: File sent with a user turn, if any.
        created_at: When the turn was appended.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
    attachment: AttachmentRef | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class ReplySuccess(BaseModel):
    """Response carried candidate text."""

    kind: Literal["success"] = "success"
    text: str


class ReplyProviderError(BaseModel):
    """Response carried an error object with a message."""

    kind: Literal["provider_error"] = "provider_error"
    message: str


class ReplyMalformed(BaseModel):
    """Response had neither candidate text nor an error message."""

    kind: Literal["malformed"] = "malformed"


ParsedReply = ReplySuccess | ReplyProviderError | ReplyMalformed
