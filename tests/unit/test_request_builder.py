"""Unit tests for request part assembly."""

import pytest
import pytest_check as check

from gemini_chat.attachments.encoder import encode_attachment
from gemini_chat.client.request_builder import (
    build_request_body,
    build_request_parts,
    display_text,
)
from gemini_chat.models.schemas import InlineDataPart, PendingAttachment, TextPart


class TestBuildRequestParts:
    """Tests for part ordering and default prompts."""

    def test_text_only(self) -> None:
        assert build_request_parts("  hi there  ") == [TextPart(text="hi there")]

    def test_image_without_text_gets_default_prompt_first(
        self, png_attachment: PendingAttachment
    ) -> None:
        encoded = encode_attachment(png_attachment)

        parts = build_request_parts("", encoded)

        assert parts == [
            TextPart(text="What's in this image?"),
            InlineDataPart(mime_type="image/png", data=encoded.data),
        ]

    def test_image_with_text(self, png_attachment: PendingAttachment) -> None:
        encoded = encode_attachment(png_attachment)

        parts = build_request_parts("what breed?", encoded)

        check.equal(parts[0], TextPart(text="what breed?"))
        check.equal(parts[1], InlineDataPart(mime_type="image/png", data=encoded.data))
        check.equal(len(parts), 2)

    def test_pdf_with_text(self, pdf_attachment: PendingAttachment) -> None:
        encoded = encode_attachment(pdf_attachment)

        parts = build_request_parts("describe", encoded)

        assert parts == [
            TextPart(text="describe"),
            InlineDataPart(mime_type="application/pdf", data=encoded.data),
        ]

    def test_pdf_without_text_gets_default_prompt(self, pdf_attachment: PendingAttachment) -> None:
        parts = build_request_parts("", encode_attachment(pdf_attachment))

        check.equal(parts[0], TextPart(text="Please analyze this PDF document."))
        check.is_instance(parts[1], InlineDataPart)

    def test_text_file_without_text(self, text_attachment: PendingAttachment) -> None:
        """Text-like files become one part with a header and the default prompt."""
        parts = build_request_parts("", encode_attachment(text_attachment))

        assert parts == [TextPart(text="File: notes.txt\n\nhello\n\nPlease analyze this file.")]

    def test_text_file_absorbs_user_text(self, text_attachment: PendingAttachment) -> None:
        parts = build_request_parts("summarize", encode_attachment(text_attachment))

        check.equal(len(parts), 1)
        check.equal(parts[0].text, "File: notes.txt\n\nhello\n\nsummarize")
        check.is_not_in("Please analyze this file.", parts[0].text)

    def test_nothing_to_send_raises(self) -> None:
        with pytest.raises(ValueError):
            build_request_parts("   ", None)


class TestDisplayText:
    def test_uses_user_text(self) -> None:
        assert display_text(" hello ") == "hello"

    def test_placeholder_for_file_only(self) -> None:
        check.equal(display_text(""), "📎 Uploaded a file")
        check.equal(display_text(None), "📎 Uploaded a file")


class TestBuildRequestBody:
    def test_wraps_parts_in_single_user_turn(self) -> None:
        body = build_request_body(
            [TextPart(text="hi"), InlineDataPart(mime_type="image/png", data="AAAA")]
        )

        assert body == {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": "hi"},
                        {"inline_data": {"mime_type": "image/png", "data": "AAAA"}},
                    ],
                }
            ]
        }
