"""Text formatting helpers for chat bubbles."""

import html
import re

from gemini_chat.attachments.encoder import classify
from gemini_chat.models.schemas import AttachmentKind, AttachmentRef

ATTACHMENT_ICONS = {
    AttachmentKind.IMAGE: "image",
    AttachmentKind.PDF: "picture_as_pdf",
    AttachmentKind.TEXT: "description",
}


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports: bold, italic, inline code, code blocks, links, lists.
    """
    # Escape HTML entities first, quotes included, so nothing leaves an attribute
    text = html.escape(text, quote=True)

    # Code blocks (```code```)
    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        r'<pre class="bg-gray-900 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs"><code>\2</code></pre>',
        text,
    )

    # Inline code (`code`)
    text = re.sub(
        r"`([^`]+)`",
        r'<code class="bg-white/10 text-pink-300 px-1.5 py-0.5 rounded text-xs">\1</code>',
        text,
    )

    # Bold (**text** or __text__)
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)

    # Italic (*text* or _text_)
    text = re.sub(r"\*([^*\n]+)\*", r"<em>\1</em>", text)
    text = re.sub(r"(?<!\w)_([^_\n]+)_(?!\w)", r"<em>\1</em>", text)

    # Links [text](url)
    text = re.sub(
        r"\[([^\]]+)\]\((https?://[^)\s]+)\)",
        r'<a href="\2" class="text-indigo-300 underline" target="_blank">\1</a>',
        text,
    )

    text = _wrap_list(text, r"^[-*]\s+", "ul", "list-disc")
    text = _wrap_list(text, r"^\d+\.\s+", "ol", "list-decimal")

    # Line breaks (preserve newlines as <br>)
    return text.replace("\n", "<br>")


def _wrap_list(text: str, marker: str, tag: str, style: str) -> str:
    lines = text.split("\n")
    in_list = False
    result = []
    for line in lines:
        stripped = line.strip()
        if re.match(marker, stripped):
            if not in_list:
                result.append(f'<{tag} class="{style} list-inside my-2 space-y-1">')
                in_list = True
            item = re.sub(marker, "", stripped)
            result.append(f"<li>{item}</li>")
        else:
            if in_list:
                result.append(f"</{tag}>")
                in_list = False
            result.append(line)
    if in_list:
        result.append(f"</{tag}>")
    return "\n".join(result)


def plain_to_html(text: str) -> str:
    """Escape user text and keep its line breaks."""
    return html.escape(text).replace("\n", "<br>")


def attachment_icon(attachment: AttachmentRef) -> str:
    """Material icon name for an attachment chip."""
    return ATTACHMENT_ICONS[classify(attachment.mime_type)]


def clean_mime_type(content_type: str | None) -> str:
    """Reduce a browser-reported content type to its bare, lower-case form.

    Uploads can arrive as `Text/CSV; charset=utf-8`; the allow-list only
    knows `text/csv`.
    """
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()
