"""Inline markdown rendering of Notion rich text spans."""

from typing import Sequence

from src.models import RichTextSpan


def span_to_markdown(span: RichTextSpan) -> str:
    """Render one span.

    Wrappers are applied in a fixed order: code, bold, italic,
    strikethrough, then the link around the formatted text. Bold and
    italic together render as ``***text***``.
    """
    text = span.plain_text
    annotations = span.annotations

    if annotations.code:
        text = f"`{text}`"
    if annotations.bold:
        text = f"**{text}**"
    if annotations.italic:
        text = f"*{text}*"
    if annotations.strikethrough:
        text = f"~~{text}~~"

    if span.href:
        text = f"[{text}]({span.href})"

    return text


def rich_text_to_markdown(spans: Sequence[RichTextSpan]) -> str:
    """Render a span sequence as inline markdown, concatenated with no separator."""
    return ''.join(span_to_markdown(span) for span in spans)


def plain_text(spans: Sequence[RichTextSpan]) -> str:
    """Concatenate the unformatted text of all spans."""
    return ''.join(span.plain_text for span in spans)
