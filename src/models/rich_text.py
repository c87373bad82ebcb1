"""Rich text span data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Annotations:
    """Inline formatting flags carried by a rich text span.

    Absent flags in the API payload are treated as False.
    """
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    code: bool = False

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> 'Annotations':
        data = data or {}
        return cls(
            bold=bool(data.get('bold')),
            italic=bool(data.get('italic')),
            strikethrough=bool(data.get('strikethrough')),
            code=bool(data.get('code')),
        )


@dataclass(frozen=True)
class RichTextSpan:
    """A run of text with uniform formatting and an optional hyperlink.

    Attributes:
        plain_text: Unformatted text of the span
        annotations: Formatting flags applied to the whole span
        href: Link target, None when the span is not a link
    """
    plain_text: str
    annotations: Annotations = field(default_factory=Annotations)
    href: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'RichTextSpan':
        return cls(
            plain_text=data.get('plain_text') or '',
            annotations=Annotations.from_api(data.get('annotations')),
            href=data.get('href') or None,
        )


def spans_from_api(items: Optional[List[Dict[str, Any]]]) -> List[RichTextSpan]:
    """Parse a Notion rich_text array, treating None as empty."""
    return [RichTextSpan.from_api(item) for item in items or []]
