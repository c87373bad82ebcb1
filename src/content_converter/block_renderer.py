"""Markdown rendering of single Notion blocks.

Dispatch follows the markdownify convention: a block of kind ``foo`` is
rendered by ``convert_foo``. Kinds without a method render as a
``[<kind> block]`` placeholder so block types added to Notion later never
break an export. Children are not rendered here; the block walker handles
them.
"""

from typing import Any, Dict

from src.models import Block, spans_from_api
from .rich_text_renderer import plain_text, rich_text_to_markdown

LAYOUT_KINDS = frozenset({'synced_block', 'column_list', 'column'})


def _rich_text(payload: Dict[str, Any], key: str = 'rich_text') -> str:
    return rich_text_to_markdown(spans_from_api(payload.get(key)))


def _plain(payload: Dict[str, Any], key: str = 'rich_text') -> str:
    return plain_text(spans_from_api(payload.get(key)))


def _file_url(payload: Dict[str, Any]) -> str:
    """Resolve the URL of an ``external`` or Notion-hosted ``file`` source."""
    source_type = payload.get('type')
    if source_type in ('external', 'file'):
        return (payload.get(source_type) or {}).get('url', '')
    return ''


class BlockRenderer:
    """Converts one block to zero or one markdown fragment.

    Example:
        >>> BlockRenderer().render(block)
        '- [x] Ship it'
    """

    def render(self, block: Block) -> str:
        """Render a block, returning '' for blocks that produce no text."""
        if block.kind in LAYOUT_KINDS:
            return ''
        converter = getattr(self, f"convert_{block.kind}", None)
        if converter is None:
            return f"[{block.kind} block]"
        return converter(block.payload)

    def convert_paragraph(self, payload):
        return _rich_text(payload)

    # Page titles occupy H1, so Notion heading levels shift down by one.
    def convert_heading_1(self, payload):
        return f"## {_rich_text(payload)}"

    def convert_heading_2(self, payload):
        return f"### {_rich_text(payload)}"

    def convert_heading_3(self, payload):
        return f"#### {_rich_text(payload)}"

    def convert_bulleted_list_item(self, payload):
        return f"- {_rich_text(payload)}"

    def convert_numbered_list_item(self, payload):
        return f"1. {_rich_text(payload)}"

    def convert_to_do(self, payload):
        checked = 'x' if payload.get('checked') else ' '
        return f"- [{checked}] {_rich_text(payload)}"

    def convert_code(self, payload):
        language = payload.get('language') or ''
        return f"```{language}\n{_plain(payload)}\n```"

    def convert_quote(self, payload):
        return f"> {_rich_text(payload)}"

    def convert_callout(self, payload):
        icon = (payload.get('icon') or {}).get('emoji') or ''
        return f"> {icon} {_rich_text(payload)}"

    def convert_divider(self, payload):
        return '---'

    def convert_toggle(self, payload):
        return f"<details>\n<summary>{_rich_text(payload)}</summary>\n</details>"

    def convert_image(self, payload):
        caption = _plain(payload, 'caption') or 'Image'
        return f"![{caption}]({_file_url(payload)})"

    def convert_bookmark(self, payload):
        url = payload.get('url', '')
        return f"[Bookmark: {url}]({url})"

    def convert_link_preview(self, payload):
        url = payload.get('url', '')
        return f"[Link: {url}]({url})"

    def convert_embed(self, payload):
        url = payload.get('url', '')
        return f"[Embedded content: {url}]({url})"

    def convert_video(self, payload):
        url = _file_url(payload)
        return f"[Video: {url}]({url})"

    def convert_table(self, payload):
        return '[Table - content extracted below]'

    def convert_table_row(self, payload):
        cells = ' | '.join(
            plain_text(spans_from_api(cell)) for cell in payload.get('cells') or []
        )
        return f"| {cells} |"

    def convert_child_page(self, payload):
        return f"**[{payload.get('title', '')}]**"

    def convert_child_database(self, payload):
        return f"**[Database: {payload.get('title', '')}]**"
