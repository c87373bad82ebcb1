"""Conversion of Notion content to markdown.

This module provides the renderers for rich text, properties and blocks,
the block-tree walker, and the MarkdownConverter that assembles pages and
whole databases into a single markdown document.
"""

from .block_renderer import BlockRenderer
from .block_walker import BlockSource, BlockTreeWalker
from .markdown_converter import MarkdownConverter
from .property_renderer import property_to_text
from .rich_text_renderer import plain_text, rich_text_to_markdown

__all__ = [
    'BlockRenderer',
    'BlockSource',
    'BlockTreeWalker',
    'MarkdownConverter',
    'plain_text',
    'property_to_text',
    'rich_text_to_markdown',
]
