"""Depth-first markdown rendering of a Notion block tree.

Block trees are revealed lazily: a block's children are only known after
listing them with the block id as container id. The walker keeps an
explicit stack of child iterators instead of recursing, so pathologically
deep pages cannot exhaust the Python call stack. Output is identical to a
recursive pre-order walk: each block's line, then its subtree, then its
next sibling.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Protocol, Tuple

from src.models import Block
from .block_renderer import BlockRenderer

logger = logging.getLogger(__name__)

INDENT = '  '


class BlockSource(Protocol):
    """Anything that can list the direct children of a container."""

    def list_block_children(self, container_id: str) -> Iterable[Block]:
        ...


class BlockTreeWalker:
    """Renders every block below a container as indented markdown.

    Pagination and depth are unbounded. Errors raised by the source while
    listing children propagate unchanged to the caller.

    Example:
        >>> walker = BlockTreeWalker(api_wrapper)
        >>> markdown = walker.walk(page.id)
    """

    def __init__(self, source: BlockSource, renderer: Optional[BlockRenderer] = None):
        self.source = source
        self.renderer = renderer or BlockRenderer()

    def walk(self, container_id: str, depth: int = 0) -> str:
        """Render the subtree under ``container_id``.

        Args:
            container_id: Page or block id whose children are rendered
            depth: Indentation level of the container's direct children

        Returns:
            Newline-joined markdown lines, or '' if nothing renders
        """
        lines: List[str] = []
        stack: List[Tuple[Iterator[Block], int]] = [
            (iter(self.source.list_block_children(container_id)), depth)
        ]
        blocks_seen = 0

        while stack:
            children, level = stack[-1]
            block = next(children, None)
            if block is None:
                stack.pop()
                continue

            blocks_seen += 1
            markdown = self.renderer.render(block)
            if markdown:
                if level > 0:
                    markdown = INDENT * level + markdown
                lines.append(markdown)

            if block.has_children:
                stack.append((iter(self.source.list_block_children(block.id)), level + 1))

        logger.debug(f"Rendered {blocks_seen} block(s) under {container_id}")
        return '\n'.join(lines)
