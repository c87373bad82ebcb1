"""Page and document assembly for the Notion markdown export.

A page section is the page title, its non-title properties, the rendered
block tree and a link back to Notion. The document is a header followed by
all page sections in source order. Pages are processed strictly one after
another.
"""

import logging
from datetime import UTC, date, datetime
from typing import Callable, List, Optional, Sequence

from src.models import Database, ExportDocument, Page
from .block_walker import BlockSource, BlockTreeWalker
from .property_renderer import property_to_text

logger = logging.getLogger(__name__)

UNTITLED = 'Untitled'

ProgressCallback = Callable[[int, int, str], None]


class MarkdownConverter:
    """Converts Notion pages and databases to markdown.

    Block content is fetched through the given source while converting, so
    conversion is I/O bound. A failure while fetching one page's blocks is
    written into that page's section as an italic note and the export
    carries on; every other failure propagates.

    Example:
        >>> converter = MarkdownConverter(api_wrapper)
        >>> markdown = converter.database_to_markdown(database, pages)
    """

    def __init__(self, source: BlockSource, walker: Optional[BlockTreeWalker] = None):
        """Initialize the converter.

        Args:
            source: Data source used to list block children
            walker: Optional pre-built walker (defaults to one over ``source``)
        """
        self.walker = walker or BlockTreeWalker(source)

    @staticmethod
    def page_title(page: Page) -> str:
        title_prop = page.title_property
        if title_prop is None:
            return UNTITLED
        return property_to_text(title_prop) or UNTITLED

    @staticmethod
    def property_lines(page: Page) -> List[str]:
        """Return ``**name:** value`` lines for non-empty, non-title properties."""
        lines = []
        for name, prop in page.properties.items():
            if prop.is_title:
                continue
            value = property_to_text(prop)
            if value:
                lines.append(f"**{name}:** {value}")
        return lines

    def page_to_markdown(
        self,
        page: Page,
        index: int = 0,
        total: int = 1,
        on_progress: Optional[ProgressCallback] = None
    ) -> str:
        """Render one page section.

        Args:
            page: The database entry to render
            index: Zero-based position of the page, for progress reporting
            total: Number of pages being exported, for progress reporting
            on_progress: Called with (index, total, title) before fetching

        Returns:
            Markdown for the page, sections separated by blank lines
        """
        title = self.page_title(page)
        logger.info(f"Processing {index + 1}/{total} - {title[:40]}")
        if on_progress is not None:
            on_progress(index, total, title)

        sections = [f"# {title}"]

        properties = self.property_lines(page)
        if properties:
            # Two trailing spaces force a markdown line break.
            sections.append('  \n'.join(properties))

        try:
            content = self.walker.walk(page.root_block_id)
            if content.strip():
                sections.append(content)
        except Exception as e:
            logger.warning(f"Could not fetch content of page {page.id}: {e}")
            sections.append(f"*[Could not fetch page content: {e}]*")

        sections.append(f"*Source: [View in Notion]({page.url})*")
        return '\n\n'.join(sections)

    def build_document(
        self,
        database: Database,
        pages: Sequence[Page],
        exported_on: Optional[date] = None,
        on_progress: Optional[ProgressCallback] = None
    ) -> ExportDocument:
        """Render every page of a database into an ExportDocument."""
        total = len(pages)
        sections = tuple(
            self.page_to_markdown(page, index, total, on_progress)
            for index, page in enumerate(pages)
        )
        return ExportDocument(
            title=database.title,
            exported_on=exported_on or datetime.now(UTC).date(),
            entry_count=total,
            source_url=database.url,
            sections=sections,
        )

    def database_to_markdown(
        self,
        database: Database,
        pages: Sequence[Page],
        exported_on: Optional[date] = None,
        on_progress: Optional[ProgressCallback] = None
    ) -> str:
        """Render a whole database export as one markdown string."""
        return self.build_document(database, pages, exported_on, on_progress).to_markdown()
