"""Data models for Notion databases, pages, blocks and the export document."""

from src.models.block import Block
from src.models.export_document import ExportDocument, SECTION_SEPARATOR
from src.models.notion_page import Database, Page
from src.models.property import Property
from src.models.rich_text import Annotations, RichTextSpan, spans_from_api

__all__ = [
    'Annotations',
    'Block',
    'Database',
    'ExportDocument',
    'Page',
    'Property',
    'RichTextSpan',
    'SECTION_SEPARATOR',
    'spans_from_api',
]
