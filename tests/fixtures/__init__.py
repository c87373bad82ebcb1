"""Test fixtures for the Notion exporter.

This module provides builders for Notion API payloads: rich text items,
blocks, database entry pages, databases and paginated list responses.
"""

from .notion_payloads import (
    DATABASE_ID,
    DATABASE_URL,
    PAGE_ID,
    PAGE_URL,
    block,
    checkbox_property,
    database,
    list_response,
    page,
    rich_text,
    text_block,
    title_property,
)

__all__ = [
    'DATABASE_ID',
    'DATABASE_URL',
    'PAGE_ID',
    'PAGE_URL',
    'block',
    'checkbox_property',
    'database',
    'list_response',
    'page',
    'rich_text',
    'text_block',
    'title_property',
]
