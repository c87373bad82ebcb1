"""Notion API access for the markdown exporter.

This package wraps the official notion-client SDK behind a paginated data
source with a typed exception hierarchy.
"""

from .errors import (
    ExportError,
    NotionError,
    InvalidCredentialsError,
    ObjectNotFoundError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "ExportError",
    "NotionError",
    "InvalidCredentialsError",
    "ObjectNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
]
