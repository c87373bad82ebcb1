"""Typed exception hierarchy for Notion-related errors.

This module defines all custom exceptions raised by the Notion API layer.
All exceptions inherit from NotionError so callers can catch any data-source
failure in one place, and include descriptive messages with context.
"""

from typing import Optional


class ExportError(Exception):
    """Base exception for all notion-notebooklm-sync errors.

    Use this to catch any application-level error from the export tool.
    """
    pass


class NotionError(ExportError):
    """Base exception for all Notion API errors."""
    pass


class InvalidCredentialsError(NotionError):
    """Raised when the API key is missing, malformed or rejected."""

    def __init__(self, reason: str = "API key is invalid"):
        super().__init__(reason)
        self.reason = reason


class ObjectNotFoundError(NotionError):
    """Raised when a database, page or block does not exist or is not shared."""

    def __init__(self, object_id: Optional[str] = None):
        if object_id:
            message = f"Object {object_id} not found"
        else:
            message = "Object not found"
        super().__init__(message)
        self.object_id = object_id


class APIUnreachableError(NotionError):
    """Raised when the Notion API cannot be reached or times out."""

    def __init__(self, endpoint: str = "https://api.notion.com", reason: Optional[str] = None):
        message = f"API is not available at {endpoint}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.endpoint = endpoint
        self.reason = reason


class APIAccessError(NotionError):
    """Raised for any other Notion API failure."""

    def __init__(self, message: str = "Notion API failure"):
        super().__init__(message)
