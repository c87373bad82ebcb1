"""Data models for CLI operations."""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Export finished, or there was nothing to export
    - GENERAL_ERROR (1): Validation, config or filesystem failure
    - AUTH_ERROR (3): The Notion API key was missing or rejected
    - NETWORK_ERROR (4): Notion API unreachable or returned an error
    - NOT_FOUND (5): The selected database does not exist or is not shared

    Example:
        >>> sys.exit(ExitCode.SUCCESS)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4
    NOT_FOUND = 5


@dataclass
class ExportSummary:
    """Result of a completed export, shown to the user.

    Attributes:
        database_title: Title of the exported database
        entry_count: Number of pages written
        file_path: Absolute path of the markdown file
        size_bytes: Size of the written file
    """
    database_title: str
    entry_count: int
    file_path: Path
    size_bytes: int

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"
