"""Command-line interface for exporting Notion databases to markdown.

This package provides the `notion-sync` CLI tool that walks the user
through authentication, database selection and output naming, then writes
the whole database as one markdown document with progress indication and
error handling.
"""

from .export_command import ExportCommand
from .models import ExitCode, ExportSummary
from .errors import (
    CLIError,
    ConfigError,
    ConfigFilesystemError,
    OutputWriteError,
)

__all__ = [
    'ExportCommand',
    'ExitCode',
    'ExportSummary',
    'CLIError',
    'ConfigError',
    'ConfigFilesystemError',
    'OutputWriteError',
]
