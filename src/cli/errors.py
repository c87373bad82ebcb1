"""Typed exception hierarchy for CLI-related errors.

This module defines the exceptions raised by the CLI layer: credential
store problems and output file failures. All inherit from CLIError.
"""

from typing import Optional

from src.notion_api.errors import ExportError


class CLIError(ExportError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when the credential store file is malformed."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Config error in field '{config_field}': {message}"
        else:
            full_message = f"Config error: {message}"
        super().__init__(full_message)
        self.config_field = config_field


class ConfigFilesystemError(CLIError):
    """Raised when the credential store cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Config file operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class OutputWriteError(CLIError):
    """Raised when the exported markdown file cannot be written."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Could not write {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason
