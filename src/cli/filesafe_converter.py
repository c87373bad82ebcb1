"""Output filename handling for exported databases.

Converts database titles to default filenames and validates names typed
by the user.
"""

import re
from typing import Optional

MAX_STEM_LENGTH = 50
DEFAULT_FILENAME = 'notion-export.md'
INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')


class FilesafeConverter:
    """Builds and checks markdown filenames.

    Conversion rules for titles:
    - Lowercased
    - Every run of characters outside a-z and 0-9 → single hyphen
    - Leading/trailing hyphens → trimmed
    - Truncated to 50 characters, then .md appended

    Examples:
        - "Reading List" → "reading-list.md"
        - "Q&A: 2024 Notes" → "q-a-2024-notes.md"
    """

    @staticmethod
    def title_to_filename(title: str) -> str:
        """Convert a database title to a default export filename.

        Examples:
            >>> FilesafeConverter.title_to_filename("Reading List")
            'reading-list.md'
            >>> FilesafeConverter.title_to_filename("!!!")
            'notion-export.md'
        """
        stem = re.sub(r'[^a-z0-9]+', '-', title.lower())
        stem = stem.strip('-')[:MAX_STEM_LENGTH]
        if not stem:
            return DEFAULT_FILENAME
        return f"{stem}.md"

    @staticmethod
    def validate_filename(filename: str) -> Optional[str]:
        """Return an error message for an unusable filename, else None."""
        if not filename or not filename.strip():
            return "Filename is required"
        if INVALID_FILENAME_CHARS.search(filename):
            return "Filename contains invalid characters"
        return None

    @staticmethod
    def ensure_md_extension(filename: str) -> str:
        filename = filename.strip()
        return filename if filename.endswith('.md') else f"{filename}.md"
