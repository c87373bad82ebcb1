"""Export document data model."""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

SECTION_SEPARATOR = '\n\n---\n\n'


@dataclass(frozen=True)
class ExportDocument:
    """The assembled markdown export of one database.

    Attributes:
        title: Database title used as the document heading
        exported_on: Date of the export
        entry_count: Number of pages in the database
        source_url: Link to the database in Notion
        sections: Rendered page sections in source order
    """
    title: str
    exported_on: date
    entry_count: int
    source_url: str
    sections: Tuple[str, ...] = ()

    @property
    def header(self) -> str:
        return (
            f"# {self.title}\n\n"
            f"Exported on: {self.exported_on.isoformat()}\n"
            f"Total entries: {self.entry_count}\n"
            f"Source: {self.source_url}"
            f"{SECTION_SEPARATOR}"
        )

    def to_markdown(self) -> str:
        return self.header + SECTION_SEPARATOR.join(self.sections)
