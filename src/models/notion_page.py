"""Notion page and database data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.models.property import Property


def _plain_text(items: Optional[List[Dict[str, Any]]]) -> str:
    return ''.join(item.get('plain_text', '') for item in items or [])


@dataclass(frozen=True)
class Page:
    """A database entry.

    The page id doubles as the root container id for its block tree.

    Attributes:
        id: Page identifier
        url: Link to the page in Notion
        properties: Properties in the order the API returned them
    """
    id: str
    url: str
    properties: Dict[str, Property] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Page':
        properties = {
            name: Property.from_api(name, prop)
            for name, prop in (data.get('properties') or {}).items()
        }
        return cls(id=data['id'], url=data.get('url') or '', properties=properties)

    @property
    def root_block_id(self) -> str:
        return self.id

    @property
    def title_property(self) -> Optional[Property]:
        """Return the single title property, or None if the page has none."""
        for prop in self.properties.values():
            if prop.is_title:
                return prop
        return None


@dataclass(frozen=True)
class Database:
    """A Notion database the integration can access.

    Attributes:
        id: Database identifier
        title: Plain text title ("Untitled Database" when empty)
        description: Plain text description, may be empty
        url: Link to the database in Notion
    """
    id: str
    title: str
    description: str = ''
    url: str = ''

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Database':
        return cls(
            id=data['id'],
            title=_plain_text(data.get('title')) or 'Untitled Database',
            description=_plain_text(data.get('description')),
            url=data.get('url') or '',
        )

    @property
    def display_name(self) -> str:
        if self.description:
            return f"{self.title} ({self.description})"
        return self.title
