"""Database entry property data model."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Property:
    """A typed, named field on a database entry.

    The payload is kept exactly as the API returns it under the property's
    type key (e.g. a list of rich text items for ``title``, a dict with
    ``start``/``end`` for ``date``). Interpretation happens in the property
    renderer so that unknown kinds survive parsing untouched.

    Attributes:
        name: Property name as shown in the database schema
        kind: Notion property type (``title``, ``select``, ``checkbox``, ...)
        value: Kind-specific payload
    """
    name: str
    kind: str
    value: Any = None

    @classmethod
    def from_api(cls, name: str, data: Dict[str, Any]) -> 'Property':
        kind = data.get('type') or 'unknown'
        return cls(name=name, kind=kind, value=data.get(kind))

    @property
    def is_title(self) -> bool:
        return self.kind == 'title'
