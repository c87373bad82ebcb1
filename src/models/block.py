"""Content block data model."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Block:
    """One unit of page content.

    Children are never embedded: a block with ``has_children`` set owns a
    sequence of child blocks that must be fetched separately using the
    block's id as container id.

    Attributes:
        id: Block identifier, also the container id for its children
        kind: Notion block type (``paragraph``, ``heading_1``, ...)
        payload: The type-keyed object from the API response
        has_children: Whether child blocks exist for this block
    """
    id: str
    kind: str
    payload: Dict[str, Any] = field(default_factory=dict)
    has_children: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Block':
        kind = data.get('type') or 'unknown'
        return cls(
            id=data.get('id', ''),
            kind=kind,
            payload=data.get(kind) or {},
            has_children=bool(data.get('has_children')),
        )
