"""In-memory stand-in for the Notion data source."""

from typing import Dict, Iterator, List, Optional

from src.models import Block


class FakeBlockSource:
    """Serves block children from a dict keyed by container id.

    Containers listed in ``failures`` raise the given exception when their
    children are requested. Every request is recorded in ``calls``.
    """

    def __init__(
        self,
        children: Optional[Dict[str, List[dict]]] = None,
        failures: Optional[Dict[str, Exception]] = None,
    ):
        self.children = children or {}
        self.failures = failures or {}
        self.calls: List[str] = []

    def list_block_children(self, container_id: str) -> Iterator[Block]:
        self.calls.append(container_id)
        if container_id in self.failures:
            raise self.failures[container_id]
        for item in self.children.get(container_id, []):
            yield Block.from_api(item)
