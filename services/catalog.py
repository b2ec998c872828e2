# Catalog Service — read-only destination lookup
# Wraps the static destination rows in an ordered, immutable collection.
# Planning code takes a catalog argument so tests can pass a small fixed one.

from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple
from data.destinations import DESTINATIONS
from models.schemas import Destination


class DestinationCatalog:
    """Ordered, read-only set of destinations keyed by id."""

    def __init__(self, destinations: Iterable[Destination]):
        self._items: Tuple[Destination, ...] = tuple(destinations)
        self._by_id: Dict[str, Destination] = {}
        for dest in self._items:
            if dest.id in self._by_id:
                raise ValueError(f"Duplicate destination id '{dest.id}'")
            self._by_id[dest.id] = dest

    @classmethod
    def from_rows(cls, rows: Iterable[dict]) -> "DestinationCatalog":
        return cls(Destination(**row) for row in rows)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, destination_id) -> bool:
        return destination_id in self._by_id

    def __iter__(self):
        return iter(self._items)

    def list_all(self) -> List[Destination]:
        return list(self._items)

    def by_id(self, destination_id: str) -> Optional[Destination]:
        return self._by_id.get(destination_id)

    def position(self, destination_id: str) -> int:
        """Index in catalog order; unknown ids sort after every known one."""
        dest = self._by_id.get(destination_id)
        return self._items.index(dest) if dest is not None else len(self._items)

    def by_region(self, region: str) -> List[Destination]:
        return [d for d in self._items if d.region == region]

    def by_category(self, category: str) -> List[Destination]:
        return [d for d in self._items if d.category == category]

    def regions(self) -> List[str]:
        """Distinct regions in catalog order."""
        return list(dict.fromkeys(d.region for d in self._items))

    def find_by_name(self, name: str) -> Optional[Destination]:
        """Case-insensitive exact match on destination name."""
        wanted = (name or "").strip().lower()
        if not wanted:
            return None
        for dest in self._items:
            if dest.name.lower() == wanted:
                return dest
        return None


@lru_cache
def default_catalog() -> DestinationCatalog:
    return DestinationCatalog.from_rows(DESTINATIONS)
