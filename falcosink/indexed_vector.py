"""A list addressable both by position and by a unique string key."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class IndexedVector(Generic[T]):
    """Sequence of entries with O(1) access by numeric id or string index."""

    def __init__(self) -> None:
        self._entries: list[T] = []
        self._index: dict[str, int] = {}

    def insert(self, entry: T, index: str) -> int:
        """Store ``entry`` under ``index`` and return its numeric id.

        If ``index`` is already present, its entry is replaced in place
        and the existing id is returned.
        """
        existing = self._index.get(index)
        if existing is not None:
            self._entries[existing] = entry
            return existing
        new_id = len(self._entries)
        self._entries.append(entry)
        self._index[index] = new_id
        return new_id

    def at(self, key: int | str) -> T | None:
        """Return the entry for a numeric id or string index, or None."""
        if isinstance(key, str):
            found = self._index.get(key)
            if found is None:
                return None
            key = found
        if 0 <= key < len(self._entries):
            return self._entries[key]
        return None

    def clear(self) -> None:
        """Remove all entries and indexes."""
        self._entries.clear()
        self._index.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)