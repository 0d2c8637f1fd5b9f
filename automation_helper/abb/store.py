"""
Read-only lookup table shared by the command and quick-reference tables.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Iterator, List, Mapping, Optional, TypeVar

T = TypeVar("T")


class ReferenceStore(Generic[T]):
    """Immutable key -> entry mapping with a "not found" signal instead of KeyError."""

    def __init__(self, entries: Mapping[str, T]):
        self._entries: Mapping[str, T] = MappingProxyType(dict(entries))

    def keys(self) -> List[str]:
        """Every key in the store, sorted so listings are stable."""
        return sorted(self._entries)

    def get(self, key: str) -> Optional[T]:
        return self._entries.get(key)

    def items(self) -> List[tuple[str, T]]:
        return [(k, self._entries[k]) for k in self.keys()]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        for key in self.keys():
            yield self._entries[key]
