"""Suffix membership index over normalized domains.

Each blocked domain is stored as its top-level-first key. A query is
blocked when any of its ancestor-or-self keys is in the set, so a
lookup walks the query labels once and does at most one membership test per
label. No explicit tree is built.

Lifecycle: BUILDING (accepts ``add``) -> QUERYABLE (read-only).
Queries are answered in both states; the transition happens once.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from domblock.domain.errors import IndexFrozenError
from domblock.domain.names import LABEL_SEPARATOR, NormalizedDomain


class IndexState(StrEnum):
    BUILDING = "building"
    QUERYABLE = "queryable"


class SuffixIndex:
    """Set of blocked domain keys with ancestor-aware lookup.

    The index keeps derived string keys only, never the
    :class:`NormalizedDomain` objects passed in.
    """

    def __init__(self) -> None:
        self._keys: set[str] = set()
        self._state = IndexState.BUILDING

    @classmethod
    def build(cls, entries: Iterable[NormalizedDomain]) -> SuffixIndex:
        """Insert every entry and freeze. Duplicate entries are no-ops."""
        index = cls()
        for entry in entries:
            index.add(entry)
        index.freeze()
        return index

    @property
    def state(self) -> IndexState:
        return self._state

    def add(self, domain: NormalizedDomain) -> bool:
        """Insert *domain*; return True if it was not already present."""
        if self._state is IndexState.QUERYABLE:
            msg = f"Cannot add {str(domain)!r}: index is frozen"
            raise IndexFrozenError(msg)
        key = domain.key
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def freeze(self) -> None:
        self._state = IndexState.QUERYABLE

    def find_blocking(self, query: NormalizedDomain) -> NormalizedDomain | None:
        """Return the shallowest blocked ancestor-or-self of *query*, if any."""
        candidate = ""
        for depth, label in enumerate(query.labels, start=1):
            candidate = label if depth == 1 else candidate + LABEL_SEPARATOR + label
            if candidate in self._keys:
                return NormalizedDomain(query.labels[:depth])
        return None

    def is_blocked(self, query: NormalizedDomain) -> bool:
        return self.find_blocking(query) is not None

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, domain: object) -> bool:
        if not isinstance(domain, NormalizedDomain):
            return False
        return domain.key in self._keys
