"""Bounded least-recently-used store of query results."""

from __future__ import annotations

from typing import Sequence

from searchpro.domain.models import CacheEntry, Item
from searchpro.logging import logger
from searchpro.services.exceptions import CacheConsistencyError

DEFAULT_CAPACITY = 10


class ResultCache:
    """Maps exact query strings to the results filtered for them.

    Entries are kept in a list ordered from least recently used (front) to
    most recently used (back). Reads and writes both count as a use. When the
    list is full the front entry is evicted before a new one is appended.
    Keys are compared as typed, with no case or whitespace normalization.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}.")
        self.capacity = capacity
        self.hits = 0
        self.misses = 0
        self._entries: list[CacheEntry] = []

    def lookup(self, query: str) -> tuple[Item, ...] | None:
        """Return cached results for ``query`` and mark them most recent."""

        index = self._index_of(query)
        if index is None:
            self.misses += 1
            return None

        self.hits += 1
        entry = self._entries.pop(index)
        self._entries.append(entry)
        return entry.results

    def insert(self, query: str, results: Sequence[Item]) -> tuple[Item, ...]:
        """Store ``results`` under ``query`` and return what the cache holds.

        Inserting a query that is already cached keeps the stored results and
        only relocates the entry, so two racing resolves never duplicate a key.
        """

        index = self._index_of(query)
        if index is not None:
            entry = self._entries.pop(index)
            self._entries.append(entry)
            logger.debug("cache_insert_existing", query=query)
            return entry.results

        if len(self._entries) >= self.capacity:
            evicted = self._entries.pop(0)
            logger.debug("cache_evicted", query=evicted.query, size=len(self._entries))

        entry = CacheEntry(query=query, results=tuple(results))
        self._entries.append(entry)
        if __debug__:
            self._check_invariants()
        return entry.results

    def queries(self) -> list[str]:
        """Cached queries from least to most recently used."""

        return [entry.query for entry in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, query: object) -> bool:
        # Membership test does not count as a use.
        return any(entry.query == query for entry in self._entries)

    def _index_of(self, query: str) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.query == query:
                return index
        return None

    def _check_invariants(self) -> None:
        if len(self._entries) > self.capacity:
            raise CacheConsistencyError(
                f"Cache holds {len(self._entries)} entries, capacity is {self.capacity}."
            )
        seen: set[str] = set()
        for entry in self._entries:
            if entry.query in seen:
                raise CacheConsistencyError(f"Duplicate cache key: {entry.query!r}.")
            seen.add(entry.query)


__all__ = ["DEFAULT_CAPACITY", "ResultCache"]
