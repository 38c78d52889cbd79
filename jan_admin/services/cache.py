"""Query cache for resource reads.

Entries are keyed by resource name plus request parameters. Writes call
invalidate() for their resource so the next read goes back to the server.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Hashable, Mapping, Optional

CacheKey = tuple[str, tuple[tuple[str, Hashable], ...]]


def make_key(resource: str, params: Optional[Mapping[str, Any]] = None) -> CacheKey:
    """Build a stable key; None-valued params are treated as absent."""
    items = tuple(
        sorted((k, v) for k, v in (params or {}).items() if v is not None)
    )
    return (resource, items)


class QueryCache:
    """In-memory cache of validated read results."""

    def __init__(self, ttl_seconds: Optional[float] = None):
        self.ttl_seconds = ttl_seconds
        # key -> (stored_at, value)
        self._entries: dict[CacheKey, tuple[float, Any]] = {}
        # Bumped by invalidate(); loads begun before a bump are not stored
        self._generations: dict[str, int] = {}
        self._epoch = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return self._lookup(key, self.ttl_seconds) is not None

    def _generation(self, resource: str) -> tuple[int, int]:
        return (self._epoch, self._generations.get(resource, 0))

    def _lookup(
        self, key: CacheKey, ttl: Optional[float]
    ) -> Optional[tuple[float, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if ttl is not None and time.monotonic() - entry[0] >= ttl:
            del self._entries[key]
            return None
        return entry

    def peek(
        self, resource: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        entry = self._lookup(make_key(resource, params), self.ttl_seconds)
        return entry[1] if entry else None

    def set(
        self,
        resource: str,
        params: Optional[Mapping[str, Any]],
        value: Any,
    ) -> None:
        self._entries[make_key(resource, params)] = (time.monotonic(), value)

    async def fetch(
        self,
        resource: str,
        params: Optional[Mapping[str, Any]],
        loader: Callable[[], Awaitable[Any]],
        *,
        ttl: Optional[float] = None,
    ) -> Any:
        """Return the cached value or load, store and return a fresh one.

        Failed loads are not cached, and neither are loads that were in
        flight when the resource was invalidated.
        """
        key = make_key(resource, params)
        entry = self._lookup(key, ttl if ttl is not None else self.ttl_seconds)
        if entry is not None:
            return entry[1]
        generation = self._generation(resource)
        value = await loader()
        if self._generation(resource) == generation:
            self._entries[key] = (time.monotonic(), value)
        return value

    def invalidate(self, resource: Optional[str] = None) -> int:
        """Drop every entry of a resource, or everything when resource is None.

        Returns the number of entries removed.
        """
        if resource is None:
            self._epoch += 1
            count = len(self._entries)
            self._entries.clear()
            return count
        self._generations[resource] = self._generations.get(resource, 0) + 1
        stale = [key for key in self._entries if key[0] == resource]
        for key in stale:
            del self._entries[key]
        return len(stale)
