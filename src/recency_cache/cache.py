"""In-memory LRU cache backed by a dict index and an intrusive recency list.

Entries are threaded from least recently used (tail) to most recently used
(head): `entry.next` points towards the head, `entry.prev` towards the tail.
Every entry in the index has exactly one position in the list.

Reads through `get` and `set` count as uses and reorder the list. Use `find`
to inspect a value without changing eviction priority.

Not thread-safe. Guard the whole cache with a lock if it is shared.
"""

from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_log = logging.getLogger("recency_cache.cache")


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: _Entry[K, V] | None = None
        self.next: _Entry[K, V] | None = None


class LRUCache(Generic[K, V]):
    """Fixed-capacity LRU cache.

    Each entry counts as one unit of capacity. Inserting a new key into a full
    cache evicts the least recently used entry and hands it back to the caller.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError("capacity must be an int")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._size = 0
        self._head: _Entry[K, V] | None = None
        self._tail: _Entry[K, V] | None = None
        self._index: dict[K, _Entry[K, V]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        return self._size

    def put(self, key: K, value: V) -> tuple[K, V] | None:
        """Insert or update `key`.

        Returns the evicted `(key, value)` pair when the insert pushed the cache
        over capacity, otherwise None. Updating an existing key never evicts.
        """
        entry = self._index.get(key)
        if entry is not None:
            entry.value = value
            self._move_to_head(entry)
            return None

        entry = _Entry(key, value)
        self._index[key] = entry
        if self._head is not None:
            self._head.next = entry
            entry.prev = self._head
        else:
            self._tail = entry
        self._head = entry
        self._size += 1

        if self._size > self._capacity:
            key, value = self._pop_tail()
            _log.debug("evicted key=%r size=%d", key, self._size)
            return key, value
        return None

    def purge(self) -> tuple[K, V] | None:
        """Remove and return the least recently used entry, or None if empty."""
        if self._tail is None:
            return None
        return self._pop_tail()

    def _pop_tail(self) -> tuple[K, V]:
        # Caller guarantees the list is not empty.
        entry = self._tail
        if entry.next is not None:
            self._tail = entry.next
            self._tail.prev = None
        else:
            self._tail = None
            self._head = None

        entry.next = None
        entry.prev = None
        del self._index[entry.key]
        self._size -= 1
        return entry.key, entry.value

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for `key` and mark it most recently used."""
        entry = self._index.get(key)
        if entry is None:
            return default
        self._move_to_head(entry)
        return entry.value

    def find(self, key: K, default: V | None = None) -> V | None:
        """Return the value for `key` without registering a use."""
        entry = self._index.get(key)
        if entry is None:
            return default
        return entry.value

    def set(self, key: K, value: V, default: V | None = None) -> V | None:
        """Replace the value of an existing key and return the old value.

        Absent keys are not inserted; `default` is returned instead.
        """
        entry = self._index.get(key)
        if entry is None:
            return default
        self._move_to_head(entry)
        old = entry.value
        entry.value = value
        return old

    def remove(self, key: K, default: V | None = None) -> V | None:
        """Remove `key` and return its value, or `default` if absent."""
        entry = self._index.pop(key, None)
        if entry is None:
            return default

        if entry.next is not None and entry.prev is not None:
            entry.prev.next = entry.next
            entry.next.prev = entry.prev
        elif entry.next is not None:
            # Was the tail.
            entry.next.prev = None
            self._tail = entry.next
        elif entry.prev is not None:
            # Was the head.
            entry.prev.next = None
            self._head = entry.prev
        else:
            self._head = None
            self._tail = None

        entry.next = None
        entry.prev = None
        self._size -= 1
        return entry.value

    def clear(self) -> None:
        entry = self._tail
        while entry is not None:
            nxt = entry.next
            entry.prev = None
            entry.next = None
            entry = nxt
        self._head = None
        self._tail = None
        self._size = 0
        self._index = {}
        _log.debug("cleared capacity=%d", self._capacity)

    def export(self) -> list[tuple[K, V]]:
        """Copy out `(key, value)` pairs, least recently used first."""
        out: list[tuple[K, V]] = []
        entry = self._tail
        while entry is not None:
            out.append((entry.key, entry.value))
            entry = entry.next
        return out

    def describe(self) -> str:
        return " < ".join(f"{k}:{v}" for k, v in self.export())

    def keys(self) -> set[K]:
        return set(self._index)

    def _move_to_head(self, entry: _Entry[K, V]) -> None:
        # A solitary entry is also the head.
        if entry is self._head:
            return

        nxt = entry.next
        prv = entry.prev
        if entry is self._tail:
            self._tail = nxt
            if nxt is not None:
                nxt.prev = None
        else:
            if prv is not None:
                prv.next = nxt
            if nxt is not None:
                nxt.prev = prv

        entry.next = None
        entry.prev = self._head
        if self._head is not None:
            self._head.next = entry
        self._head = entry

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return iter([k for k, _ in self.export()])

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self._size})"
