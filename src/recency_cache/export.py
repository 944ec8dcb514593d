"""Export records for LRU cache snapshots.

A snapshot is a JSON array of `{"key": ..., "value": ...}` objects ordered from
least to most recently used. Replaying it through `put` in order rebuilds a
cache with the same recency order.
"""

from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Iterable, Mapping

from recency_cache.cache import LRUCache

_log = logging.getLogger("recency_cache.export")


def to_records(cache: LRUCache[Any, Any]) -> list[dict[str, Any]]:
    return [{"key": k, "value": v} for k, v in cache.export()]


def _record_key(raw: Any) -> Any:
    # JSON has no tuple type; tuple keys come back as lists.
    if isinstance(raw, list):
        return tuple(_record_key(x) for x in raw)
    return raw


def from_records(records: Iterable[Any], capacity: int) -> LRUCache[Any, Any]:
    """Build a cache of `capacity` by replaying `records` through `put`."""
    cache: LRUCache[Any, Any] = LRUCache(capacity)
    for i, rec in enumerate(records):
        if not isinstance(rec, Mapping):
            raise ValueError(f"record {i} is not an object")
        if "key" not in rec or "value" not in rec:
            raise ValueError(f"record {i} must have 'key' and 'value'")
        key = _record_key(rec["key"])
        try:
            hash(key)
        except TypeError:
            raise ValueError(f"record {i} key is not hashable") from None
        cache.put(key, rec["value"])
    return cache


def dumps(cache: LRUCache[Any, Any]) -> str:
    return json.dumps(to_records(cache), indent=2)


def loads(text: str, capacity: int) -> LRUCache[Any, Any]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("export document must be a JSON array")
    return from_records(data, capacity)


def atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_name = f".{path.name}.tmp.{os.getpid()}.{time.time_ns()}"
    tmp_path = path.parent / tmp_name
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)


def save_export(cache: LRUCache[Any, Any], path: Path) -> None:
    atomic_write_text(path, dumps(cache))
    _log.info("export_saved path=%s size=%d", path, len(cache))


def load_export(path: Path, capacity: int) -> LRUCache[Any, Any]:
    cache = loads(path.read_text(encoding="utf-8"), capacity)
    _log.info("export_loaded path=%s size=%d capacity=%d", path, len(cache), capacity)
    return cache
