"""Configuration persistence for recency-cache.

The configuration is stored as JSON under `~/.config/recency_cache/config.json`
(or `$XDG_CONFIG_HOME/recency_cache/config.json`). Set `RECENCY_CACHE_CONFIG`
to point at a different file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final

from recency_cache.cache import LRUCache

APP_DIR_NAME: Final[str] = "recency_cache"
CONFIG_FILE_NAME: Final[str] = "config.json"
CONFIG_ENV_VAR: Final[str] = "RECENCY_CACHE_CONFIG"


def _default_config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_config_path() -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return _default_config_dir() / APP_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class CacheConfig:
    """User-configurable settings.

    `capacity` is validated when a cache is built, not on load, so a bad value
    in the file fails loudly at the point of use.
    """

    capacity: int = 128
    log_level: str = "INFO"

    def to_dict(self) -> dict[str, Any]:
        return {
            "capacity": self.capacity,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "CacheConfig":
        cfg = cls()
        names = {f.name for f in fields(cls)}
        for k, v in raw.items():
            if k in names:
                setattr(cfg, k, v)
        return cfg

    @classmethod
    def load(cls) -> "CacheConfig":
        path = get_config_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self) -> None:
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def build_cache(self) -> LRUCache[Any, Any]:
        return LRUCache(self.capacity)
