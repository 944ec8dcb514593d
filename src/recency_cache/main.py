"""Diagnostics entrypoint: rebuild a cache from an export file and describe it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from recency_cache.config import CacheConfig
from recency_cache.export import load_export


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recency-cache",
        description="Rebuild an LRU cache from an export file and print its recency order.",
    )
    parser.add_argument("export_file", type=Path)
    parser.add_argument("--capacity", type=int, default=None)
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = CacheConfig.load()
    _setup_logging(args.log_level or config.log_level)
    log = logging.getLogger("recency_cache")

    capacity = args.capacity if args.capacity is not None else config.capacity
    try:
        cache = load_export(args.export_file, capacity)
    except (OSError, ValueError, TypeError) as e:
        log.warning("load_failed path=%s error=%s", args.export_file, e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(cache.describe())
    print(f"size={len(cache)} capacity={cache.capacity}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
