import pytest

from recency_cache.cache import LRUCache


def _build(keys: str) -> LRUCache:
    cache = LRUCache(len(keys))
    for k in keys:
        cache.put(k, k)
    return cache


def _links(cache: LRUCache) -> list[tuple]:
    out = []
    entry = cache._tail
    while entry is not None:
        out.append(
            (
                entry.prev.key if entry.prev else None,
                entry.key,
                entry.next.key if entry.next else None,
            )
        )
        entry = entry.next
    return out


def test_solitary_entry_is_noop() -> None:
    cache = _build("a")
    entry = cache._index["a"]
    cache._move_to_head(entry)
    assert cache._head is entry
    assert cache._tail is entry
    assert entry.prev is None and entry.next is None


def test_head_entry_is_noop() -> None:
    cache = _build("abc")
    cache._move_to_head(cache._index["c"])
    assert _links(cache) == [(None, "a", "b"), ("a", "b", "c"), ("b", "c", None)]


def test_tail_entry_moves_to_head() -> None:
    cache = _build("abc")
    cache._move_to_head(cache._index["a"])
    assert cache._tail.key == "b"
    assert cache._head.key == "a"
    assert _links(cache) == [(None, "b", "c"), ("b", "c", "a"), ("c", "a", None)]


def test_tail_of_two_moves_to_head() -> None:
    cache = _build("ab")
    cache._move_to_head(cache._index["a"])
    assert _links(cache) == [(None, "b", "a"), ("b", "a", None)]


def test_interior_entry_moves_to_head() -> None:
    cache = _build("abcd")
    cache._move_to_head(cache._index["b"])
    assert cache._tail.key == "a"
    assert cache._head.key == "b"
    assert _links(cache) == [
        (None, "a", "c"),
        ("a", "c", "d"),
        ("c", "d", "b"),
        ("d", "b", None),
    ]


@pytest.mark.parametrize(
    "accesses,expected",
    [
        ("a", "bca"),
        ("b", "acb"),
        ("c", "abc"),
        ("ab", "cab"),
        ("ba", "cba"),
        ("aaa", "bca"),
        ("cba", "cba"),
    ],
)
def test_get_sequences(accesses: str, expected: str) -> None:
    cache = _build("abc")
    for k in accesses:
        assert cache.get(k) == k
    assert "".join(k for k, _ in cache.export()) == expected
    assert len(_links(cache)) == 3
