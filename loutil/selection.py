"""Selecting, dropping, counting and keying items of collections."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import pairwise
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def key_by(collection: Iterable[V], iteratee: Callable[[V], K]) -> dict[K, V]:
    """Map each item by the key ``iteratee`` returns; later items win."""
    return {iteratee(item): item for item in collection}


def associate(collection: Iterable[T], transform: Callable[[T], tuple[K, V]]) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs ``transform`` returns; later pairs win."""
    return dict(transform(item) for item in collection)


def slice_to_map(collection: Iterable[T], transform: Callable[[T], tuple[K, V]]) -> dict[K, V]:
    """Alias of :func:`associate`."""
    return associate(collection, transform)


def filter_slice_to_map(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V, bool]]
) -> dict[K, V]:
    """Build a dict from ``(key, value, keep)`` triples, keeping those marked ``keep``."""
    result: dict[K, V] = {}
    for item in collection:
        key, value, keep = transform(item)
        if keep:
            result[key] = value
    return result


def keyify(collection: Iterable[K]) -> set[K]:
    """Return the set of distinct items."""
    return set(collection)


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def drop(collection: Sequence[T], n: int) -> list[T]:
    """Drop ``n`` items from the beginning."""
    _check_non_negative(n, "n")
    return list(collection[n:])


def drop_right(collection: Sequence[T], n: int) -> list[T]:
    """Drop ``n`` items from the end."""
    _check_non_negative(n, "n")
    if n >= len(collection):
        return []
    return list(collection[: len(collection) - n])


def drop_while(collection: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop items from the beginning while ``predicate`` holds."""
    start = next(
        (index for index, item in enumerate(collection) if not predicate(item)),
        len(collection),
    )
    return list(collection[start:])


def drop_right_while(collection: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop items from the end while ``predicate`` holds."""
    end = next(
        (
            index + 1
            for index in range(len(collection) - 1, -1, -1)
            if not predicate(collection[index])
        ),
        0,
    )
    return list(collection[:end])


def drop_by_index(collection: Sequence[T], *args: int) -> list[T]:
    """Drop the items at the given indexes; negative indexes count from the end.

    Indexes outside the collection are ignored.
    """
    size = len(collection)
    dropped = {index + size if index < 0 else index for index in args}
    return [item for index, item in enumerate(collection) if index not in dropped]


def reject(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is false."""
    return [item for index, item in enumerate(collection) if not predicate(item, index)]


def reject_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map items with ``callback`` returning ``(value, flag)``; keep values whose flag is false."""
    result: list[R] = []
    for index, item in enumerate(collection):
        value, flag = callback(item, index)
        if not flag:
            result.append(value)
    return result


def filter_reject(
    collection: Iterable[T], predicate: Callable[[T, int], bool]
) -> tuple[list[T], list[T]]:
    """Split items into those ``predicate`` keeps and those it rejects."""
    kept: list[T] = []
    rejected: list[T] = []
    for index, item in enumerate(collection):
        (kept if predicate(item, index) else rejected).append(item)
    return kept, rejected


def count(collection: Iterable[T], value: T) -> int:
    """Count the items equal to ``value``."""
    return sum(1 for item in collection if item == value)


def count_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Count the items for which ``predicate`` is true."""
    return sum(1 for item in collection if predicate(item))


def count_values(collection: Iterable[K]) -> dict[K, int]:
    """Count how often each item occurs."""
    return dict(Counter(collection))


def count_values_by(collection: Iterable[T], mapper: Callable[[T], K]) -> dict[K, int]:
    """Count how often each value returned by ``mapper`` occurs."""
    return dict(Counter(mapper(item) for item in collection))


def subset(collection: Sequence[T], offset: int, length: int) -> list[T]:
    """Return up to ``length`` items from ``offset``; negative offsets count from the end."""
    _check_non_negative(length, "length")
    size = len(collection)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return []
    return list(collection[offset : offset + length])


def slice_range(collection: Sequence[T], start: int, end: int) -> list[T]:
    """Return items from ``start`` up to ``end``, with both bounds clamped to the collection."""
    if start >= end:
        return []
    size = len(collection)
    start = min(max(start, 0), size)
    end = min(max(end, 0), size)
    return list(collection[start:end])


def replace(collection: Iterable[T], old: T, new: T, n: int) -> list[T]:
    """Replace the first ``n`` items equal to ``old``; a negative ``n`` replaces all."""
    result: list[T] = []
    for item in collection:
        if n != 0 and item == old:
            result.append(new)
            n -= 1
        else:
            result.append(item)
    return result


def replace_all(collection: Iterable[T], old: T, new: T) -> list[T]:
    """Replace every item equal to ``old`` with ``new``."""
    return replace(collection, old, new, -1)


def compact(collection: Iterable[T]) -> list[T]:
    """Return the items that are not empty or zero (the truthy ones)."""
    return [item for item in collection if item]


def is_sorted(collection: Iterable[Any]) -> bool:
    """Tell whether the items are in non-decreasing order."""
    return all(not previous > current for previous, current in pairwise(collection))


def is_sorted_by_key(collection: Iterable[T], iteratee: Callable[[T], Any]) -> bool:
    """Tell whether the keys returned by ``iteratee`` are in non-decreasing order."""
    return is_sorted(iteratee(item) for item in collection)


def splice(collection: Sequence[T], index: int, *args: T) -> list[T]:
    """Insert ``args`` at ``index``; negative indexes count from the end, overflow is clamped."""
    items = list(collection)
    if not args:
        return items
    size = len(items)
    if index > size:
        return items + list(args)
    if index < -size:
        return list(args) + items
    if index < 0:
        index += size
    return items[:index] + list(args) + items[index:]