"""Collection helpers whose callbacks run concurrently on a thread pool."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def map_items(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Apply ``iteratee(item, index)`` concurrently; results keep the input order."""
    items = list(collection)
    if not items:
        return []
    with ThreadPoolExecutor() as executor:
        return list(executor.map(iteratee, items, range(len(items))))


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` concurrently for every item."""
    map_items(collection, iteratee)


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Call ``iteratee(index)`` concurrently ``count`` times; return results in order."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []
    with ThreadPoolExecutor() as executor:
        return list(executor.map(iteratee, range(count)))


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by the key ``iteratee`` computes concurrently; order is preserved."""
    items = list(collection)
    keys = map_items(items, lambda item, _index: iteratee(item))
    result: dict[K, list[T]] = {}
    for key, item in zip(keys, items):
        result.setdefault(key, []).append(item)
    return result


def partition_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> list[list[T]]:
    """Split items into groups by key, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())