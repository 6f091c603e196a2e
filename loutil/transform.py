"""Transforming collections: filtering, mapping, grouping, chunking and more."""

from __future__ import annotations

import copy
import itertools
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from loutil import mutable

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


def filter_by(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is true."""
    return [item for index, item in enumerate(collection) if predicate(item, index)]


def map_items(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Return ``iteratee(item, index)`` for every item."""
    return [iteratee(item, index) for index, item in enumerate(collection)]


def uniq_map(collection: Iterable[T], iteratee: Callable[[T, int], K]) -> list[K]:
    """Map every item and keep only the first occurrence of each result."""
    seen: set[K] = set()
    result: list[K] = []
    for index, item in enumerate(collection):
        mapped = iteratee(item, index)
        if mapped not in seen:
            seen.add(mapped)
            result.append(mapped)
    return result


def filter_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map and filter in one pass; ``callback`` returns ``(value, keep)``."""
    result: list[R] = []
    for index, item in enumerate(collection):
        value, keep = callback(item, index)
        if keep:
            result.append(value)
    return result


def flat_map(
    collection: Iterable[T], iteratee: Callable[[T, int], Iterable[R] | None]
) -> list[R]:
    """Map every item to a sequence and flatten the results one level.

    A ``None`` result contributes nothing.
    """
    result: list[R] = []
    for index, item in enumerate(collection):
        produced = iteratee(item, index)
        if produced is not None:
            result.extend(produced)
    return result


def reduce_left(
    collection: Iterable[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items from left to right with ``accumulator(agg, item, index)``."""
    for index, item in enumerate(collection):
        initial = accumulator(initial, item, index)
    return initial


def reduce_right(
    collection: Iterable[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items from right to left with ``accumulator(agg, item, index)``."""
    for index, item in reversed(list(enumerate(collection))):
        initial = accumulator(initial, item, index)
    return initial


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], Any]) -> None:
    """Call ``iteratee(item, index)`` for every item, in order."""
    for index, item in enumerate(collection):
        iteratee(item, index)


def for_each_while(collection: Iterable[T], iteratee: Callable[[T, int], bool]) -> None:
    """Call ``iteratee(item, index)`` in order until it returns a false value."""
    for index, item in enumerate(collection):
        if not iteratee(item, index):
            break


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Return the results of ``iteratee(index)`` for indexes ``0..count-1``."""
    _check_count(count)
    return [iteratee(index) for index in range(count)]


def uniq(collection: Iterable[T]) -> list[T]:
    """Return the items without duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(collection))


def uniq_by(collection: Iterable[T], iteratee: Callable[[T], Hashable]) -> list[T]:
    """Return the items whose ``iteratee`` key has not been seen before."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in collection:
        key = iteratee(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group the items by the key ``iteratee`` returns."""
    result: dict[K, list[T]] = {}
    for item in collection:
        result.setdefault(iteratee(item), []).append(item)
    return result


def group_by_map(
    collection: Iterable[T], iteratee: Callable[[T], tuple[K, V]]
) -> dict[K, list[V]]:
    """Group values by key, where ``iteratee`` returns ``(key, value)``."""
    result: dict[K, list[V]] = {}
    for item in collection:
        key, value = iteratee(item)
        result.setdefault(key, []).append(value)
    return result


def chunk(collection: Sequence[T], size: int) -> list[list[T]]:
    """Split the items into lists of ``size``; the last one may be shorter."""
    if size <= 0:
        raise ValueError("Second parameter must be greater than 0")
    items = list(collection)
    return [items[start : start + size] for start in range(0, len(items), size)]


def partition_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> list[list[T]]:
    """Split the items into groups by key, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())


def flatten(collection: Iterable[Iterable[T]]) -> list[T]:
    """Flatten a collection of collections one level deep."""
    return list(itertools.chain.from_iterable(collection))


def interleave(*args: Iterable[T]) -> list[T]:
    """Take items from each collection in turn, round-robin, until all are used."""
    result: list[T] = []
    for column in itertools.zip_longest(*args, fillvalue=_MISSING):
        result.extend(item for item in column if item is not _MISSING)
    return result


def shuffled(collection: Iterable[T]) -> list[T]:
    """Return a shuffled copy of the items."""
    result = list(collection)
    mutable.shuffle(result)
    return result


def reversed_copy(collection: Iterable[T]) -> list[T]:
    """Return a copy of the items in reverse order."""
    result = list(collection)
    mutable.reverse(result)
    return result


def fill(collection: Sequence[Any], initial: T) -> list[T]:
    """Return a list as long as ``collection`` holding independent copies of ``initial``."""
    return [copy.deepcopy(initial) for _ in collection]


def repeat(count: int, initial: T) -> list[T]:
    """Return ``count`` independent copies of ``initial``."""
    _check_count(count)
    return [copy.deepcopy(initial) for _ in range(count)]


def repeat_by(count: int, callback: Callable[[int], R]) -> list[R]:
    """Return the values of ``callback(index)`` for indexes ``0..count-1``."""
    _check_count(count)
    return [callback(index) for index in range(count)]