"""Numeric helpers: ranges, clamping, sums, products and means."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
N = TypeVar("N", int, float, complex)


def range_of(element_num: int) -> list[int]:
    """Return ``abs(element_num)`` integers from 0, counting down when negative."""
    step = -1 if element_num < 0 else 1
    return [index * step for index in range(abs(element_num))]


def range_from(start: N, element_num: int) -> list[N]:
    """Return ``abs(element_num)`` numbers from ``start``, counting down when negative."""
    step = -1 if element_num < 0 else 1
    return [start + index * step for index in range(abs(element_num))]


def range_with_steps(start: N, end: N, step: N) -> list[N]:
    """Return numbers from ``start`` up to, but not including, ``end``.

    A zero step, or a step pointing away from ``end``, yields an empty list.
    """
    result: list[N] = []
    if start == end or step == 0:
        return result
    if start < end:
        if step < 0:
            return result
        current = start
        while current < end:
            result.append(current)
            current += step
        return result
    if step > 0:
        return result
    current = start
    while current > end:
        result.append(current)
        current += step
    return result


def clamp(value: Any, minimum: Any, maximum: Any) -> Any:
    """Clamp ``value`` within the inclusive bounds ``minimum`` and ``maximum``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def sum_of(collection: Iterable[N] | None) -> N:
    """Sum the values of a collection; an empty or missing collection gives 0."""
    if collection is None:
        return 0
    return sum(collection, 0)


def sum_by(collection: Iterable[T] | None, iteratee: Callable[[T], N]) -> N:
    """Sum the values returned by ``iteratee`` for each item."""
    if collection is None:
        return 0
    return sum((iteratee(item) for item in collection), 0)


def product(collection: Iterable[N] | None) -> N:
    """Multiply the values of a collection; an empty or missing collection gives 1."""
    if collection is None:
        return 1
    return math.prod(collection, start=1)


def product_by(collection: Iterable[T] | None, iteratee: Callable[[T], N]) -> N:
    """Multiply the values returned by ``iteratee``; an empty collection gives 1."""
    if collection is None:
        return 1
    return math.prod((iteratee(item) for item in collection), start=1)


def _divide(total: Any, length: int) -> Any:
    if isinstance(total, int):
        # Integer means truncate toward zero.
        quotient = abs(total) // length
        return -quotient if total < 0 else quotient
    return total / length


def mean(collection: Iterable[N] | None) -> N:
    """Return the mean of a collection; integer input gives a truncated integer mean."""
    values = [] if collection is None else list(collection)
    if not values:
        return 0
    return _divide(sum(values, 0), len(values))


def mean_by(collection: Iterable[T] | None, iteratee: Callable[[T], N]) -> N:
    """Return the mean of the values returned by ``iteratee``."""
    values = [] if collection is None else [iteratee(item) for item in collection]
    if not values:
        return 0
    return _divide(sum(values, 0), len(values))