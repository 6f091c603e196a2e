"""In-place operations on mutable sequences."""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import TypeVar

T = TypeVar("T")


def shuffle(collection: MutableSequence[T]) -> None:
    """Shuffle the sequence in place (Fisher-Yates)."""
    random.shuffle(collection)


def reverse(collection: MutableSequence[T]) -> None:
    """Reverse the sequence in place."""
    collection.reverse()


def fill(collection: MutableSequence[T], initial: T) -> None:
    """Set every element of the sequence to ``initial``."""
    collection[:] = [initial] * len(collection)