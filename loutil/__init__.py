"""Functional helpers for collections, numbers, strings, timing, retries and throttling."""

__version__ = "0.1.0"

__all__ = [
    "mutable",
    "numeric",
    "parallel",
    "retry",
    "selection",
    "text",
    "timing",
    "transform",
]