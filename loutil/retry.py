"""Retrying, debouncing, throttling and saga-style transactions."""

from __future__ import annotations

import itertools
import threading
import time
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any


def _start_timer(interval: float, function: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(interval, function)
    timer.daemon = True
    timer.start()
    return timer


def _indices(max_iteration: int) -> Iterable[int]:
    return itertools.count() if max_iteration <= 0 else range(max_iteration)


class Debounce:
    """Delay the callbacks until ``after`` seconds have passed without a new call."""

    def __init__(self, after: float, *callbacks: Callable[[], Any]) -> None:
        self._after = after
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._done = False

    def __call__(self) -> None:
        with self._lock:
            if self._done:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = _start_timer(self._after, self._fire)

    def _fire(self) -> None:
        for callback in self._callbacks:
            callback()

    def cancel(self) -> None:
        """Stop any pending invocation and ignore all later calls."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._done = True


@dataclass
class _PendingKey:
    lock: threading.Lock = field(default_factory=threading.Lock)
    timer: threading.Timer | None = None
    count: int = 0


class DebounceBy:
    """Debounce per key; callbacks receive the key and how many calls were folded."""

    def __init__(self, after: float, *callbacks: Callable[[Hashable, int], Any]) -> None:
        self._after = after
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._items: dict[Hashable, _PendingKey] = {}

    def __call__(self, key: Hashable) -> None:
        with self._lock:
            item = self._items.setdefault(key, _PendingKey())
        with item.lock:
            item.count += 1
            if item.timer is not None:
                item.timer.cancel()
            item.timer = _start_timer(self._after, lambda: self._fire(key, item))

    def _fire(self, key: Hashable, item: _PendingKey) -> None:
        with item.lock:
            count = item.count
            item.count = 0
        for callback in self._callbacks:
            callback(key, count)

    def cancel(self, key: Hashable) -> None:
        """Drop the pending invocation for ``key``."""
        with self._lock:
            item = self._items.pop(key, None)
            if item is None:
                return
            with item.lock:
                if item.timer is not None:
                    item.timer.cancel()
                    item.timer = None


class StopAttempts(Exception):
    """Raised by an attempted callable to stop retrying at once.

    When it carries an ``error`` that error is raised to the caller; otherwise
    the attempts end successfully.
    """

    def __init__(self, error: BaseException | None = None) -> None:
        super().__init__(error)
        self.error = error


def attempt(max_iteration: int, func: Callable[[int], Any]) -> int:
    """Call ``func(index)`` until it does not raise; return the number of calls.

    A ``max_iteration`` below 1 retries without limit. When every attempt fails
    the last exception is raised.
    """
    error: BaseException | None = None
    for index in _indices(max_iteration):
        try:
            func(index)
        except Exception as exc:
            error = exc
        else:
            return index + 1
    raise error  # type: ignore[misc]


def attempt_with_delay(
    max_iteration: int, delay: float, func: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt`, sleeping ``delay`` seconds between calls.

    ``func`` receives the index and the seconds elapsed so far. Returns the
    number of calls and the total elapsed seconds.
    """
    error: BaseException | None = None
    start = time.monotonic()
    for index in _indices(max_iteration):
        try:
            func(index, time.monotonic() - start)
        except Exception as exc:
            error = exc
        else:
            return index + 1, time.monotonic() - start
        if max_iteration <= 0 or index + 1 < max_iteration:
            time.sleep(delay)
    raise error  # type: ignore[misc]


def attempt_while(max_iteration: int, func: Callable[[int], Any]) -> int:
    """Like :func:`attempt`, but ``func`` may raise :class:`StopAttempts` to stop early."""
    error: BaseException | None = None
    for index in _indices(max_iteration):
        try:
            func(index)
        except StopAttempts as stop:
            if stop.error is None:
                return index + 1
            raise stop.error from stop
        except Exception as exc:
            error = exc
        else:
            return index + 1
    raise error  # type: ignore[misc]


def attempt_while_with_delay(
    max_iteration: int, delay: float, func: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt_with_delay`, with early stopping via :class:`StopAttempts`."""
    error: BaseException | None = None
    start = time.monotonic()
    for index in _indices(max_iteration):
        try:
            func(index, time.monotonic() - start)
        except StopAttempts as stop:
            if stop.error is None:
                return index + 1, time.monotonic() - start
            raise stop.error from stop
        except Exception as exc:
            error = exc
        else:
            return index + 1, time.monotonic() - start
        if max_iteration <= 0 or index + 1 < max_iteration:
            time.sleep(delay)
    raise error  # type: ignore[misc]


class StepFailed(Exception):
    """Raised by a transaction step to fail while handing back an updated state."""

    def __init__(self, state: Any, message: str = "transaction step failed") -> None:
        super().__init__(message)
        self.state = state


class TransactionError(Exception):
    """A transaction failed; ``state`` is the state after rolling back."""

    def __init__(self, state: Any, error: BaseException) -> None:
        super().__init__(str(error))
        self.state = state
        self.error = error


class Transaction:
    """A chain of steps, each with a compensating rollback (saga pattern)."""

    def __init__(self) -> None:
        self._steps: list[tuple[Callable[[Any], Any], Callable[[Any], Any]]] = []

    def then(
        self, execute: Callable[[Any], Any], on_rollback: Callable[[Any], Any]
    ) -> Transaction:
        """Append a step and return this transaction."""
        self._steps.append((execute, on_rollback))
        return self

    def process(self, state: Any) -> Any:
        """Run the steps; on failure roll back completed steps and raise TransactionError."""
        completed = 0
        error: BaseException | None = None
        for execute, _ in self._steps:
            try:
                state = execute(state)
            except StepFailed as exc:
                state = exc.state
                error = exc
                break
            except Exception as exc:
                error = exc
                break
            completed += 1

        if error is None:
            return state

        for _, on_rollback in reversed(self._steps[:completed]):
            state = on_rollback(state)
        raise TransactionError(state, error) from error


class ThrottleBy:
    """Invoke the callbacks at most ``count`` times per key in every interval."""

    def __init__(
        self, interval: float, *callbacks: Callable[[Hashable], Any], count: int = 1
    ) -> None:
        self._interval = interval
        self._callbacks = callbacks
        self._limit = count if count > 0 else 1
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._counts: dict[Hashable, int] = {}

    def __call__(self, key: Hashable) -> None:
        with self._lock:
            calls = self._counts.get(key, 0)
            if calls < self._limit:
                self._counts[key] = calls + 1
                for callback in self._callbacks:
                    callback(key)
            if self._timer is None:
                self._timer = _start_timer(self._interval, self.reset)

    def reset(self) -> None:
        """Start a fresh interval, forgetting all counts."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._counts = {}
            self._timer = None


class Throttle:
    """Invoke the callbacks at most ``count`` times in every interval."""

    def __init__(self, interval: float, *callbacks: Callable[[], Any], count: int = 1) -> None:
        adapted = [lambda _key, callback=callback: callback() for callback in callbacks]
        self._throttle = ThrottleBy(interval, *adapted, count=count)

    def __call__(self) -> None:
        self._throttle(None)

    def reset(self) -> None:
        """Start a fresh interval."""
        self._throttle.reset()