"""Observable cells, read-only views and plain subscriptions.

// [LAW:single-enforcer] Observable.set is the only path that mutates a cell value.
// [LAW:one-source-of-truth] `version` moves exactly when the stored value changes.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from focus_forest.errors import ConfigurationError, ConfigurationReason
from focus_forest.reactive import _tracking


class _ObserverSet:
    """Insertion-ordered observer registry shared by cells and computeds."""

    __slots__ = ("_observers",)

    def __init__(self):
        self._observers: dict = {}

    def add(self, observer) -> None:
        self._observers.setdefault(observer, None)

    def discard(self, observer) -> None:
        self._observers.pop(observer, None)

    def notify(self, source) -> None:
        """Deliver a change to every observer, then re-raise the first failure.

        A raising subscriber must not leave later computeds un-invalidated.
        """
        first_error = None
        for observer in list(self._observers):
            try:
                observer._on_change(source)
            except Exception as exc:
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def __len__(self) -> int:
        return len(self._observers)


class _Listener:
    """Adapts a plain callback to the observer protocol.

    Called untracked with the new value. Skips the call when the source
    version did not move (a computed invalidated but recomputed equal).
    """

    __slots__ = ("_source", "_fn", "_seen_version")

    def __init__(self, source, fn: Callable[[object], None]):
        self._source = source
        self._fn = fn
        self._seen_version = source.version

    def _on_change(self, source) -> None:
        with _tracking.untracked():
            value = source.peek()
            if source.version == self._seen_version:
                return
            self._seen_version = source.version
            self._fn(value)


class Subscription:
    """Handle returned by subscribe(). dispose() is idempotent."""

    __slots__ = ("_source", "_listener")

    def __init__(self, source, listener: _Listener):
        self._source = source
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._listener is not None

    def dispose(self) -> None:
        if self._listener is None:
            return
        self._source._remove_observer(self._listener)
        self._listener = None

    unsubscribe = dispose


class Observable:
    """A single mutable value with synchronous change notification.

    Writes of a value equal to the current one are silent no-ops. An
    unequal write notifies every observer in subscription order before
    set() returns; queued reactions run at the end of the outermost batch.
    """

    __slots__ = ("name", "_value", "_equals", "_observers", "_version", "_notifying")

    def __init__(self, value=None, *, name: str | None = None, equals=None):
        self.name = name or "observable"
        self._value = value
        self._equals = equals or operator.eq
        self._observers = _ObserverSet()
        self._version = 0
        self._notifying = False

    def __repr__(self) -> str:
        return f"Observable({self.name}={self._value!r})"

    @property
    def version(self) -> int:
        return self._version

    def get(self):
        _tracking.report_read(self)
        return self._value

    def peek(self):
        """Current value without registering a dependency."""
        return self._value

    def set(self, value) -> None:
        if self._equals(self._value, value):
            return
        if self._notifying:
            raise ConfigurationError(
                ConfigurationReason.REENTRANT_WRITE,
                f"{self.name} written with a new value while notifying its own observers",
            )
        self._value = value
        self._version += 1
        self._notifying = True
        _tracking.start_batch()
        try:
            self._observers.notify(self)
        finally:
            self._notifying = False
            _tracking.end_batch()

    def subscribe(self, fn: Callable[[object], None]) -> Subscription:
        listener = _Listener(self, fn)
        self._observers.add(listener)
        return Subscription(self, listener)

    def unsubscribe(self, handle: Subscription) -> None:
        handle.dispose()

    def readonly(self) -> "ReadOnly":
        return ReadOnly(self)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    # ─── observer protocol ────────────────────────────────────────────

    def _add_observer(self, observer) -> None:
        self._observers.add(observer)

    def _remove_observer(self, observer) -> None:
        self._observers.discard(observer)


class ReadOnly:
    """Read side of a cell, handed to components that must not write it."""

    __slots__ = ("_source",)

    def __init__(self, source: Observable):
        self._source = source

    def __repr__(self) -> str:
        return f"ReadOnly({self._source!r})"

    @property
    def name(self) -> str:
        return self._source.name

    @property
    def version(self) -> int:
        return self._source.version

    def get(self):
        return self._source.get()

    def peek(self):
        return self._source.peek()

    def subscribe(self, fn: Callable[[object], None]) -> Subscription:
        return self._source.subscribe(fn)

    def unsubscribe(self, handle: Subscription) -> None:
        handle.dispose()
