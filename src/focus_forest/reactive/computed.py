"""Derived values: lazily recomputed, cached until a dependency changes.

Invalidation is pushed synchronously on every dependency write; the value
itself is pulled on the next read. A reader therefore never sees a value
older than the writes that completed before its read.

// [LAW:one-source-of-truth] The dependency set is whatever the last computation read.
"""

from __future__ import annotations

import operator
from collections.abc import Callable

from focus_forest.errors import ConfigurationError, ConfigurationReason
from focus_forest.reactive import _tracking
from focus_forest.reactive.observable import Subscription, _Listener, _ObserverSet

_UNSET = object()


class Computed:
    __slots__ = (
        "name", "_fn", "_equals", "_value", "_version", "_stale", "_computing",
        "_dependencies", "_collecting", "_observers", "compute_count",
    )

    def __init__(self, fn: Callable[[], object], *, name: str | None = None, equals=None):
        self.name = name or getattr(fn, "__name__", "computed")
        self._fn = fn
        self._equals = equals or operator.eq
        self._value = _UNSET
        self._version = 0
        self._stale = True
        self._computing = False
        self._dependencies: dict = {}
        self._collecting: dict | None = None
        self._observers = _ObserverSet()
        self.compute_count = 0

    def __repr__(self) -> str:
        state = "stale" if self._stale else repr(self._value)
        return f"Computed({self.name}={state})"

    @property
    def version(self) -> int:
        return self._version

    @property
    def stale(self) -> bool:
        return self._stale

    def get(self):
        _tracking.report_read(self)
        self._refresh()
        return self._value

    def peek(self):
        """Fresh value without registering a dependency."""
        with _tracking.untracked():
            self._refresh()
        return self._value

    def subscribe(self, fn: Callable[[object], None]) -> Subscription:
        self.peek()
        listener = _Listener(self, fn)
        self._observers.add(listener)
        return Subscription(self, listener)

    def unsubscribe(self, handle: Subscription) -> None:
        handle.dispose()

    def _refresh(self) -> None:
        if self._computing:
            raise ConfigurationError(
                ConfigurationReason.DEPENDENCY_CYCLE,
                f"{self.name} depends on itself",
            )
        if not self._stale:
            return

        previous = self._dependencies
        self._collecting = {}
        self._computing = True
        try:
            with _tracking.tracking(self):
                value = self._fn()
        finally:
            self._computing = False
            current, self._collecting = self._collecting, None
            self._rewire(previous, current)

        self.compute_count += 1
        self._stale = False
        if self._value is _UNSET or not self._equals(self._value, value):
            self._value = value
            self._version += 1

    def _rewire(self, previous: dict, current: dict) -> None:
        for dep in previous:
            if dep not in current:
                dep._remove_observer(self)
        for dep in current:
            dep._add_observer(self)
        self._dependencies = current

    # ─── observer protocol ────────────────────────────────────────────

    def _track(self, source) -> None:
        if self._collecting is not None:
            self._collecting[source] = None

    def _on_change(self, source) -> None:
        if self._stale:
            return
        self._stale = True
        self._observers.notify(self)

    def _add_observer(self, observer) -> None:
        self._observers.add(observer)

    def _remove_observer(self, observer) -> None:
        self._observers.discard(observer)


def computed(fn=None, *, name: str | None = None, equals=None):
    """Decorator form. Usable bare (`@computed`) or with options."""
    if fn is None:
        return lambda f: Computed(f, name=name, equals=equals)
    return Computed(fn, name=name, equals=equals)
