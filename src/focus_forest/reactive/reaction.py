"""Effects: side-effecting procedures re-run when what they read changes.

autorun(fn): runs fn now, records what it reads, re-runs it at the next
    settling point after any of those reads changes.
reaction(data_fn, effect_fn): tracks data_fn only; effect_fn runs untracked
    when the data value changes (optionally also on registration).

// [LAW:single-enforcer] Re-runs happen only from the settle queue, never inline.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable

from focus_forest.errors import ConfigurationError
from focus_forest.reactive import _tracking

logger = logging.getLogger(__name__)


class Reaction:
    """A tracked procedure with a dependency set and a run counter.

    Doubles as its own disposer via `.dispose()`.
    """

    def __init__(self, fn: Callable[[], None], *, name: str | None = None):
        self.name = name or getattr(fn, "__name__", "reaction")
        self._fn = fn
        self._dependencies: dict = {}  # source -> version seen at read time
        self._collecting: dict | None = None
        self._scheduled = False
        self._running = False
        self._disposed = False
        self.run_count = 0

    def __repr__(self) -> str:
        return f"Reaction({self.name}, runs={self.run_count})"

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Stop future runs. A run already in progress completes."""
        if self._disposed:
            return
        self._disposed = True
        _tracking.unschedule(self)
        self._scheduled = False
        for dep in self._dependencies:
            dep._remove_observer(self)
        self._dependencies = {}

    def run(self) -> None:
        """First run, inside a batch so anything it writes settles afterwards."""
        _tracking.start_batch()
        try:
            self._run()
        finally:
            _tracking.end_batch()

    def _run(self) -> None:
        if self._disposed:
            return
        previous = self._dependencies
        self._collecting = {}
        self._running = True
        try:
            with _tracking.tracking(self):
                self._fn()
        finally:
            self._running = False
            current, self._collecting = self._collecting, None
            self._rewire(previous, current)
            self.run_count += 1
        # A write to one of our own reads during the run must not be lost.
        if any(dep.version != seen or getattr(dep, "stale", False) for dep, seen in current.items()):
            self._schedule()

    def _run_scheduled(self) -> None:
        self._scheduled = False
        if self._disposed:
            return
        if self._running:
            self._schedule()
            return
        try:
            if self._dependencies_changed():
                self._run()
        except ConfigurationError:
            raise
        except Exception:
            logger.exception("Reaction %s failed", self.name)

    def _dependencies_changed(self) -> bool:
        for dep, seen in self._dependencies.items():
            # Computeds refresh here so an equal recomputation does not count.
            dep.peek()
            if dep.version != seen:
                return True
        return False

    def _rewire(self, previous: dict, current: dict) -> None:
        if self._disposed:
            return
        for dep in previous:
            if dep not in current:
                dep._remove_observer(self)
        for dep in current:
            dep._add_observer(self)
        self._dependencies = current

    def _schedule(self) -> None:
        if self._scheduled or self._disposed:
            return
        self._scheduled = True
        _tracking.schedule(self)

    # ─── observer protocol ────────────────────────────────────────────

    def _track(self, source) -> None:
        if self._collecting is not None and source not in self._collecting:
            self._collecting[source] = source.version

    def _on_change(self, source) -> None:
        self._schedule()


class _DataReaction(Reaction):
    def __init__(self, data_fn, effect_fn, *, fire_immediately: bool, equals, name: str | None):
        super().__init__(self._evaluate, name=name or getattr(effect_fn, "__name__", "reaction"))
        self._data_fn = data_fn
        self._effect_fn = effect_fn
        self._fire_immediately = fire_immediately
        self._equals = equals or operator.eq
        self._has_value = False
        self._value = None

    def _evaluate(self) -> None:
        value = self._data_fn()
        first = not self._has_value
        previous = self._value
        self._has_value = True
        self._value = value
        if first and not self._fire_immediately:
            return
        if not first and self._equals(previous, value):
            return
        with _tracking.untracked():
            self._effect_fn(value)


def autorun(fn: Callable[[], None], *, name: str | None = None) -> Reaction:
    """Register an effect. fn runs once immediately to establish its dependencies."""
    r = Reaction(fn, name=name)
    r.run()
    return r


def reaction(
    data_fn: Callable[[], object],
    effect_fn: Callable[[object], None],
    *,
    fire_immediately: bool = False,
    equals=None,
    name: str | None = None,
) -> Reaction:
    r = _DataReaction(data_fn, effect_fn, fire_immediately=fire_immediately, equals=equals, name=name)
    r.run()
    return r
