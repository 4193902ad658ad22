"""Derivation tracking and the settle queue.

Holds the process-wide bookkeeping that does not belong to a single cell:
which derivation is currently recording reads, how deep the current batch
is, and the reactions waiting for the settling point.

// [LAW:single-enforcer] run_pending() is the only place queued reactions execute.
// [LAW:one-source-of-truth] Batch depth decides when a settle starts; nothing else does.
"""

import contextvars
import logging
from contextlib import contextmanager

from focus_forest.errors import ConfigurationError, ConfigurationReason

logger = logging.getLogger(__name__)

# Settle rounds allowed before reactions are declared to be feeding each other.
MAX_SETTLE_ROUNDS = 100

current_derivation = contextvars.ContextVar("current_derivation", default=None)

_batch_depth = 0
_settling = False
_pending: list = []


def report_read(source) -> None:
    """Record `source` as a dependency of whichever derivation is running."""
    derivation = current_derivation.get()
    if derivation is not None:
        derivation._track(source)


@contextmanager
def tracking(derivation):
    token = current_derivation.set(derivation)
    try:
        yield
    finally:
        current_derivation.reset(token)


@contextmanager
def untracked():
    token = current_derivation.set(None)
    try:
        yield
    finally:
        current_derivation.reset(token)


def start_batch() -> None:
    global _batch_depth
    _batch_depth += 1


def end_batch() -> None:
    global _batch_depth
    _batch_depth -= 1
    if _batch_depth == 0:
        run_pending()


def schedule(reaction) -> None:
    _pending.append(reaction)


def unschedule(reaction) -> None:
    try:
        _pending.remove(reaction)
    except ValueError:
        pass


def get_pending_count() -> int:
    return len(_pending)


def run_pending() -> None:
    """Drain the reaction queue to completion.

    Reactions scheduled while the queue drains are picked up by a later
    round of the same settle, so one settle always finishes before another
    can start.
    """
    global _settling
    if _settling or _batch_depth:
        return
    _settling = True
    try:
        rounds = 0
        while _pending:
            rounds += 1
            if rounds > MAX_SETTLE_ROUNDS:
                names = sorted({getattr(r, "name", repr(r)) for r in _pending})
                _pending.clear()
                raise ConfigurationError(
                    ConfigurationReason.REACTION_LOOP,
                    f"reactions did not settle after {MAX_SETTLE_ROUNDS} rounds: {', '.join(names)}",
                )
            batch = list(_pending)
            _pending.clear()
            for reaction in batch:
                reaction._run_scheduled()
    except ConfigurationError:
        _pending.clear()
        raise
    finally:
        _settling = False
