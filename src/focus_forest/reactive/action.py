"""Batching: group several writes into one settling point."""

import functools
from contextlib import contextmanager

from focus_forest.reactive import _tracking


@contextmanager
def transaction():
    """Defer queued reactions until the outermost transaction exits."""
    _tracking.start_batch()
    try:
        yield
    finally:
        _tracking.end_batch()


def action(fn):
    """Run fn as one transaction with untracked reads."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with transaction(), _tracking.untracked():
            return fn(*args, **kwargs)

    return wrapper
