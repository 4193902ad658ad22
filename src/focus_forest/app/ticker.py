"""Tick sources for the session state machine.

A ticker calls `callback(token)` once per interval until the token is
cancelled. The token travels with every tick so the receiver can reject a
tick that was already in flight when its session ended.

// [LAW:single-enforcer] TickToken.cancel() is the only way a tick source stops.
// [LAW:locality-or-seam] Tickers know nothing about sessions; SessionMachine
//   knows nothing about event loops.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Protocol

TICK_INTERVAL_S = 1.0

_token_ids = itertools.count(1)


class TickToken:
    """Cancellation token for one Running period."""

    __slots__ = ("id", "_cancelled", "_on_cancel")

    def __init__(self, on_cancel: Callable[[], None] | None = None):
        self.id = next(_token_ids)
        self._cancelled = False
        self._on_cancel = on_cancel

    def __repr__(self) -> str:
        return f"TickToken({self.id}, cancelled={self._cancelled})"

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        stop, self._on_cancel = self._on_cancel, None
        if stop is not None:
            stop()


TickCallback = Callable[[TickToken], None]


class Ticker(Protocol):
    def start(self, callback: TickCallback) -> TickToken: ...


class ManualTicker:
    """Test/headless ticker: ticks only when told to.

    fire() delivers to live tokens, like a real timer. deliver() hands a tick
    to a specific token regardless of cancellation, which is how a tick that
    was already queued before cancellation looks to the receiver.
    """

    def __init__(self):
        self._live: dict[TickToken, TickCallback] = {}
        self._issued: dict[TickToken, TickCallback] = {}

    @property
    def active(self) -> bool:
        return bool(self._live)

    @property
    def issued(self) -> list[TickToken]:
        return list(self._issued)

    @property
    def last_token(self) -> TickToken | None:
        return next(reversed(self._issued), None)

    def start(self, callback: TickCallback) -> TickToken:
        token = TickToken()
        token._on_cancel = lambda t=token: self._live.pop(t, None)
        self._live[token] = callback
        self._issued[token] = callback
        return token

    def fire(self, count: int = 1) -> None:
        for _ in range(count):
            for token, callback in list(self._live.items()):
                callback(token)

    def deliver(self, token: TickToken) -> None:
        self._issued[token](token)
