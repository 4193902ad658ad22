"""Focus session state machine: Idle -> Running -> (finish) -> Idle.

Owns three cells and is their only writer:
  session:status: SessionStatus
  session:elapsed: whole seconds since Start, bumped by ticks
  session:label: input text while Idle, trimmed task while Running

Other components get ReadOnly views.

// [LAW:single-enforcer] Only this class writes the session cells or appends to the ledger.
// [LAW:dataflow-not-control-flow] A tick is applied only if it carries the live token.
"""

from __future__ import annotations

import logging
from enum import Enum

from focus_forest.app.forest_ledger import CompletedEntry, ForestLedger
from focus_forest.app.ticker import TickToken, Ticker
from focus_forest.core.formatting import format_elapsed
from focus_forest.errors import (
    InvalidTransition,
    TransitionReason,
    ValidationError,
    ValidationReason,
)
from focus_forest.reactive import Computed, Observable, ReadOnly, transaction

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"


class SessionMachine:
    def __init__(self, ledger: ForestLedger, ticker: Ticker):
        self._ledger = ledger
        self._ticker = ticker
        self._token: TickToken | None = None

        self._status = Observable(SessionStatus.IDLE, name="session:status")
        self._elapsed = Observable(0, name="session:elapsed")
        self._label = Observable("", name="session:label")

        self.formatted_elapsed = Computed(
            lambda: format_elapsed(self._elapsed.get()), name="session:formatted"
        )

    # ─── Read side ────────────────────────────────────────────────────

    @property
    def status(self) -> ReadOnly:
        return self._status.readonly()

    @property
    def elapsed(self) -> ReadOnly:
        return self._elapsed.readonly()

    @property
    def task_label(self) -> ReadOnly:
        return self._label.readonly()

    @property
    def is_running(self) -> bool:
        return self._status.peek() is SessionStatus.RUNNING

    # ─── Transitions ──────────────────────────────────────────────────

    def start(self, task_label: str) -> None:
        if self.is_running:
            logger.info("start rejected: session already running")
            raise InvalidTransition(TransitionReason.ALREADY_RUNNING, "a session is already running")
        trimmed = (task_label or "").strip()
        if not trimmed:
            logger.info("start rejected: empty task label")
            raise ValidationError(ValidationReason.EMPTY_TASK, "enter a task to focus on")

        with transaction():
            self._elapsed.set(0)
            self._label.set(trimmed)
            self._status.set(SessionStatus.RUNNING)
            self._token = self._ticker.start(self._on_tick)
        logger.info("session started: %r", trimmed)

    def finish(self) -> CompletedEntry:
        if not self.is_running:
            logger.info("finish rejected: no session running")
            raise InvalidTransition(TransitionReason.NOT_RUNNING, "no session is running")

        # Clear the live token before any cell moves, so a tick arriving
        # mid-transition is already stale.
        token, self._token = self._token, None
        if token is not None:
            token.cancel()

        elapsed = self._elapsed.peek()
        with transaction():
            entry = self._ledger.record(self._label.peek())
            self._elapsed.set(0)
            self._label.set("")
            self._status.set(SessionStatus.IDLE)
        logger.info(
            "session finished: %r after %ss (tree #%d)",
            entry.task_label, elapsed, entry.sequence_id,
        )
        return entry

    def edit_task_label(self, text: str) -> None:
        """Update the pending label. Locked while a session runs."""
        if self.is_running:
            raise InvalidTransition(TransitionReason.TASK_LOCKED, "task label is locked while running")
        self._label.set(text)

    def _on_tick(self, token: TickToken) -> None:
        if token is not self._token or token.cancelled or not self.is_running:
            logger.debug("dropped stale tick from %r", token)
            return
        self._elapsed.set(self._elapsed.peek() + 1)

    def dispose(self) -> None:
        token, self._token = self._token, None
        if token is not None:
            token.cancel()
