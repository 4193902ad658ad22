"""Forest ledger: append-only log of completed focus sessions.

// [LAW:one-source-of-truth] Entries live in one list; `count` is the only
//   observable over it, so every read of the ledger tracks the same cell.
// [LAW:one-way-deps] No session, widget or rendering imports.

Fed by SessionMachine.finish(). Readers get tuple snapshots.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from focus_forest.reactive import Observable, ReadOnly


@dataclass(frozen=True)
class CompletedEntry:
    task_label: str
    completed_at: float
    sequence_id: int


class ForestLedger:
    """Append-only, insertion-ordered. No delete or edit operations exist."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._entries: list[CompletedEntry] = []
        self._sequence = itertools.count(1)
        self._count = Observable(0, name="forest:count")

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def count_cell(self) -> ReadOnly:
        return self._count.readonly()

    def _stamp(self, entry: CompletedEntry) -> CompletedEntry:
        # completed_at never goes backwards, even if the wall clock does.
        completed_at = self._clock()
        if self._entries:
            completed_at = max(completed_at, self._entries[-1].completed_at)
        return replace(entry, completed_at=completed_at, sequence_id=next(self._sequence))

    def append(self, entry: CompletedEntry) -> CompletedEntry:
        """Store `entry` and return it as stored.

        The ledger owns ordering: whatever `completed_at` and `sequence_id`
        the caller put on the entry are replaced.
        """
        stored = self._stamp(entry)
        self._entries.append(stored)
        self._count.set(len(self._entries))
        return stored

    def record(self, task_label: str) -> CompletedEntry:
        return self.append(CompletedEntry(task_label=task_label, completed_at=0.0, sequence_id=0))

    def all(self) -> tuple[CompletedEntry, ...]:
        self._count.get()
        return tuple(self._entries)

    def count(self) -> int:
        return self._count.get()

    def latest(self) -> CompletedEntry | None:
        self._count.get()
        return self._entries[-1] if self._entries else None
