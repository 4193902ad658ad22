"""Tests for the append-only forest ledger."""

from dataclasses import FrozenInstanceError

import pytest

from focus_forest.app.forest_ledger import CompletedEntry, ForestLedger
from focus_forest.reactive import autorun


def test_empty_ledger(ledger):
    assert ledger.count() == 0
    assert len(ledger) == 0
    assert ledger.all() == ()
    assert ledger.latest() is None


def test_record_assigns_strictly_increasing_sequence_ids(ledger):
    entries = [ledger.record(f"task {i}") for i in range(5)]

    ids = [e.sequence_id for e in entries]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
    assert [e.task_label for e in ledger.all()] == [f"task {i}" for i in range(5)]
    assert ledger.latest() == entries[-1]


def test_completed_at_comes_from_injected_clock(clock):
    ledger = ForestLedger(clock=clock)
    first = ledger.record("a")
    second = ledger.record("b")

    assert second.completed_at > first.completed_at


def test_entries_are_immutable(ledger):
    entry = ledger.record("frozen")
    with pytest.raises(FrozenInstanceError):
        entry.task_label = "thawed"


def test_snapshots_are_not_affected_by_later_appends(ledger):
    ledger.record("a")
    snapshot = ledger.all()
    ledger.record("b")

    assert len(snapshot) == 1
    assert len(ledger.all()) == 2


def test_reads_track_the_count_cell(ledger):
    seen = []
    autorun(lambda: seen.append(len(ledger.all())))

    ledger.record("a")
    ledger.record("b")

    assert seen == [0, 1, 2]
    assert ledger.count_cell.get() == 2


def test_append_assigns_its_own_sequence_ids(ledger):
    ledger.append(CompletedEntry("a", 0.0, 7))
    ledger.append(CompletedEntry("b", 0.0, 7))
    ledger.record("c")

    ids = [e.sequence_id for e in ledger.all()]
    assert ids == [1, 2, 3]
    assert [e.task_label for e in ledger.all()] == ["a", "b", "c"]


def test_append_returns_the_stored_entry(ledger):
    stored = ledger.append(CompletedEntry("manual", 0.0, 99))

    assert ledger.all() == (stored,)
    assert stored.sequence_id == 1
    assert stored.completed_at > 0


def test_completed_at_never_decreases_when_clock_steps_back():
    readings = iter([100.0, 50.0, 75.0, 200.0])
    ledger = ForestLedger(clock=lambda: next(readings))

    stamps = [ledger.record(label).completed_at for label in "abcd"]

    assert stamps == [100.0, 100.0, 100.0, 200.0]
