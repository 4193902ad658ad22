"""Tests for autorun/reaction effects and the settle queue."""

import logging

import pytest

from focus_forest.errors import ConfigurationError, ConfigurationReason
from focus_forest.reactive import (
    Computed,
    Observable,
    autorun,
    get_pending_count,
    reaction,
    transaction,
)


def test_autorun_runs_once_on_registration():
    a = Observable(1)
    seen = []

    r = autorun(lambda: seen.append(a.get()))

    assert seen == [1]
    assert r.run_count == 1


def test_autorun_reruns_once_per_changing_write():
    a = Observable(1)
    seen = []
    autorun(lambda: seen.append(a.get()))

    a.set(2)
    a.set(2)
    a.set(3)

    assert seen == [1, 2, 3]


def test_transaction_coalesces_writes_into_one_run():
    a = Observable(0)
    b = Observable(0)
    seen = []
    autorun(lambda: seen.append((a.get(), b.get())))

    with transaction():
        a.set(1)
        b.set(2)
        assert get_pending_count() == 1
        assert seen == [(0, 0)]

    assert seen == [(0, 0), (1, 2)]
    assert get_pending_count() == 0


def test_nested_transactions_settle_at_outermost_exit():
    a = Observable(0)
    seen = []
    autorun(lambda: seen.append(a.get()))

    with transaction():
        with transaction():
            a.set(1)
        assert seen == [0]
        a.set(2)

    assert seen == [0, 2]


def test_equal_recomputation_does_not_rerun_effect():
    a = Observable(1)
    parity = Computed(lambda: a.get() % 2)
    r = autorun(lambda: parity.get())

    a.set(3)
    assert r.run_count == 1

    a.set(4)
    assert r.run_count == 2


def test_effect_writing_its_own_dependency_stabilises():
    x = Observable(0)
    depth = {"now": 0, "max": 0}

    def clamp():
        depth["now"] += 1
        depth["max"] = max(depth["max"], depth["now"])
        x.set(min(x.get(), 10))
        depth["now"] -= 1

    r = autorun(clamp)
    x.set(20)

    assert x.get() == 10
    assert r.run_count == 3
    assert depth["max"] == 1


def test_effects_feeding_each_other_forever_are_reported():
    a = Observable(0)
    b = Observable(0)
    autorun(lambda: b.set(a.get() + 1), name="a-to-b")

    with pytest.raises(ConfigurationError) as excinfo:
        autorun(lambda: a.set(b.get() + 1), name="b-to-a")

    assert excinfo.value.reason is ConfigurationReason.REACTION_LOOP
    assert get_pending_count() == 0


def test_dispose_stops_future_runs():
    a = Observable(0)
    seen = []
    r = autorun(lambda: seen.append(a.get()))

    r.dispose()
    a.set(1)

    assert seen == [0]
    assert r.disposed
    assert a.observer_count == 0
    # Idempotent
    r.dispose()


def test_dispose_during_run_lets_the_run_finish():
    a = Observable(0)
    seen = []
    holder = []

    def effect():
        value = a.get()
        if holder and value > 0:
            holder[0].dispose()
        seen.append(value)

    holder.append(autorun(effect))
    a.set(1)
    a.set(2)

    assert seen == [0, 1]


def test_dispose_of_queued_effect_inside_transaction():
    a = Observable(0)
    seen = []
    r = autorun(lambda: seen.append(a.get()))

    with transaction():
        a.set(1)
        r.dispose()

    assert seen == [0]


def test_failing_effect_is_logged_and_others_still_run(caplog):
    flag = Observable(False)
    seen = []

    def fragile():
        if flag.get():
            raise RuntimeError("boom")

    autorun(fragile, name="fragile")
    autorun(lambda: seen.append(flag.get()), name="sturdy")

    with caplog.at_level(logging.ERROR, logger="focus_forest.reactive.reaction"):
        flag.set(True)

    assert seen == [False, True]
    assert "fragile" in caplog.text


def test_dynamic_dependencies_in_effects():
    flag = Observable(True)
    a = Observable("a")
    b = Observable("b")
    seen = []
    autorun(lambda: seen.append(a.get() if flag.get() else b.get()))

    flag.set(False)
    a.set("a2")

    assert seen == ["a", "b"]


def test_reaction_fires_only_when_data_changes():
    a = Observable(0)
    seen = []
    reaction(lambda: a.get() > 5, seen.append)

    a.set(3)
    a.set(6)
    a.set(7)

    assert seen == [True]


def test_reaction_fire_immediately():
    a = Observable("x")
    seen = []

    reaction(lambda: a.get(), seen.append, fire_immediately=True)
    a.set("y")

    assert seen == ["x", "y"]


def test_reaction_effect_reads_are_untracked():
    a = Observable(1)
    b = Observable(100)
    seen = []
    reaction(lambda: a.get(), lambda v: seen.append(v + b.get()))

    b.set(200)
    assert seen == []

    a.set(2)
    assert seen == [202]


def test_effect_reads_fresh_derived_value_after_batch():
    a = Observable(1)
    doubled = Computed(lambda: a.get() * 2)
    seen = []
    autorun(lambda: seen.append((a.get(), doubled.get())))

    with transaction():
        a.set(2)
        a.set(5)

    assert seen == [(1, 2), (5, 10)]
