"""Pytest configuration and shared fixtures for focus-forest tests."""

import pytest

from focus_forest.app.controller import FocusForest
from focus_forest.app.forest_ledger import ForestLedger
from focus_forest.app.session_machine import SessionMachine
from focus_forest.app.settings_store import StyleSink
from focus_forest.app.ticker import ManualTicker


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Never read the developer's real settings file."""
    monkeypatch.setenv("FOCUS_FOREST_SETTINGS", str(tmp_path / "no-such-settings.json"))


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Redirect settings to a temp file and return its path."""
    settings_path = tmp_path / "focus-forest" / "settings.json"
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_config_path():
        return settings_path

    monkeypatch.setattr("focus_forest.io.settings.get_config_path", _get_config_path)
    return settings_path


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------

class FakeClock:
    """Deterministic wall clock: advances one second per call."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manual_ticker():
    return ManualTicker()


@pytest.fixture
def ledger(clock):
    return ForestLedger(clock=clock)


@pytest.fixture
def machine(ledger, manual_ticker):
    m = SessionMachine(ledger, manual_ticker)
    yield m
    m.dispose()


@pytest.fixture
def style_sink():
    return StyleSink()


@pytest.fixture
def controller(manual_ticker, style_sink, clock):
    core = FocusForest(
        ticker=manual_ticker,
        load_settings_file=False,
        style_sink=style_sink,
        clock=clock,
    )
    yield core
    core.dispose()
