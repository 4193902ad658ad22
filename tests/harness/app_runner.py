"""App lifecycle management for Textual in-process tests.

Every call builds a fresh core driven by a ManualTicker, so tests decide
exactly when a second passes.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.pilot import Pilot

from focus_forest.app.controller import FocusForest
from focus_forest.app.ticker import ManualTicker
from focus_forest.tui.app import DEFAULT_NARROW_WIDTH, FocusForestApp


@asynccontextmanager
async def run_app(
    *,
    size: tuple[int, int] = (120, 40),
    narrow_width: int = DEFAULT_NARROW_WIDTH,
    settings_overrides: dict | None = None,
) -> AsyncIterator[tuple[Pilot, FocusForestApp]]:
    """Create and run a FocusForestApp in test mode. Yields (pilot, app)."""
    # [LAW:no-shared-mutable-globals] Fresh core for every test
    core = FocusForest(
        ticker=ManualTicker(),
        settings_overrides=settings_overrides,
        load_settings_file=False,
    )
    app = FocusForestApp(core, narrow_width=narrow_width)

    async with app.run_test(size=size) as pilot:
        await pilot.pause()
        yield pilot, app
