"""FocusForest: the state core handed to the presentation layer.

Builds every store, wires the session machine to the ledger, registers the
style reactions, and exposes read accessors plus intent handlers. The
presentation layer never writes a cell directly.

// [LAW:locality-or-seam] The only object a UI needs; all wiring lives in __init__.
// [LAW:one-way-deps] app -> reactive/core/io. Never imports tui.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import focus_forest.app.settings_store
import focus_forest.app.view_store
from focus_forest.app.forest_ledger import CompletedEntry, ForestLedger
from focus_forest.app.session_machine import SessionMachine, SessionStatus
from focus_forest.app.ticker import ManualTicker, Ticker
from focus_forest.reactive import Computed

logger = logging.getLogger(__name__)


class FocusForest:
    def __init__(
        self,
        *,
        ticker: Ticker | None = None,
        settings_overrides: dict | None = None,
        load_settings_file: bool = True,
        narrow: bool = False,
        style_sink=None,
        clock: Callable[[], float] = time.time,
    ):
        self.ticker = ticker if ticker is not None else ManualTicker()
        self.settings = focus_forest.app.settings_store.create(
            settings_overrides, load_from_disk=load_settings_file
        )
        self.view = focus_forest.app.view_store.create(narrow=narrow)
        self.ledger = ForestLedger(clock=clock)
        self.session = SessionMachine(self.ledger, self.ticker)

        self.style_sink = style_sink or focus_forest.app.settings_store.StyleSink()
        self.settings.attach_reactions(
            focus_forest.app.settings_store.setup_reactions(
                self.settings, {"style_sink": self.style_sink}
            )
        )
        self.validate_graph()
        logger.debug("core ready: settings=%s", self.settings.snapshot())

    def validate_graph(self) -> None:
        """Evaluate every derived value once; a cyclic wiring raises here."""
        for derived in self.derived_values():
            derived.peek()

    def derived_values(self) -> list[Computed]:
        return [
            self.settings.hover_color,
            self.settings.resolved_font_size,
            self.settings.strings,
            self.session.formatted_elapsed,
        ]

    def dispose(self) -> None:
        self.session.dispose()
        self.settings.dispose()
        self.view.dispose()

    # ─── Read accessors ───────────────────────────────────────────────

    @property
    def current_page(self) -> str:
        return self.view.get("page")

    @property
    def sidebar_open(self) -> bool:
        return self.view.get("sidebar_open")

    @property
    def is_narrow(self) -> bool:
        return self.view.get("viewport:narrow")

    @property
    def theme_color(self) -> str:
        return self.settings.get("theme_color")

    @property
    def hover_color(self) -> str:
        return self.settings.hover_color.get()

    @property
    def language(self) -> str:
        return self.settings.get("language")

    @property
    def strings(self) -> dict[str, str]:
        return self.settings.strings.get()

    @property
    def username(self) -> str:
        return self.settings.get("username")

    @property
    def font_size(self) -> str:
        return self.settings.get("font_size")

    @property
    def resolved_font_size(self) -> int:
        return self.settings.resolved_font_size.get()

    @property
    def session_status(self) -> SessionStatus:
        return self.session.status.get()

    @property
    def elapsed_seconds(self) -> int:
        return self.session.elapsed.get()

    @property
    def formatted_elapsed(self) -> str:
        return self.session.formatted_elapsed.get()

    @property
    def task_label(self) -> str:
        return self.session.task_label.get()

    @property
    def forest(self) -> tuple[CompletedEntry, ...]:
        return self.ledger.all()

    @property
    def forest_count(self) -> int:
        return self.ledger.count()

    # ─── Intents ──────────────────────────────────────────────────────

    def set_page(self, page: str) -> None:
        focus_forest.app.view_store.set_page(self.view, page)

    def toggle_sidebar(self) -> None:
        focus_forest.app.view_store.toggle_sidebar(self.view)

    def on_viewport_changed(self, is_narrow: bool) -> None:
        focus_forest.app.view_store.on_viewport_changed(self.view, is_narrow)

    def set_theme_color(self, value: str) -> None:
        focus_forest.app.settings_store.set_theme_color(self.settings, value)

    def set_language(self, code: str) -> None:
        focus_forest.app.settings_store.set_language(self.settings, code)

    def set_username(self, text: str) -> None:
        focus_forest.app.settings_store.set_username(self.settings, text)

    def set_font_size(self, size: str) -> None:
        focus_forest.app.settings_store.set_font_size(self.settings, size)

    def start_session(self, task_label: str) -> None:
        self.session.start(task_label)

    def finish_session(self) -> CompletedEntry:
        return self.session.finish()

    def edit_task_label(self, text: str) -> None:
        self.session.edit_task_label(text)
