"""Main TUI application using Textual.

// [LAW:locality-or-seam] Thin coordinator: widgets are composed here, state
//   pushes live in view_store_bridge, state itself lives in FocusForest.
// [LAW:one-source-of-truth] Widgets never hold state the core does not own;
//   every user action becomes an intent on the core.
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, ContentSwitcher, Input, Select, Static

import focus_forest.app.settings_store
import focus_forest.tui.view_store_bridge
from focus_forest.app.controller import FocusForest
from focus_forest.app.view_store import PAGES
from focus_forest.core.formatting import FONT_SIZES, THEME_SWATCHES
from focus_forest.core.i18n import LANGUAGE_LABELS
from focus_forest.errors import InvalidTransition, ValidationError
from focus_forest.tui.ticker import TextualTicker

logger = logging.getLogger(__name__)

# Terminal columns at or below which the layout is "narrow".
DEFAULT_NARROW_WIDTH = 80


class FocusForestApp(App):
    """TUI application for focus-forest."""

    TITLE = "Focus Forest"

    CSS = """
    #layout { height: 100%; }

    #sidebar {
        width: 24;
        padding: 1;
        background: $panel;
    }
    #app-name { color: $primary-color; text-style: bold; margin-bottom: 1; }
    .nav { width: 100%; margin-bottom: 1; }
    .nav.-active { background: $primary-color; }

    #main { padding: 0 1; }
    #header { height: 3; }
    #menu-toggle { min-width: 5; width: 5; }
    #page-title { width: 1fr; padding: 1; text-style: bold; }
    #user-profile { width: auto; padding: 1; }

    #timer-display {
        content-align: center middle;
        height: 5;
        text-style: bold;
        color: $primary-color;
    }
    .primary { background: $primary-color; }
    .primary:hover { background: $primary-color-hover; }

    .settings-row { height: auto; margin-bottom: 1; }
    .swatch { min-width: 6; width: 6; }
    .swatch.-selected { text-style: bold reverse; }
    .font-size.-active { background: $primary-color; }
    """

    BINDINGS = [
        Binding("ctrl+b", "toggle_sidebar", "Menu"),
        Binding("f1", "page('dashboard')", "Dashboard", show=False),
        Binding("f2", "page('forest')", "Forest", show=False),
        Binding("f3", "page('rooms')", "Rooms", show=False),
        Binding("f4", "page('stats')", "Stats", show=False),
        Binding("f5", "page('settings')", "Settings", show=False),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        core: FocusForest | None = None,
        *,
        narrow_width: int = DEFAULT_NARROW_WIDTH,
        settings_overrides: dict | None = None,
    ):
        super().__init__()
        self._style_sink = focus_forest.tui.view_store_bridge.TextualStyleSink()
        self._narrow_width = narrow_width
        self.core = core or FocusForest(
            ticker=TextualTicker(self),
            settings_overrides=settings_overrides,
            style_sink=self._style_sink,
        )
        self._reaction_disposers: list = []
        if self.core.style_sink is not self._style_sink:
            # Core built elsewhere: project its settings into our sink as well.
            self._reaction_disposers.extend(
                focus_forest.app.settings_store.setup_reactions(
                    self.core.settings, {"style_sink": self._style_sink}
                )
            )
        self._style_sink.bind(self)

    # ─── CSS variables from the style sink ─────────────────────────────

    def get_css_variables(self) -> dict[str, str]:
        variables = super().get_css_variables()
        defaults = focus_forest.app.settings_store.SCHEMA["theme_color"]
        variables.setdefault("primary-color", defaults)
        variables.setdefault("primary-color-hover", f"{defaults}dd")
        sink = getattr(self, "_style_sink", None)
        if sink is not None:
            variables.update(sink.css_variables())
        return variables

    # ─── Composition ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Horizontal(id="layout"):
            with Vertical(id="sidebar"):
                yield Static(id="app-name")
                for page in PAGES:
                    yield Button(page, id=f"nav-{page}", classes="nav")
            with Vertical(id="main"):
                with Horizontal(id="header"):
                    yield Button("☰", id="menu-toggle")
                    yield Static(id="page-title")
                    yield Static(id="user-profile")
                with ContentSwitcher(initial=self.core.current_page, id="pages"):
                    with Vertical(id="dashboard"):
                        yield Static(id="timer-display")
                        yield Input(id="task-input")
                        yield Button("start", id="start", classes="primary")
                        yield Button("finish", id="finish")
                    with VerticalScroll(id="forest"):
                        yield Static(id="forest-summary")
                        yield Static(id="forest-grid")
                    yield Static(id="rooms")
                    yield Static(id="stats")
                    with VerticalScroll(id="settings"):
                        yield from self._compose_settings()

    def _compose_settings(self) -> ComposeResult:
        yield Static(id="label-profile", classes="section")
        yield Static(id="label-username")
        yield Input(self.core.username, id="username-input")
        yield Static(id="label-appearance", classes="section")
        yield Static(id="label-theme")
        with Horizontal(classes="settings-row"):
            for color in THEME_SWATCHES:
                swatch = Button("  ", id=f"swatch-{color[1:]}", name=color, classes="swatch")
                swatch.styles.background = color
                yield swatch
        yield Static(id="label-font")
        with Horizontal(classes="settings-row"):
            for size in FONT_SIZES:
                yield Button(size, id=f"font-{size}", name=size, classes="font-size")
        yield Static(id="label-language")
        yield Select(
            [(label, code) for code, label in LANGUAGE_LABELS.items()],
            value=self.core.language,
            allow_blank=False,
            id="language-select",
        )

    def on_mount(self) -> None:
        context = focus_forest.tui.view_store_bridge.build_reaction_context(self)
        self._reaction_disposers.extend(
            focus_forest.tui.view_store_bridge.setup_reactions(self.core, context)
        )
        self.core.on_viewport_changed(self.size.width <= self._narrow_width)
        self.refresh_css(animate=False)

    def on_unmount(self) -> None:
        for disposer in self._reaction_disposers:
            disposer.dispose()
        self._reaction_disposers = []
        self.core.dispose()

    # ─── Intent dispatch ──────────────────────────────────────────────

    def _dispatch(self, intent, *args) -> bool:
        """Run an intent; surface rejections as a non-blocking notice."""
        try:
            intent(*args)
        except (ValidationError, InvalidTransition) as exc:
            logger.info("intent %s rejected: %s", getattr(intent, "__name__", intent), exc)
            self.notify(exc.detail or str(exc), title=exc.reason.value, severity="warning")
            return False
        return True

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        button_id = button.id or ""
        if button_id.startswith("nav-"):
            self._dispatch(self.core.set_page, button_id[len("nav-"):])
        elif button_id == "menu-toggle":
            self._dispatch(self.core.toggle_sidebar)
        elif button_id == "start":
            self._dispatch(self.core.start_session, self.query_one("#task-input", Input).value)
        elif button_id == "finish":
            self._dispatch(self.core.finish_session)
        elif button.has_class("swatch"):
            self._dispatch(self.core.set_theme_color, button.name)
        elif button.has_class("font-size"):
            self._dispatch(self.core.set_font_size, button.name)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "task-input":
            if not self.core.session.is_running:
                self._dispatch(self.core.edit_task_label, event.value)
        elif event.input.id == "username-input":
            self._dispatch(self.core.set_username, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "task-input":
            self._dispatch(self.core.start_session, event.value)

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "language-select" and event.value is not Select.BLANK:
            self._dispatch(self.core.set_language, event.value)

    def on_resize(self, event: events.Resize) -> None:
        self.core.on_viewport_changed(event.size.width <= self._narrow_width)

    # ─── Actions ──────────────────────────────────────────────────────

    def action_toggle_sidebar(self) -> None:
        self._dispatch(self.core.toggle_sidebar)

    def action_page(self, page: str) -> None:
        self._dispatch(self.core.set_page, page)
