"""Core state -> widget bridge. Builds push callbacks and registers reactions.

// [LAW:one-way-deps] Depends on the core (data) and widget classes (push targets).
// [LAW:locality-or-seam] Coupling between stores and widgets isolated here.
// [LAW:single-enforcer] Each push callback is the single path from a state slice to its widgets.
"""

from __future__ import annotations

from textual.widgets import Button, ContentSwitcher, Input, Select, Static

from focus_forest.app.session_machine import SessionStatus
from focus_forest.app.settings_store import StyleSink
from focus_forest.app.view_store import PAGES
from focus_forest.core.formatting import FONT_SIZES
from focus_forest.reactive import reaction
from focus_forest.tui import rendering


class TextualStyleSink(StyleSink):
    """Style sink that re-applies app CSS when a style variable changes."""

    def __init__(self):
        super().__init__()
        self._app = None

    def bind(self, app) -> None:
        self._app = app

    def css_variables(self) -> dict[str, str]:
        return {name: str(value) for name, value in self.values.items()}

    def on_property(self, name: str, value: object) -> None:
        app = self._app
        if app is not None and getattr(app, "is_running", False):
            app.refresh_css(animate=False)


def build_reaction_context(app) -> dict:
    """Build push callbacks for setup_reactions()."""
    core = app.core

    def push_page(page):
        app.query_one("#pages", ContentSwitcher).current = page
        for name in PAGES:
            app.query_one(f"#nav-{name}", Button).set_class(name == page, "-active")
        app.query_one("#page-title", Static).update(core.strings[page])

    def push_sidebar(is_open):
        app.query_one("#sidebar").display = bool(is_open)
        app.query_one("#menu-toggle", Button).label = "✕" if is_open else "☰"

    def push_strings(strings):
        app.query_one("#app-name", Static).update(f"\U0001F332 {strings['appName']}")
        for name in PAGES:
            app.query_one(f"#nav-{name}", Button).label = strings[name]
        app.query_one("#page-title", Static).update(strings[core.view.get("page")])
        app.query_one("#task-input", Input).placeholder = strings["whatToFocusOn"]
        app.query_one("#start", Button).label = strings["start"]
        app.query_one("#finish", Button).label = strings["finish"]
        app.query_one("#rooms", Static).update(
            rendering.render_coming_soon(strings["rooms"], strings, ("invite", "createRoom"))
        )
        app.query_one("#stats", Static).update(
            rendering.render_coming_soon(strings["stats"], strings, ("daily", "weekly", "monthly", "yearly"))
        )
        app.query_one("#label-profile", Static).update(strings["profile"])
        app.query_one("#label-username", Static).update(strings["username"])
        app.query_one("#label-appearance", Static).update(strings["appearance"])
        app.query_one("#label-theme", Static).update(strings["themeColor"])
        app.query_one("#label-font", Static).update(strings["fontSize"])
        app.query_one("#label-language", Static).update(strings["language"])
        for size in FONT_SIZES:
            app.query_one(f"#font-{size}", Button).label = strings[size]

    def push_timer(text):
        app.query_one("#timer-display", Static).update(text)

    def push_session(state):
        status, label = state
        running = status is SessionStatus.RUNNING
        task_input = app.query_one("#task-input", Input)
        task_input.disabled = running
        if task_input.value != label:
            task_input.value = label
        app.query_one("#start", Button).display = not running
        app.query_one("#finish", Button).display = running

    def push_forest(state):
        entries, strings, accent = state
        app.query_one("#forest-summary", Static).update(
            rendering.render_forest_summary(len(entries), strings)
        )
        app.query_one("#forest-grid", Static).update(rendering.render_forest_grid(entries, accent))

    def push_profile(username):
        app.query_one("#user-profile", Static).update(rendering.render_profile(username))
        username_input = app.query_one("#username-input", Input)
        if username_input.value != username:
            username_input.value = username

    def push_settings_selection(state):
        theme, font_size, language = state
        for button in app.query(".swatch").results(Button):
            button.set_class(button.name == theme, "-selected")
        for size in FONT_SIZES:
            app.query_one(f"#font-{size}", Button).set_class(size == font_size, "-active")
        select = app.query_one("#language-select", Select)
        if select.value != language:
            select.value = language

    return {
        "push_page": push_page,
        "push_sidebar": push_sidebar,
        "push_strings": push_strings,
        "push_timer": push_timer,
        "push_session": push_session,
        "push_forest": push_forest,
        "push_profile": push_profile,
        "push_settings_selection": push_settings_selection,
    }


def setup_reactions(core, context: dict) -> list:
    """Register widget-push reactions. Returns list of disposers.

    Every reaction fires immediately so the first frame is hydrated from state.
    """
    return [
        reaction(lambda: core.strings, context["push_strings"], fire_immediately=True, name="tui:strings"),
        reaction(lambda: core.current_page, context["push_page"], fire_immediately=True, name="tui:page"),
        reaction(lambda: core.sidebar_open, context["push_sidebar"], fire_immediately=True, name="tui:sidebar"),
        reaction(lambda: core.formatted_elapsed, context["push_timer"], fire_immediately=True, name="tui:timer"),
        reaction(
            lambda: (core.session_status, core.task_label),
            context["push_session"],
            fire_immediately=True,
            name="tui:session",
        ),
        reaction(
            lambda: (core.forest, core.strings, core.theme_color),
            context["push_forest"],
            fire_immediately=True,
            name="tui:forest",
        ),
        reaction(lambda: core.username, context["push_profile"], fire_immediately=True, name="tui:profile"),
        reaction(
            lambda: (core.theme_color, core.font_size, core.language),
            context["push_settings_selection"],
            fire_immediately=True,
            name="tui:settings",
        ),
    ]
