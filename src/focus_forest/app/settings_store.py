"""Settings store schema, intents and style reactions.

// [LAW:one-source-of-truth] All known settings and their defaults live in SCHEMA.
// [LAW:single-enforcer] The style effects are the single writers to the style sink.
"""

from __future__ import annotations

import logging

import focus_forest.io.settings
from focus_forest.core import formatting, i18n
from focus_forest.errors import ValidationError, ValidationReason
from focus_forest.reactive import Store, autorun, computed

logger = logging.getLogger(__name__)

# [LAW:one-source-of-truth] Settings keys and defaults.
SCHEMA: dict[str, object] = {
    "theme_color": "#22c55e",
    "language": i18n.DEFAULT_LANGUAGE,
    "username": "Guest",
    "font_size": "medium",
}


# ─── Validation ─────────────────────────────────────────────────────────────


def _check_theme_color(value) -> str:
    """Stored form is always lowercase #rrggbb."""
    try:
        return formatting.normalize_hex(value)
    except ValueError as exc:
        raise ValidationError(ValidationReason.INVALID_COLOR, str(exc)) from None


def _check_language(value) -> str:
    if value not in i18n.SUPPORTED_LANGUAGES:
        raise ValidationError(
            ValidationReason.UNSUPPORTED_LANGUAGE,
            f"{value!r} is not one of {', '.join(i18n.SUPPORTED_LANGUAGES)}",
        )
    return value


def _check_font_size(value) -> str:
    if value not in formatting.FONT_SIZES:
        raise ValidationError(
            ValidationReason.INVALID_FONT_SIZE,
            f"{value!r} is not one of {', '.join(formatting.FONT_SIZES)}",
        )
    return value


def _check_username(value) -> str:
    return "" if value is None else str(value)


# [LAW:dataflow-not-control-flow] Per-key validator table.
VALIDATORS = {
    "theme_color": _check_theme_color,
    "language": _check_language,
    "username": _check_username,
    "font_size": _check_font_size,
}


def validate(key: str, value) -> object:
    """Return the value to store for `key`, or raise ValidationError."""
    return VALIDATORS[key](value)


def _sanitize(values: dict, source: str) -> dict:
    """Keep known keys with valid values; log and drop the rest."""
    clean = {}
    for key, value in values.items():
        if key not in SCHEMA:
            continue
        try:
            clean[key] = validate(key, value)
        except ValidationError as exc:
            logger.warning("Ignoring %s setting %s=%r: %s", source, key, value, exc)
    return clean


# ─── Construction ───────────────────────────────────────────────────────────


def create(initial_overrides: dict | None = None, *, load_from_disk: bool = True) -> Store:
    """Create the settings store, seeded from the settings file then overrides.

    Overrides are validated strictly (they come from the caller); file values
    that fail validation fall back to defaults.
    """
    seeded = _sanitize(focus_forest.io.settings.load_settings(), "file") if load_from_disk else {}
    for key, value in (initial_overrides or {}).items():
        seeded[key] = validate(key, value)
    store = Store(SCHEMA, initial=seeded, name="settings")

    # [LAW:one-source-of-truth] Derived style parameters.
    @computed(name="settings:hover_color")
    def hover_color():
        return formatting.hover_variant(store.get("theme_color"))

    @computed(name="settings:resolved_font_size")
    def resolved_font_size():
        return formatting.resolve_font_size(store.get("font_size"))

    @computed(name="settings:strings")
    def strings():
        return i18n.strings_for(store.get("language"))

    store.hover_color = hover_color
    store.resolved_font_size = resolved_font_size
    store.strings = strings
    return store


# ─── Intents ────────────────────────────────────────────────────────────────


def set_theme_color(store: Store, value: str) -> None:
    store.set("theme_color", validate("theme_color", value))


def set_language(store: Store, code: str) -> None:
    store.set("language", validate("language", code))


def set_username(store: Store, text: str) -> None:
    store.set("username", validate("username", text))


def set_font_size(store: Store, size: str) -> None:
    store.set("font_size", validate("font_size", size))


# ─── Style projection ───────────────────────────────────────────────────────


class StyleSink:
    """Key/value surface the style effects write into.

    The default implementation just records; the TUI subclasses it to push
    values into Textual CSS variables.
    """

    def __init__(self):
        self.values: dict[str, object] = {}
        self.writes: list[tuple[str, object]] = []

    def set_property(self, name: str, value: object) -> None:
        self.values[name] = value
        self.writes.append((name, value))
        self.on_property(name, value)

    def on_property(self, name: str, value: object) -> None:
        """Hook for subclasses."""


def setup_reactions(store: Store, context: dict | None = None) -> list:
    """Register style effects. Returns list of disposers.

    context: dict with optional "style_sink" (StyleSink). Without a sink the
    effects still run against a private recording sink.
    """
    sink = (context or {}).get("style_sink") or StyleSink()
    disposers = []

    def _project_theme():
        sink.set_property("primary-color", store.get("theme_color"))
        sink.set_property("primary-color-hover", store.hover_color.get())

    def _project_font_size():
        sink.set_property("font-size-base", store.resolved_font_size.get())

    disposers.append(autorun(_project_theme, name="style:theme"))
    disposers.append(autorun(_project_font_size, name="style:font_size"))
    return disposers
