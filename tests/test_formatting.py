"""Tests for elapsed-time and colour formatting, and localisation lookups."""

import pytest
from rich.style import Style

from focus_forest.app.forest_ledger import ForestLedger
from focus_forest.core import formatting, i18n
from focus_forest.tui.rendering import render_forest_grid


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00:00"),
        (5, "00:00:05"),
        (59, "00:00:59"),
        (60, "00:01:00"),
        (3599, "00:59:59"),
        (3600, "01:00:00"),
        (90061, "25:01:01"),
        (360000, "100:00:00"),
        (-3, "00:00:00"),
    ],
)
def test_format_elapsed(seconds, expected):
    assert formatting.format_elapsed(seconds) == expected


def test_hover_variant_appends_alpha():
    assert formatting.hover_variant("#22c55e") == "#22c55edd"
    assert formatting.hover_variant("#ABC") == "#aabbccdd"


def test_parse_theme_color_rejects_names():
    with pytest.raises(ValueError):
        formatting.parse_theme_color("green")


def test_resolve_font_size():
    assert [formatting.resolve_font_size(s) for s in formatting.FONT_SIZES] == [14, 16, 18]


def test_swatches_are_valid_colours():
    for swatch in formatting.THEME_SWATCHES:
        assert formatting.normalize_hex(swatch) == swatch


def test_every_locale_has_every_key():
    reference = set(i18n.STRINGS[i18n.DEFAULT_LANGUAGE])
    for code, table in i18n.STRINGS.items():
        assert set(table) == reference, code


def test_every_locale_has_a_label():
    assert set(i18n.LANGUAGE_LABELS) == set(i18n.SUPPORTED_LANGUAGES)


def test_unknown_language_falls_back_to_english():
    assert i18n.strings_for("xx") is i18n.STRINGS["en"]


def test_task_noun_pluralises():
    en = i18n.strings_for("en")
    assert i18n.task_noun(en, 1) == "task"
    assert i18n.task_noun(en, 0) == "tasks"
    assert i18n.task_noun(en, 3) == "tasks"


def test_forest_grid_accent_is_a_valid_rich_style():
    ledger = ForestLedger(clock=lambda: 1_700_000_000.0)
    ledger.record("Read paper")
    accent = formatting.normalize_hex("rgb(34, 197, 94)")

    text = render_forest_grid(ledger.all(), accent)

    assert Style.parse(accent).color is not None
    assert "Read paper" in text.plain
