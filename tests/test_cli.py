"""Tests for the command-line parser and its mapping onto settings overrides."""

import pytest

from focus_forest import cli
from focus_forest.tui.app import DEFAULT_NARROW_WIDTH


def test_defaults_produce_no_overrides():
    args = cli.build_parser().parse_args([])

    assert cli.collect_overrides(args) == {}
    assert args.narrow_width == DEFAULT_NARROW_WIDTH


def test_flags_become_overrides():
    args = cli.build_parser().parse_args(
        ["--username", "Ada", "--language", "de", "--theme-color", "#3b82f6", "--font-size", "large"]
    )

    assert cli.collect_overrides(args) == {
        "username": "Ada",
        "language": "de",
        "theme_color": "#3b82f6",
        "font_size": "large",
    }


def test_unknown_language_is_a_usage_error():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--language", "xx"])


def test_bad_theme_colour_is_a_usage_error(monkeypatch, tmp_path):
    monkeypatch.setenv("FOCUS_FOREST_LOG_FILE", str(tmp_path / "cli.log"))
    monkeypatch.setattr(cli.focus_forest.io.logging_setup, "configure", lambda *a, **k: _FakeRuntime())

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--theme-color", "chartreuse"])

    assert excinfo.value.code == 2


class _FakeRuntime:
    file_path = "unused.log"
