"""Tests for page selection, sidebar and viewport handling."""

import pytest

import focus_forest.app.view_store as view_store
from focus_forest.errors import ValidationError, ValidationReason


@pytest.fixture
def wide():
    return view_store.create(narrow=False)


@pytest.fixture
def narrow():
    return view_store.create(narrow=True)


def test_initial_state(wide, narrow):
    assert wide.get("page") == "dashboard"
    assert wide.get("sidebar_open") is True
    assert narrow.get("sidebar_open") is False


@pytest.mark.parametrize("page", view_store.PAGES)
def test_set_page_accepts_every_known_page(wide, page):
    view_store.set_page(wide, page)
    assert wide.get("page") == page


def test_unknown_page_is_rejected_without_change(wide):
    with pytest.raises(ValidationError) as excinfo:
        view_store.set_page(wide, "profile")

    assert excinfo.value.reason is ValidationReason.UNKNOWN_PAGE
    assert wide.get("page") == "dashboard"


def test_create_rejects_unknown_initial_page():
    with pytest.raises(ValidationError):
        view_store.create(page="nowhere")


def test_set_page_keeps_sidebar_open_when_wide(wide):
    view_store.set_page(wide, "forest")
    assert wide.get("sidebar_open") is True


def test_set_page_collapses_sidebar_when_narrow(narrow):
    view_store.toggle_sidebar(narrow)
    assert narrow.get("sidebar_open") is True

    view_store.set_page(narrow, "stats")

    assert narrow.get("page") == "stats"
    assert narrow.get("sidebar_open") is False


def test_toggle_sidebar(wide):
    view_store.toggle_sidebar(wide)
    assert wide.get("sidebar_open") is False
    view_store.toggle_sidebar(wide)
    assert wide.get("sidebar_open") is True


def test_crossing_to_narrow_closes_and_back_opens(wide):
    view_store.on_viewport_changed(wide, True)
    assert wide.get("viewport:narrow") is True
    assert wide.get("sidebar_open") is False

    view_store.on_viewport_changed(wide, False)
    assert wide.get("viewport:narrow") is False
    assert wide.get("sidebar_open") is True


def test_repeated_report_keeps_user_toggle(wide):
    view_store.toggle_sidebar(wide)

    view_store.on_viewport_changed(wide, False)

    assert wide.get("sidebar_open") is False
