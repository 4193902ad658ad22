"""View store: current page, sidebar visibility and viewport mode.

// [LAW:one-source-of-truth] PAGES is the closed set of page identifiers.
// [LAW:single-enforcer] Sidebar auto-open/close happens only in on_viewport_changed and set_page.

Viewport width thresholds are presentation config; this module only sees
the resulting narrow/wide flag.
"""

from focus_forest.errors import ValidationError, ValidationReason
from focus_forest.reactive import Store, action

PAGES: tuple[str, ...] = ("dashboard", "forest", "rooms", "stats", "settings")


def create(narrow: bool = False, page: str = "dashboard") -> Store:
    if page not in PAGES:
        raise ValidationError(ValidationReason.UNKNOWN_PAGE, f"{page!r}")
    return Store(
        {
            "page": page,
            "sidebar_open": not narrow,
            "viewport:narrow": bool(narrow),
        },
        name="view",
    )


@action
def set_page(store: Store, page: str) -> None:
    """Select a page. On narrow viewports the sidebar collapses as well."""
    if page not in PAGES:
        raise ValidationError(
            ValidationReason.UNKNOWN_PAGE,
            f"{page!r} is not one of {', '.join(PAGES)}",
        )
    store.set("page", page)
    if store.get("viewport:narrow"):
        store.set("sidebar_open", False)


@action
def toggle_sidebar(store: Store) -> None:
    store.set("sidebar_open", not store.get("sidebar_open"))


@action
def on_viewport_changed(store: Store, is_narrow: bool) -> None:
    """Reset the sidebar when the viewport crosses the narrow/wide boundary.

    Reports that repeat the current mode leave a user-toggled sidebar alone.
    """
    is_narrow = bool(is_narrow)
    if store.get("viewport:narrow") == is_narrow:
        return
    store.set("viewport:narrow", is_narrow)
    store.set("sidebar_open", not is_narrow)
