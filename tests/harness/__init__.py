"""Textual in-process test harness for focus-forest.

    from tests.harness import run_app, click_and_settle, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    click_and_settle,
    press_and_settle,
    resize_and_settle,
    tick_and_settle,
    type_and_settle,
)

__all__ = [
    "run_app",
    "click_and_settle",
    "press_and_settle",
    "resize_and_settle",
    "tick_and_settle",
    "type_and_settle",
]
