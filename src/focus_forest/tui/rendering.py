"""Rich renderables for the page bodies. Pure functions of their inputs.

// [LAW:one-way-deps] No app or widget imports; callers pass plain values.
"""

from datetime import datetime

from rich.text import Text

from focus_forest.core.i18n import task_noun

TREE_GLYPH = "\U0001F332"  # 🌲


def render_forest_summary(count: int, strings: dict[str, str]) -> Text:
    noun = task_noun(strings, count)
    return Text(f"{strings['taskCompleted']} {count} {noun}.", style="bold")


def render_forest_grid(entries, accent: str) -> Text:
    text = Text()
    for entry in entries:
        stamp = datetime.fromtimestamp(entry.completed_at).strftime("%H:%M")
        text.append(f"{TREE_GLYPH} ", style=accent)
        text.append(entry.task_label, style="bold")
        text.append(f"  #{entry.sequence_id} · {stamp}\n", style="dim")
    return text


def render_coming_soon(title: str, strings: dict[str, str], actions: tuple[str, ...] = ()) -> Text:
    text = Text()
    text.append(f"{title}\n", style="bold")
    if actions:
        text.append("  ".join(f"[ {strings[key]} ]" for key in actions) + "\n", style="dim")
    text.append(f"\n{title} {strings['comingSoon']}")
    return text


def render_profile(username: str) -> Text:
    return Text(f"\U0001F464 {username}")
