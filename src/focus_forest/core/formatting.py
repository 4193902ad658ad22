"""Pure formatting helpers: elapsed time and theme colours.

No reactive state, no widgets. Safe to import from anywhere.
"""

from textual.color import Color, ColorParseError

# [LAW:one-source-of-truth] Resolved font sizes (abstract units; the renderer picks px/pt).
FONT_SIZE_MAP: dict[str, int] = {
    "small": 14,
    "medium": 16,
    "large": 18,
}

FONT_SIZES: tuple[str, ...] = tuple(FONT_SIZE_MAP)

# Alpha suffix appended to the primary colour for its hover variant.
HOVER_ALPHA_SUFFIX = "dd"

THEME_SWATCHES: tuple[str, ...] = ("#22c55e", "#3b82f6", "#8b5cf6", "#ec4899", "#f97316")


def format_elapsed(seconds: int) -> str:
    """HH:MM:SS, zero padded. Hours grow past 24 (no day rollover)."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def parse_theme_color(value: str) -> Color:
    """Parse `#rgb`, `#rrggbb` or `rgb(r, g, b)`. Raises ValueError otherwise."""
    text = str(value or "").strip()
    if not (text.startswith("#") or text.lower().startswith("rgb(")):
        raise ValueError(f"not a hex or rgb() colour: {value!r}")
    if text.startswith("#") and len(text) not in (4, 7):
        raise ValueError(f"hex colour must be #rgb or #rrggbb: {value!r}")
    try:
        return Color.parse(text)
    except ColorParseError as exc:
        raise ValueError(str(exc)) from None


def normalize_hex(value: str) -> str:
    r, g, b = parse_theme_color(value).rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def hover_variant(value: str) -> str:
    """Primary colour with a fixed alpha suffix, e.g. #22c55e -> #22c55edd."""
    return normalize_hex(value) + HOVER_ALPHA_SUFFIX


def resolve_font_size(size: str) -> int:
    return FONT_SIZE_MAP[size]
