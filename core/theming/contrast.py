"""Readable text color selection from a background color.

Uses the sRGB relative-luminance formula: channels are converted to
linear light, weighted (0.2126, 0.7152, 0.0722), and the result compared
against a fixed threshold. Bright backgrounds get near-black text, dark
backgrounds get white text.

Malformed colors never raise. They are treated as a bright background so
the caller still receives a safe dark text color.
"""

import re
from functools import lru_cache

DARK_TEXT = "#111827"
LIGHT_TEXT = "#ffffff"
LUMINANCE_THRESHOLD = 0.5

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex_color(value: str) -> tuple[int, int, int] | None:
    """Parse a 3- or 6-digit hex color, optional '#', any case.

    Returns:
        (r, g, b) in 0-255, or None if the value is not a hex color
    """
    if not isinstance(value, str):
        raise TypeError(f"color must be a string, got {type(value).__name__}")

    match = _HEX_RE.match(value.strip())
    if not match:
        return None

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _to_linear(channel: int) -> float:
    v = channel / 255
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float | None:
    """Relative luminance in [0, 1], or None for unparseable input."""
    rgb = parse_hex_color(value)
    if rgb is None:
        return None
    r, g, b = (_to_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: str, second: str) -> float | None:
    """WCAG contrast ratio between two hex colors (1.0 to 21.0).

    Returns None if either color cannot be parsed.
    """
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    if l1 is None or l2 is None:
        return None
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


@lru_cache(maxsize=1024)
def _pick_for(background_hex: str) -> str:
    luminance = relative_luminance(background_hex)
    if luminance is None:
        # Unparseable: assume a bright background
        return DARK_TEXT
    return DARK_TEXT if luminance > LUMINANCE_THRESHOLD else LIGHT_TEXT


def pick_readable_text_color(background_hex: str) -> str:
    """Pick a readable text color for the given background.

    Args:
        background_hex: Background as "#rgb", "#rrggbb", "rgb" or "rrggbb"

    Returns:
        "#111827" for bright (or unparseable) backgrounds, "#ffffff" otherwise

    Raises:
        TypeError: If background_hex is not a string
    """
    if not isinstance(background_hex, str):
        raise TypeError(
            f"background_hex must be a string, got {type(background_hex).__name__}"
        )
    return _pick_for(background_hex)


__all__ = [
    "DARK_TEXT",
    "LIGHT_TEXT",
    "LUMINANCE_THRESHOLD",
    "contrast_ratio",
    "parse_hex_color",
    "pick_readable_text_color",
    "relative_luminance",
]
