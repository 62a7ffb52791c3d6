"""Theme resolution: base defaults, then preset, then caller overrides.

Text colors the caller did not set explicitly are computed with the
contrast engine against the *effective* background they sit on, so
overriding a fill color without touching its text color still yields
readable text.
"""

import logging
import re
from functools import lru_cache

from .contrast import contrast_ratio, parse_hex_color, pick_readable_text_color
from .presets import get_preset
from .schemas import (
    THEME_VARIABLE_ALIASES,
    ResolvedTheme,
    ThemeRequest,
    ThemeVariable,
)

logger = logging.getLogger(__name__)

# Hardcoded fallbacks for every field the presets do not define
BASE_DEFAULTS: dict[ThemeVariable, str] = {
    ThemeVariable.BACKGROUND: "#ffffff",
    ThemeVariable.NODE_FILL: "#4f46e5",
    ThemeVariable.NODE_BORDER: "#000000",
    ThemeVariable.LINE_COLOR: "#000000",
    ThemeVariable.FONT_FAMILY: "Segoe UI, sans-serif",
    ThemeVariable.FONT_SIZE: "16px",
    ThemeVariable.NODE_SPACING: "50",
    ThemeVariable.RANK_SPACING: "80",
    ThemeVariable.CURVE: "basis",
}

SUPPORTED_CURVES = frozenset(
    {
        "basis",
        "bumpX",
        "bumpY",
        "cardinal",
        "catmullRom",
        "linear",
        "monotoneX",
        "monotoneY",
        "natural",
        "step",
        "stepAfter",
        "stepBefore",
    }
)

MIN_TEXT_CONTRAST = 3.0

_NUMERIC_SIZE_RE = re.compile(r"^\d+(\.\d+)?$")


# Fields holding free-form values; everything else is a color
_NON_COLOR_FIELDS = frozenset(
    {
        ThemeVariable.FONT_FAMILY,
        ThemeVariable.FONT_SIZE,
        ThemeVariable.NODE_SPACING,
        ThemeVariable.RANK_SPACING,
        ThemeVariable.CURVE,
    }
)


def _color(value: str) -> str:
    # Parseable hex becomes #rrggbb; named colors and rgb() pass through
    rgb = parse_hex_color(value)
    if rgb is None:
        return value
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def _explicit_overrides(overrides: dict[str, str]) -> dict[ThemeVariable, str]:
    """Fold synonyms: first non-blank input name per field wins."""
    explicit: dict[ThemeVariable, str] = {}
    for field, names in THEME_VARIABLE_ALIASES.items():
        for name in names:
            value = overrides.get(name)
            if value is not None and value.strip():
                value = value.strip()
                explicit[field] = value if field in _NON_COLOR_FIELDS else _color(value)
                break
    return explicit


def _font_size(value: str) -> str:
    # Bare numbers are pixel sizes
    if _NUMERIC_SIZE_RE.match(value):
        return f"{value}px"
    return value


def _spacing(value: str, field: ThemeVariable) -> int:
    try:
        parsed = int(float(value))
    except (ValueError, OverflowError):
        parsed = 0
    if parsed <= 0:
        logger.warning(f"Invalid {field.value} '{value}', using {BASE_DEFAULTS[field]}")
        return int(BASE_DEFAULTS[field])
    return parsed


def _curve(value: str) -> str:
    if value in SUPPORTED_CURVES:
        return value
    logger.warning(f"Unsupported curve '{value}', using {BASE_DEFAULTS[ThemeVariable.CURVE]}")
    return BASE_DEFAULTS[ThemeVariable.CURVE]


def _warn_low_contrast(label: str, text: str, background: str) -> None:
    ratio = contrast_ratio(text, background)
    if ratio is not None and ratio < MIN_TEXT_CONTRAST:
        logger.warning(
            f"Explicit {label} {text} on {background} has contrast ratio {ratio:.2f} "
            f"(< {MIN_TEXT_CONTRAST})"
        )


@lru_cache(maxsize=256)
def _resolve(
    preset_id: str | None, override_items: tuple[tuple[str, str], ...]
) -> ResolvedTheme:
    preset = get_preset(preset_id)
    explicit = _explicit_overrides(dict(override_items))

    def pick(field: ThemeVariable, preset_value: str | None = None) -> str:
        if field in explicit:
            return explicit[field]
        if preset_value:
            return preset_value
        return BASE_DEFAULTS[field]

    background = pick(ThemeVariable.BACKGROUND, preset.preview_bg)
    node_fill = pick(ThemeVariable.NODE_FILL, preset.node_color)
    node_border = pick(ThemeVariable.NODE_BORDER, preset.border_color)
    line_color = pick(ThemeVariable.LINE_COLOR, preset.arrow_color)

    # Node text: explicit > recomputed for an overridden fill > preset > computed
    if ThemeVariable.NODE_TEXT_COLOR in explicit:
        node_text_color = explicit[ThemeVariable.NODE_TEXT_COLOR]
        _warn_low_contrast("node text color", node_text_color, node_fill)
    elif ThemeVariable.NODE_FILL in explicit or not preset.text_color:
        node_text_color = pick_readable_text_color(node_fill)
    else:
        node_text_color = preset.text_color

    # Labels drawn on the canvas rather than inside nodes
    canvas_text = pick_readable_text_color(background)
    decision = explicit.get(ThemeVariable.DECISION_TEXT_COLOR)
    edge_label_color = explicit.get(ThemeVariable.EDGE_LABEL_COLOR) or decision or canvas_text
    cluster_text_color = explicit.get(ThemeVariable.CLUSTER_TEXT_COLOR) or decision or canvas_text

    theme = ResolvedTheme(
        preset_id=preset.id,
        background=background,
        node_fill=node_fill,
        node_border=node_border,
        line_color=line_color,
        node_text_color=node_text_color,
        edge_label_color=edge_label_color,
        edge_label_background=explicit.get(ThemeVariable.EDGE_LABEL_BACKGROUND, background),
        cluster_fill=explicit.get(ThemeVariable.CLUSTER_FILL, background),
        cluster_border=explicit.get(ThemeVariable.CLUSTER_BORDER, node_border),
        cluster_text_color=cluster_text_color,
        title_color=explicit.get(ThemeVariable.TITLE_COLOR, canvas_text),
        decision_text_color=decision or edge_label_color,
        font_family=pick(ThemeVariable.FONT_FAMILY),
        font_size=_font_size(pick(ThemeVariable.FONT_SIZE)),
        node_spacing=_spacing(pick(ThemeVariable.NODE_SPACING), ThemeVariable.NODE_SPACING),
        rank_spacing=_spacing(pick(ThemeVariable.RANK_SPACING), ThemeVariable.RANK_SPACING),
        curve=_curve(pick(ThemeVariable.CURVE)),
    )
    logger.debug(
        f"Resolved theme preset={theme.preset_id} overrides={sorted(f.value for f in explicit)}"
    )
    return theme


def resolve_theme(request: ThemeRequest | None = None) -> ResolvedTheme:
    """Resolve a theme request into a complete theme.

    Precedence (highest first): explicit override > preset value >
    computed value > hardcoded fallback. Blank overrides are ignored.

    Args:
        request: Preset id and overrides; None means the default preset

    Returns:
        ResolvedTheme with every field populated
    """
    if request is None:
        request = ThemeRequest()
    if not isinstance(request, ThemeRequest):
        raise TypeError(f"request must be a ThemeRequest, got {type(request).__name__}")

    preset_id, items = request.cache_key()
    return _resolve(preset_id, items)


__all__ = [
    "BASE_DEFAULTS",
    "SUPPORTED_CURVES",
    "resolve_theme",
]
