"""Diagram theming: readable text colors, presets and theme resolution.

Example:
    from core.theming import ThemeRequest, resolve_theme

    theme = resolve_theme(ThemeRequest(preset_id="ocean", overrides={"nodeBkg": "#fde68a"}))
    theme.node_text_color   # "#111827" - recomputed for the lighter fill
    theme.to_theme_variables()["primaryColor"]  # "#fde68a"
"""

from .contrast import (
    DARK_TEXT,
    LIGHT_TEXT,
    contrast_ratio,
    parse_hex_color,
    pick_readable_text_color,
    relative_luminance,
)
from .presets import DEFAULT_PRESET_ID, THEME_PRESETS, ThemePreset, get_preset, list_presets
from .resolver import BASE_DEFAULTS, resolve_theme
from .schemas import (
    KNOWN_OVERRIDE_NAMES,
    THEME_VARIABLE_ALIASES,
    ResolvedTheme,
    ThemeRequest,
    ThemeVariable,
)

__all__ = [
    # Contrast
    "DARK_TEXT",
    "LIGHT_TEXT",
    "contrast_ratio",
    "parse_hex_color",
    "pick_readable_text_color",
    "relative_luminance",
    # Presets
    "DEFAULT_PRESET_ID",
    "THEME_PRESETS",
    "ThemePreset",
    "get_preset",
    "list_presets",
    # Resolution
    "BASE_DEFAULTS",
    "KNOWN_OVERRIDE_NAMES",
    "THEME_VARIABLE_ALIASES",
    "ResolvedTheme",
    "ThemeRequest",
    "ThemeVariable",
    "resolve_theme",
]
