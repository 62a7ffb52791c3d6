"""Built-in color theme presets.

Each preset defines the preview (canvas) background, node fill, node
border, connector color and, optionally, an explicit node text color.
Presets are data: adding one does not change how themes are resolved.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_PRESET_ID = "default"


class ThemePreset(BaseModel):
    """A named color scheme."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(description="Display name")
    preview_bg: str = Field(description="Canvas background")
    node_color: str = Field(description="Node fill")
    border_color: str = Field(description="Node border")
    arrow_color: str = Field(description="Connector / line color")
    text_color: str | None = Field(
        default=None,
        description="Node text color; computed from node_color when absent",
    )


def _preset(id: str, name: str, bg: str, node: str, border: str, arrow: str, text: str | None) -> ThemePreset:
    return ThemePreset(
        id=id,
        name=name,
        preview_bg=bg,
        node_color=node,
        border_color=border,
        arrow_color=arrow,
        text_color=text,
    )


THEME_PRESETS: dict[str, ThemePreset] = {
    p.id: p
    for p in (
        _preset("default", "Default Blue", "#ffffff", "#4f46e5", "#4338ca", "#6366f1", "#ffffff"),
        _preset("ocean", "Ocean Breeze", "#f0f9ff", "#0ea5e9", "#0284c7", "#38bdf8", "#ffffff"),
        _preset("sunset", "Sunset Glow", "#fff7ed", "#f97316", "#ea580c", "#fb923c", "#ffffff"),
        _preset("forest", "Forest Green", "#f0fdf4", "#10b981", "#059669", "#34d399", "#ffffff"),
        _preset("purple", "Purple Dream", "#faf5ff", "#a855f7", "#9333ea", "#c084fc", "#ffffff"),
        _preset("rose", "Rose Garden", "#fff1f2", "#f43f5e", "#e11d48", "#fb7185", "#ffffff"),
        _preset("dark", "Dark Mode", "#1f2937", "#374151", "#6b7280", "#9ca3af", "#f9fafb"),
        _preset("neon", "Neon Night", "#0f172a", "#22d3ee", "#06b6d4", "#67e8f9", "#0f172a"),
        _preset("pastel", "Pastel Dreams", "#fefce8", "#fbbf24", "#f59e0b", "#fcd34d", "#78350f"),
        _preset("monochrome", "Monochrome", "#f9fafb", "#6b7280", "#374151", "#9ca3af", "#ffffff"),
        _preset("mint", "Mint Fresh", "#ecfdf5", "#14b8a6", "#0d9488", "#2dd4bf", "#ffffff"),
        _preset("crimson", "Crimson Wave", "#fef2f2", "#dc2626", "#b91c1c", "#ef4444", "#ffffff"),
        _preset("slate", "Slate Professional", "#f8fafc", "#475569", "#334155", "#64748b", "#f1f5f9"),
        _preset("amber", "Amber Warmth", "#fffbeb", "#f59e0b", "#d97706", "#fbbf24", "#451a03"),
        _preset("teal", "Teal Calm", "#f0fdfa", "#14b8a6", "#0f766e", "#2dd4bf", "#ffffff"),
        _preset("grape", "Grape Purple", "#f5f3ff", "#8b5cf6", "#7c3aed", "#a78bfa", "#ffffff"),
        _preset("emerald", "Emerald Shine", "#f0fdf4", "#059669", "#047857", "#10b981", "#ffffff"),
        _preset("fuchsia", "Fuchsia Burst", "#fdf4ff", "#d946ef", "#c026d3", "#e879f9", "#ffffff"),
        _preset("indigo", "Indigo Deep", "#eef2ff", "#6366f1", "#4f46e5", "#818cf8", "#ffffff"),
        _preset("lime", "Lime Zest", "#f7fee7", "#84cc16", "#65a30d", "#a3e635", "#1a2e05"),
        _preset("sky", "Sky Blue", "#f0f9ff", "#0ea5e9", "#0284c7", "#38bdf8", "#ffffff"),
    )
}


def get_preset(preset_id: str | None) -> ThemePreset:
    """Look up a preset, falling back to the default for unknown or None ids."""
    if preset_id is None:
        return THEME_PRESETS[DEFAULT_PRESET_ID]

    key = preset_id.strip().lower()
    preset = THEME_PRESETS.get(key)
    if preset is None:
        logger.debug(f"Unknown theme preset '{preset_id}', using '{DEFAULT_PRESET_ID}'")
        return THEME_PRESETS[DEFAULT_PRESET_ID]
    return preset


def list_presets() -> list[ThemePreset]:
    """All presets in registry order."""
    return list(THEME_PRESETS.values())
