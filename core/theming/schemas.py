"""Theme request and resolved-theme models.

The set of theme variables is closed: every field the renderer consumes is
named in ThemeVariable, and every accepted input name (the field name
itself plus the renderer's own synonyms) is listed in
THEME_VARIABLE_ALIASES. Unknown names are rejected when a ThemeRequest is
built, so a typo never turns into a silently ignored override.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ThemeVariable(str, Enum):
    """Theme fields consumed by the renderer."""

    BACKGROUND = "background"
    NODE_FILL = "node_fill"
    NODE_BORDER = "node_border"
    LINE_COLOR = "line_color"
    NODE_TEXT_COLOR = "node_text_color"
    EDGE_LABEL_COLOR = "edge_label_color"
    EDGE_LABEL_BACKGROUND = "edge_label_background"
    CLUSTER_FILL = "cluster_fill"
    CLUSTER_BORDER = "cluster_border"
    CLUSTER_TEXT_COLOR = "cluster_text_color"
    TITLE_COLOR = "title_color"
    DECISION_TEXT_COLOR = "decision_text_color"
    FONT_FAMILY = "font_family"
    FONT_SIZE = "font_size"
    NODE_SPACING = "node_spacing"
    RANK_SPACING = "rank_spacing"
    CURVE = "curve"


# Accepted input names per field, highest priority first
THEME_VARIABLE_ALIASES: dict[ThemeVariable, tuple[str, ...]] = {
    ThemeVariable.BACKGROUND: ("background", "previewBg"),
    ThemeVariable.NODE_FILL: ("node_fill", "nodeBkg", "mainBkg", "primaryColor"),
    ThemeVariable.NODE_BORDER: ("node_border", "nodeBorder", "primaryBorderColor"),
    ThemeVariable.LINE_COLOR: ("line_color", "lineColor", "defaultLinkColor", "arrowColor"),
    ThemeVariable.NODE_TEXT_COLOR: (
        "node_text_color",
        "nodeTextColor",
        "primaryTextColor",
        "textColor",
    ),
    ThemeVariable.EDGE_LABEL_COLOR: ("edge_label_color", "edgeLabelColor", "labelTextColor"),
    ThemeVariable.EDGE_LABEL_BACKGROUND: ("edge_label_background", "edgeLabelBackground"),
    ThemeVariable.CLUSTER_FILL: ("cluster_fill", "clusterBkg"),
    ThemeVariable.CLUSTER_BORDER: ("cluster_border", "clusterBorder"),
    ThemeVariable.CLUSTER_TEXT_COLOR: ("cluster_text_color", "clusterTextColor"),
    ThemeVariable.TITLE_COLOR: ("title_color", "titleColor"),
    ThemeVariable.DECISION_TEXT_COLOR: (
        "decision_text_color",
        "decisionSecondaryTextColor",
        "decisionTertiaryTextColor",
    ),
    ThemeVariable.FONT_FAMILY: ("font_family", "fontFamily"),
    ThemeVariable.FONT_SIZE: ("font_size", "fontSize"),
    ThemeVariable.NODE_SPACING: ("node_spacing", "nodeSpacing"),
    ThemeVariable.RANK_SPACING: ("rank_spacing", "rankSpacing"),
    ThemeVariable.CURVE: ("curve",),
}

KNOWN_OVERRIDE_NAMES: frozenset[str] = frozenset(
    name for names in THEME_VARIABLE_ALIASES.values() for name in names
)

# Node-text family: setting any of these counts as an explicit text color
TEXT_COLOR_NAMES = THEME_VARIABLE_ALIASES[ThemeVariable.NODE_TEXT_COLOR]


class ThemeRequest(BaseModel):
    """Input to the theme resolver.

    Blank (empty or whitespace-only) override values are kept but treated
    as "not set" during resolution.
    """

    model_config = ConfigDict(frozen=True)

    preset_id: str | None = Field(default=None, description="Built-in preset id")
    overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Theme variable name (field name or renderer synonym) -> raw value",
    )

    @field_validator("overrides")
    @classmethod
    def _known_names_only(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - KNOWN_OVERRIDE_NAMES)
        if unknown:
            raise ValueError(f"Unknown theme variable(s): {', '.join(unknown)}")
        return value

    def cache_key(self) -> tuple[str | None, tuple[tuple[str, str], ...]]:
        """Hashable identity of this request."""
        return (self.preset_id, tuple(sorted(self.overrides.items())))


class ResolvedTheme(BaseModel):
    """Fully resolved theme. Every field always has a value."""

    model_config = ConfigDict(frozen=True)

    preset_id: str
    background: str
    node_fill: str
    node_border: str
    line_color: str
    node_text_color: str
    edge_label_color: str
    edge_label_background: str
    cluster_fill: str
    cluster_border: str
    cluster_text_color: str
    title_color: str
    decision_text_color: str
    font_family: str
    font_size: str
    node_spacing: int
    rank_spacing: int
    curve: str

    def to_theme_variables(self) -> dict[str, str]:
        """Renderer theme variables (camelCase names)."""
        return {
            "background": self.background,
            "primaryColor": self.node_fill,
            "mainBkg": self.node_fill,
            "nodeBkg": self.node_fill,
            "primaryBorderColor": self.node_border,
            "nodeBorder": self.node_border,
            "lineColor": self.line_color,
            "defaultLinkColor": self.line_color,
            "primaryTextColor": self.node_text_color,
            "nodeTextColor": self.node_text_color,
            "textColor": self.node_text_color,
            "edgeLabelBackground": self.edge_label_background,
            "clusterBkg": self.cluster_fill,
            "clusterBorder": self.cluster_border,
            "titleColor": self.title_color,
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
        }

    def to_flowchart_config(self) -> dict[str, object]:
        """Flowchart layout options (spacing hints and edge curve)."""
        return {
            "nodeSpacing": self.node_spacing,
            "rankSpacing": self.rank_spacing,
            "curve": self.curve,
            "htmlLabels": True,
            "useMaxWidth": True,
        }

    def label_css(self) -> str:
        """CSS for label colors the theme variables do not reach."""
        return (
            f".edgeLabel, .edgeLabel p {{ color: {self.edge_label_color}; }} "
            f".cluster-label .nodeLabel, .cluster-label span {{ color: {self.cluster_text_color}; }}"
        )
