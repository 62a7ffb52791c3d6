"""Theme instructions embedded in the article-to-diagrams prompt.

The instructions only steer the model's layout and styling choices. The
authoritative colors are applied at render time through the theme
directive, so a model that ignores these instructions still renders with
the requested theme.
"""

from enum import Enum

from pydantic import BaseModel, Field

from core.theming import ThemeRequest, get_preset, resolve_theme


class FlowchartOrientation(str, Enum):
    """Layout styles the model can be asked for."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    PIPELINE = "pipeline"
    RADIAL = "radial"
    CIRCULAR = "circular"
    SWIMLANE = "swimlane"
    GRID = "grid"
    HIERARCHICAL = "hierarchical"
    LAYERED = "layered"


class ThemeInstructionConfig(BaseModel):
    """Styling and layout preferences for generated flowcharts."""

    font_name: str = Field(default="Arial", description="Font family name")
    text_color: str = Field(default="#000000", description="Node text color")
    text_size: int = Field(default=14, description="Font size in pixels")
    arrow_color: str = Field(default="#333333", description="Arrow/link color")
    box_container_color: str = Field(default="#FFFFFF", description="Node fill color")
    container_box_border_color: str = Field(default="#000000", description="Node border color")
    use_suitable_shapes: bool = Field(
        default=False, description="Pick node shapes by node role instead of plain rectangles"
    )
    max_height: int = Field(default=5, description="Maximum vertical depth in levels")
    max_width: int = Field(default=4, description="Maximum parallel branches")
    orientation: FlowchartOrientation = FlowchartOrientation.VERTICAL
    additional_instructions: str = Field(default="", description="Free-form user instructions")


_ORIENTATION_INSTRUCTIONS: dict[FlowchartOrientation, str] = {
    FlowchartOrientation.VERTICAL: """4. ORIENTATION - VERTICAL (Top-Down):
   - Use 'flowchart TD' syntax, flowing top to bottom
   - Best for: linear processes, decision trees, sequential workflows""",
    FlowchartOrientation.HORIZONTAL: """4. ORIENTATION - HORIZONTAL (Left-Right):
   - Use 'flowchart LR' syntax, flowing left to right
   - Best for: timelines, pipelines, data flows""",
    FlowchartOrientation.PIPELINE: """4. ORIENTATION - PIPELINE (Conveyor):
   - Use 'flowchart LR' with modules in a single horizontal line
   - Clearly mark the input and output of each stage
   - Example: A[Input] --> B[Stage 1] --> C[Stage 2] --> D[Output]""",
    FlowchartOrientation.RADIAL: """4. ORIENTATION - RADIAL (Hub-and-Spoke):
   - Use 'flowchart TD' with one emphasized central hub node
   - Branch every module from the hub: Hub((Central Hub)) --> A[Module 1]""",
    FlowchartOrientation.CIRCULAR: """4. ORIENTATION - CIRCULAR (Loop/Cycle):
   - Show the feedback loop explicitly by linking the last step back
   - Best for: iterative processes and continuous cycles""",
    FlowchartOrientation.SWIMLANE: """4. ORIENTATION - SWIMLANE (Multi-Lane):
   - Use one 'subgraph' per role, module or agent and label each lane
   - Show cross-lane interactions with dotted arrows: A2 -.-> B1""",
    FlowchartOrientation.GRID: """4. ORIENTATION - GRID (Matrix):
   - Arrange nodes in rows and columns with consistent spacing
   - Link nodes both horizontally and vertically""",
    FlowchartOrientation.HIERARCHICAL: """4. ORIENTATION - HIERARCHICAL (Tree):
   - Use 'flowchart TD' with parents above their children
   - Best for: decision trees, classifications, organizational charts""",
    FlowchartOrientation.LAYERED: """4. ORIENTATION - LAYERED (Stacked):
   - Use one 'subgraph' per abstraction layer (UI, Logic, Data, ...)
   - Show vertical flow between layers""",
}

_SUITABLE_SHAPES = """5. NODE SHAPES - Use appropriate shapes based on node type:
   - START/END nodes: stadium ([Start]) or circle ((End))
   - PROCESS/ACTION nodes: rectangle [Process Step]
   - DECISION nodes: diamond {Decision?}
   - INPUT/OUTPUT nodes: parallelogram [/User Input/]
   - SUBPROCESS nodes: double border [[Call Function]]
   - DATABASE nodes: cylinder [(Database)]"""

_PLAIN_SHAPES = """5. NODE SHAPES:
   - Use consistent rectangular shapes [Node Text] for all nodes"""


def theme_config_warnings(config: ThemeInstructionConfig) -> list[str]:
    """Readability warnings for a configuration; empty when nothing looks off."""
    warnings = []
    if not 8 <= config.text_size <= 32:
        warnings.append("Text size should be between 8px and 32px for optimal readability")
    if config.max_height < 2:
        warnings.append("Maximum height should be at least 2 levels for meaningful flowcharts")
    elif config.max_height > 10:
        warnings.append("Maximum height above 10 levels may result in overly complex diagrams")
    if config.max_width < 2:
        warnings.append("Maximum width should be at least 2 branches for meaningful flowcharts")
    elif config.max_width > 8:
        warnings.append("Maximum width above 8 branches may result in cluttered diagrams")
    if config.text_color.lower() == config.box_container_color.lower():
        warnings.append("Text color and node color are the same - text will be invisible")
    return warnings


def build_theme_instructions(config: ThemeInstructionConfig | None = None) -> str:
    """Render the styling section of the prompt.

    Args:
        config: Preferences; defaults when None

    Returns:
        Plain-text instructions to append to the article prompt
    """
    config = config or ThemeInstructionConfig()

    sections = [
        f"""VISUAL STYLING REQUIREMENTS:

1. FONT STYLING:
   - Font Family: {config.font_name}
   - Text Color: {config.text_color}
   - Font Size: {config.text_size}px

2. COLOR SCHEME:
   - Node Background Color: {config.box_container_color}
   - Node Border Color: {config.container_box_border_color}
   - Arrow/Link Color: {config.arrow_color}

3. DIAGRAM STRUCTURE:
   - Keep the hierarchy within {config.max_height} levels deep
   - Limit horizontal branching to {config.max_width} parallel paths
   - Target 6-12 nodes per diagram; split larger topics into separate diagrams""",
        _ORIENTATION_INSTRUCTIONS[config.orientation],
        _SUITABLE_SHAPES if config.use_suitable_shapes else _PLAIN_SHAPES,
        f"""6. MERMAID STYLING SYNTAX:
   classDef defaultStyle fill:{config.box_container_color},stroke:{config.container_box_border_color},stroke-width:2px,color:{config.text_color}

7. LINK/ARROW STYLING:
   - Solid arrows for normal flow: A --> B
   - Dotted arrows for optional paths: A -.-> B
   - Thick arrows for emphasis: A ==> B
   - Label decisions: A -->|Yes| B""",
    ]

    if config.additional_instructions.strip():
        sections.append(
            f"8. ADDITIONAL CUSTOM INSTRUCTIONS:\n{config.additional_instructions.strip()}"
        )

    return "\n\n".join(sections)


def theme_instructions_from_preset(
    preset_id: str | None,
    orientation: FlowchartOrientation = FlowchartOrientation.VERTICAL,
) -> ThemeInstructionConfig:
    """Instruction config matching a built-in preset's colors.

    Text color comes from the resolved theme, so presets without an
    explicit text color still get readable text.
    """
    preset = get_preset(preset_id)
    theme = resolve_theme(ThemeRequest(preset_id=preset.id))
    return ThemeInstructionConfig(
        font_name=theme.font_family.split(",")[0].strip(),
        text_color=theme.node_text_color,
        arrow_color=preset.arrow_color,
        box_container_color=preset.node_color,
        container_box_border_color=preset.border_color,
        orientation=orientation,
    )


__all__ = [
    "FlowchartOrientation",
    "ThemeInstructionConfig",
    "build_theme_instructions",
    "theme_config_warnings",
    "theme_instructions_from_preset",
]
