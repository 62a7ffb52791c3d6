"""SVG to PNG conversion for rendered diagrams."""

import logging

logger = logging.getLogger(__name__)


def convert_svg_to_png(
    svg_content: str,
    dpi: int = 150,
    background_color: str = "#ffffff",
) -> bytes | None:
    """Convert SVG to PNG using CairoSVG.

    Args:
        svg_content: Rendered diagram SVG
        dpi: Output DPI
        background_color: Fill behind transparent regions, normally the theme background

    Returns:
        PNG bytes if successful, None on failure
    """
    try:
        import cairosvg
    except ImportError:
        logger.error("cairosvg not installed. Run: pip install cairosvg")
        return None

    try:
        return cairosvg.svg2png(
            bytestring=svg_content.encode("utf-8"),
            dpi=dpi,
            background_color=background_color,
        )
    except Exception as e:
        logger.error(f"SVG to PNG conversion failed: {e}")
        return None


__all__ = [
    "convert_svg_to_png",
]
