"""Post-render SVG tweaks the theme variables cannot express."""

import logging
import re

logger = logging.getLogger(__name__)

DECISION_WORDS = ("Yes", "No", "Maybe", "True", "False", "Pass", "Fail")

_FILL_ATTR_RE = re.compile(r'\sfill="[^"]*"')
_EDGE_LABEL_TEXT_RE = re.compile(r'<text\b[^>]*class="[^"]*edgeLabel[^"]*"[^>]*>')
_DECISION_TEXT_RE = re.compile(
    r"(<text\b[^>]*>)(\s*(?:" + "|".join(DECISION_WORDS) + r")\s*</text>)",
    re.IGNORECASE,
)
_EDGE_LABEL_SPAN_RE = re.compile(r'<span\b([^>]*class="[^"]*edgeLabel[^"]*"[^>]*)>')
_STYLE_ATTR_RE = re.compile(r'\sstyle="([^"]*)"')


def _with_fill(tag: str, color: str) -> str:
    if _FILL_ATTR_RE.search(tag):
        return _FILL_ATTR_RE.sub(f' fill="{color}"', tag, count=1)
    return tag[:-1].rstrip("/").rstrip() + f' fill="{color}"' + ("/>" if tag.endswith("/>") else ">")


def _with_color(attrs: str, color: str) -> str:
    match = _STYLE_ATTR_RE.search(attrs)
    if not match:
        return f'{attrs} style="color: {color};"'
    rules = [rule for rule in match.group(1).split(";") if rule.strip()]
    rules = [rule for rule in rules if rule.split(":")[0].strip() != "color"]
    rules.append(f"color: {color}")
    style = "; ".join(rule.strip() for rule in rules) + ";"
    return attrs[: match.start()] + f' style="{style}"' + attrs[match.end() :]


def apply_decision_text_styling(svg: str, color: str) -> str:
    """Recolor edge-label text and decision words (Yes/No/...) in an SVG.

    Covers both label flavours Mermaid emits: SVG <text> elements and
    HTML spans inside foreignObject.

    Args:
        svg: Rendered SVG markup
        color: Text color for edge labels and decision words

    Returns:
        Restyled SVG, or the input unchanged if styling fails
    """
    try:
        styled = _EDGE_LABEL_TEXT_RE.sub(lambda m: _with_fill(m.group(0), color), svg)
        styled = _DECISION_TEXT_RE.sub(
            lambda m: _with_fill(m.group(1), color) + m.group(2), styled
        )
        styled = _EDGE_LABEL_SPAN_RE.sub(
            lambda m: f"<span{_with_color(m.group(1), color)}>", styled
        )
        return styled
    except Exception as e:
        logger.error(f"Decision text styling failed: {e}")
        return svg


__all__ = [
    "DECISION_WORDS",
    "apply_decision_text_styling",
]
