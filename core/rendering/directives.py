"""Theme injection through Mermaid's `%%{init: ...}%%` directive.

Models often emit their own init directive (usually only flowchart
spacing). The theme directive is merged into it: keys the theme owns are
replaced, everything else the model set is kept.
"""

import json
import logging
import re
from typing import Any

from core.theming import ResolvedTheme

logger = logging.getLogger(__name__)

# Keys written from the resolved theme; all other directive keys belong to the caller
THEME_KEYS = ("theme", "themeVariables", "themeCSS", "fontFamily")

_INIT_DIRECTIVE_RE = re.compile(
    r"^\s*%%\{\s*init(?:ialize)?\s*:\s*(\{.*?\})\s*\}%%[ \t]*\n?",
    re.DOTALL,
)


def build_theme_config(theme: ResolvedTheme) -> dict[str, Any]:
    """Mermaid config dict for a resolved theme."""
    return {
        "theme": "base",
        "themeVariables": theme.to_theme_variables(),
        "themeCSS": theme.label_css(),
        "fontFamily": theme.font_family,
        "flowchart": theme.to_flowchart_config(),
    }


def build_init_directive(theme: ResolvedTheme) -> str:
    """Render the init directive line for a theme."""
    return f"%%{{init: {json.dumps(build_theme_config(theme))}}}%%"


def split_init_directive(source: str) -> tuple[str | None, str]:
    """Separate a leading init directive from the diagram body.

    Returns:
        (directive JSON body or None, remaining source)
    """
    match = _INIT_DIRECTIVE_RE.match(source)
    if not match:
        return None, source
    return match.group(1), source[match.end() :]


def parse_directive_body(body: str) -> dict[str, Any] | None:
    """Parse a directive body, accepting the single-quoted form models write."""
    for candidate in (body, body.replace("'", '"')):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None


def _merge(existing: dict[str, Any], theme_config: dict[str, Any]) -> dict[str, Any]:
    merged = {key: theme_config[key] for key in THEME_KEYS}

    flowchart = dict(theme_config["flowchart"])
    caller_flowchart = existing.get("flowchart")
    if isinstance(caller_flowchart, dict):
        flowchart.update(caller_flowchart)
    merged["flowchart"] = flowchart

    for key, value in existing.items():
        if key not in merged:
            merged[key] = value
    return merged


def apply_theme_directive(source: str, theme: ResolvedTheme) -> str:
    """Prefix source with the theme directive, merging any existing one.

    Idempotent: applying the same theme twice yields the same text.

    Args:
        source: Sanitized diagram source
        theme: Resolved theme

    Returns:
        Source starting with a single init directive
    """
    theme_config = build_theme_config(theme)
    directive, body = split_init_directive(source)

    config = theme_config
    if directive is not None:
        existing = parse_directive_body(directive)
        if existing is None:
            logger.warning("Replacing unparseable init directive with theme directive")
        else:
            config = _merge(existing, theme_config)

    body = body.lstrip("\n")
    return f"%%{{init: {json.dumps(config)}}}%%\n{body}"


__all__ = [
    "THEME_KEYS",
    "apply_theme_directive",
    "build_init_directive",
    "build_theme_config",
    "parse_directive_body",
    "split_init_directive",
]
