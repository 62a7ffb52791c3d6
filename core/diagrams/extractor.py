"""Split a model response into titled diagrams.

Wire format the prompt asks for:

    ---DIAGRAM: <title>---
    <diagram source>

    ---DIAGRAM: <next title>---
    <next diagram source>

Responses that ignore the format still produce one diagram (the fallback
path), flagged on the ExtractionResult and logged at WARNING.
"""

import logging
import re

from .sanitizer import sanitize, strip_code_fence
from .schemas import DiagramSpec, ExtractionResult

logger = logging.getLogger(__name__)

DIAGRAM_DELIMITER = re.compile(r"---DIAGRAM:\s*(.+?)---", re.IGNORECASE)
FALLBACK_TITLE = "Generated Flowchart"


def parse_diagram_response(raw: str) -> ExtractionResult:
    """Parse a raw model completion into diagrams.

    Text before the first delimiter is discarded. Pairs whose title or body
    is blank, or whose body sanitizes to nothing, are dropped. When the
    response contains no delimiter at all, the whole cleaned response
    becomes a single diagram titled FALLBACK_TITLE.

    Args:
        raw: The model's text response

    Returns:
        ExtractionResult with diagrams in response order

    Raises:
        TypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"raw must be a string, got {type(raw).__name__}")

    cleaned = strip_code_fence(raw.replace("\r\n", "\n").replace("\r", "\n"))
    parts = DIAGRAM_DELIMITER.split(cleaned)
    # parts = [preamble, title1, body1, title2, body2, ...]
    delimiter_count = (len(parts) - 1) // 2

    if delimiter_count == 0:
        source = sanitize(cleaned)
        if not source:
            logger.warning("Model response was empty after cleaning, no diagrams extracted")
            return ExtractionResult()
        logger.warning(
            f"No ---DIAGRAM: delimiters in response ({len(cleaned)} chars), "
            f"using whole response as '{FALLBACK_TITLE}'"
        )
        return ExtractionResult(
            diagrams=[DiagramSpec(title=FALLBACK_TITLE, source_text=source)],
            used_fallback=True,
        )

    diagrams: list[DiagramSpec] = []
    for i in range(1, len(parts) - 1, 2):
        title = parts[i].strip()
        body = parts[i + 1].strip()
        if not title or not body:
            logger.debug(f"Skipping empty diagram block #{(i + 1) // 2}")
            continue
        source = sanitize(body)
        if source:
            diagrams.append(DiagramSpec(title=title, source_text=source))

    logger.info(f"Extracted {len(diagrams)} diagram(s) from {delimiter_count} delimiter(s)")
    return ExtractionResult(diagrams=diagrams, delimiter_count=delimiter_count)


def extract_diagrams(raw: str) -> list[DiagramSpec]:
    """Return the diagrams in a model response, in order. Never raises for strings."""
    return parse_diagram_response(raw).diagrams


def format_diagram_response(specs: list[DiagramSpec]) -> str:
    """Serialize specs back into the delimiter wire format."""
    blocks = []
    for spec in specs:
        if "---" in spec.title:
            raise ValueError(f"Diagram title must not contain '---': {spec.title!r}")
        blocks.append(f"---DIAGRAM: {spec.title}---\n{spec.source_text.strip()}")
    return "\n\n".join(blocks)


__all__ = [
    "DIAGRAM_DELIMITER",
    "FALLBACK_TITLE",
    "extract_diagrams",
    "format_diagram_response",
    "parse_diagram_response",
]
