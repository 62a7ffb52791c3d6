"""Repair pass for AI-authored Mermaid source.

Steps, in order:
1. Normalize line endings and strip code-fence wrappers.
2. Repair parentheses inside square-bracket node labels
   (`A[Label (extra) end]` breaks the flowchart grammar).
3. Drop explanatory lines the model appended after the diagram body.

Every pass is idempotent, so sanitizing already-sanitized text is a no-op.
Styling directives (classDef, class, style, linkStyle) are never touched.
"""

import logging
import re

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r"^```[\w-]*[ \t]*\n?")
_FENCE_CLOSE_RE = re.compile(r"\n?```\s*$")

# One bracket label on one line containing a parenthesized segment.
# Groups: text before "(", text inside "( )", text after ")".
_LABEL_PAREN_RE = re.compile(r"\[([^\[\]\n]*?)\(([^()\[\]\n]*?)\)([^\[\]\n]*?)\]")

_PROSE_LABEL_RE = re.compile(r"^(note|explanation|description):", re.IGNORECASE)

DELIMITER_PREFIX = "---"
FENCE_PREFIX = "```"


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_code_fence(text: str) -> str:
    """Remove ``` / ```mermaid wrappers from the start and end of text.

    Nested wrappers (a fenced block inside a fenced block) are all removed.
    """
    cleaned = text.strip()
    while cleaned.startswith("```"):
        cleaned = _FENCE_OPEN_RE.sub("", cleaned, count=1)
        cleaned = _FENCE_CLOSE_RE.sub("", cleaned, count=1).strip()
    return cleaned


def _is_protected_label(before: str, after: str) -> bool:
    # [(text)] is the cylinder shape; ["..."] labels may contain parentheses
    if not before and not after:
        return True
    return before.lstrip().startswith('"') and after.rstrip().endswith('"')


def rewrite_label_parentheses(text: str) -> str:
    """First pass: turn `[a (b) c]` into `[a - b - c]`.

    Only the first parenthesized segment of each label is rewritten; the
    strip pass handles the rest.
    """

    def _dash(match: re.Match) -> str:
        before, inside, after = match.groups()
        if _is_protected_label(before, after):
            return match.group(0)
        return f"[{before}- {inside} -{after}]"

    return _LABEL_PAREN_RE.sub(_dash, text)


def strip_label_parentheses(text: str) -> str:
    """Second pass: delete remaining parentheses inside labels, keeping their text.

    Repeats until nothing changes so labels with several (or nested)
    parenthesized segments end up clean.
    """

    def _strip(match: re.Match) -> str:
        before, inside, after = match.groups()
        if _is_protected_label(before, after):
            return match.group(0)
        return f"[{before}{inside}{after}]"

    while True:
        repaired = _LABEL_PAREN_RE.sub(_strip, text)
        if repaired == text:
            return repaired
        text = repaired


def trim_trailing_prose(text: str) -> str:
    """Drop lines after the last line that looks like diagram content.

    The cutoff line is the last one that is non-blank, does not start with
    the diagram delimiter marker or a code fence and is not a "note:" /
    "explanation:" / "description:" label. If no line qualifies the text is
    returned as is.
    This is a heuristic: prose that happens to look like diagram syntax is
    kept.
    """
    lines = text.split("\n")
    last_valid = len(lines) - 1

    for i in range(len(lines) - 1, -1, -1):
        line = lines[i].strip()
        if (
            line
            and not line.startswith((DELIMITER_PREFIX, FENCE_PREFIX))
            and not _PROSE_LABEL_RE.match(line)
        ):
            last_valid = i
            break

    return "\n".join(lines[: last_valid + 1])


def sanitize(raw_source: str) -> str:
    """Make AI-authored diagram source renderable.

    Args:
        raw_source: Diagram text, possibly fenced, malformed or followed by prose

    Returns:
        Repaired source with LF line endings; worst case the trimmed input

    Raises:
        TypeError: If raw_source is not a string
    """
    if not isinstance(raw_source, str):
        raise TypeError(f"raw_source must be a string, got {type(raw_source).__name__}")

    try:
        text = normalize_line_endings(raw_source)
        text = strip_code_fence(text)
        text = rewrite_label_parentheses(text)
        text = strip_label_parentheses(text)
        text = trim_trailing_prose(text)
        return text.strip()
    except Exception as e:
        logger.error(f"Sanitizer failed, returning input unchanged: {e}")
        return raw_source.strip()


__all__ = [
    "normalize_line_endings",
    "rewrite_label_parentheses",
    "sanitize",
    "strip_code_fence",
    "strip_label_parentheses",
    "trim_trailing_prose",
]
