"""Cheap local syntax check for Mermaid source.

Catches the mistakes models make most often (missing diagram header,
unbalanced label brackets, stray subgraph/end, unterminated init directive)
without a round trip to the renderer. Passing this check does not
guarantee the renderer accepts the diagram.
"""

import logging

from .schemas import SyntaxIssue

logger = logging.getLogger(__name__)

KNOWN_DIAGRAM_TYPES = frozenset(
    {
        "flowchart",
        "flowchart-elk",
        "graph",
        "sequenceDiagram",
        "classDiagram",
        "classDiagram-v2",
        "stateDiagram",
        "stateDiagram-v2",
        "erDiagram",
        "gantt",
        "pie",
        "journey",
        "mindmap",
        "timeline",
        "quadrantChart",
        "xychart-beta",
        "gitGraph",
        "requirementDiagram",
        "C4Context",
        "sankey-beta",
        "block-beta",
    }
)

FLOWCHART_TYPES = frozenset({"flowchart", "flowchart-elk", "graph"})

_OPENERS = {"[": "]", "(": ")", "{": "}"}
_CLOSERS = {"]", ")", "}"}

# Characters that can sit right before a node id (besides line start)
_NODE_TOKEN_LEADS = frozenset(" \t&;>-=.")


def _diagram_keyword(line: str) -> str:
    return line.split()[0].rstrip(";")


def _is_id_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _bracket_issues(line: str, line_no: int) -> list[SyntaxIssue]:
    """Unbalanced brackets on one line, ignoring quoted text and |edge labels|."""
    stack: list[str] = []
    in_quote = False
    in_edge_label = False
    prev = ""
    # Character before the current run of id characters
    id_lead = ""

    for char in line:
        if _is_id_char(char) and not _is_id_char(prev):
            id_lead = prev
        if char == '"':
            in_quote = not in_quote
        elif in_quote:
            pass
        elif char == "|" and not stack:
            in_edge_label = not in_edge_label
        elif in_edge_label:
            pass
        elif char in _OPENERS:
            stack.append(_OPENERS[char])
        elif (
            char == ">"
            and not stack
            and _is_id_char(prev)
            and (not id_lead or id_lead in _NODE_TOKEN_LEADS)
        ):
            # Asymmetric shape: id>label]
            stack.append("]")
        elif char in _CLOSERS:
            if not stack or stack[-1] != char:
                return [SyntaxIssue(line=line_no, message=f"Unexpected '{char}'")]
            stack.pop()
        prev = char

    if in_quote:
        return [SyntaxIssue(line=line_no, message="Unterminated quoted label")]
    if stack:
        return [SyntaxIssue(line=line_no, message=f"Missing '{stack[-1]}'")]
    return []


def check_syntax(source: str) -> list[SyntaxIssue]:
    """Check diagram source for common syntax errors.

    Args:
        source: Mermaid diagram source (normally already sanitized)

    Returns:
        Issues found, in line order; empty when the source looks valid
    """
    if not isinstance(source, str):
        raise TypeError(f"source must be a string, got {type(source).__name__}")

    if not source.strip():
        return [SyntaxIssue(message="Diagram source is empty")]

    lines = source.split("\n")
    issues: list[SyntaxIssue] = []
    header: str | None = None
    header_line = 0
    in_frontmatter = False
    directive_start: int | None = None
    subgraph_stack: list[int] = []

    for index, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()

        if directive_start is not None:
            if "}%%" in line:
                directive_start = None
            continue
        if in_frontmatter:
            if line == "---":
                in_frontmatter = False
            continue
        if not line:
            continue
        if line.startswith("%%{"):
            if "}%%" not in line:
                directive_start = index
            continue
        if line.startswith("%%"):
            continue
        if header is None and line == "---":
            in_frontmatter = True
            continue

        if header is None:
            header = _diagram_keyword(line)
            header_line = index
            if header not in KNOWN_DIAGRAM_TYPES:
                issues.append(
                    SyntaxIssue(line=index, message=f"Unknown diagram type '{header}'")
                )
                return issues
            continue

        if header not in FLOWCHART_TYPES:
            continue

        keyword = line.split()[0].rstrip(";")
        if keyword == "subgraph":
            subgraph_stack.append(index)
        elif keyword == "end":
            if subgraph_stack:
                subgraph_stack.pop()
            else:
                issues.append(SyntaxIssue(line=index, message="'end' without matching 'subgraph'"))
            continue

        issues.extend(_bracket_issues(line, index))

    if directive_start is not None:
        issues.append(
            SyntaxIssue(line=directive_start, message="Unterminated %%{ ... }%% directive")
        )
    if in_frontmatter:
        issues.append(SyntaxIssue(message="Unterminated frontmatter block"))
    if header is None:
        issues.append(SyntaxIssue(message="Missing diagram type declaration"))
    for opened_at in subgraph_stack:
        issues.append(SyntaxIssue(line=opened_at, message="'subgraph' is never closed with 'end'"))

    if issues:
        logger.debug(f"Syntax check found {len(issues)} issue(s), header at line {header_line}")
    return issues


def format_issues(issues: list[SyntaxIssue]) -> str:
    """Join issues into one human-readable message."""
    return "; ".join(str(issue) for issue in issues)


__all__ = [
    "FLOWCHART_TYPES",
    "KNOWN_DIAGRAM_TYPES",
    "check_syntax",
    "format_issues",
]
