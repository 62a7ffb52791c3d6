"""Diagram extraction and repair for model-authored Mermaid.

Example:
    from core.diagrams import extract_diagrams

    specs = extract_diagrams(model_response)
    for spec in specs:
        print(spec.title, spec.source_text.splitlines()[0])
"""

from .extractor import (
    DIAGRAM_DELIMITER,
    FALLBACK_TITLE,
    extract_diagrams,
    format_diagram_response,
    parse_diagram_response,
)
from .sanitizer import (
    normalize_line_endings,
    rewrite_label_parentheses,
    sanitize,
    strip_code_fence,
    strip_label_parentheses,
    trim_trailing_prose,
)
from .schemas import (
    DiagramSpec,
    ExtractionResult,
    RenderResult,
    RenderState,
    SyntaxIssue,
    ValidationResult,
)
from .syntax import KNOWN_DIAGRAM_TYPES, check_syntax, format_issues

__all__ = [
    # Schemas
    "DiagramSpec",
    "ExtractionResult",
    "RenderResult",
    "RenderState",
    "SyntaxIssue",
    "ValidationResult",
    # Sanitizer
    "normalize_line_endings",
    "rewrite_label_parentheses",
    "sanitize",
    "strip_code_fence",
    "strip_label_parentheses",
    "trim_trailing_prose",
    # Extractor
    "DIAGRAM_DELIMITER",
    "FALLBACK_TITLE",
    "extract_diagrams",
    "format_diagram_response",
    "parse_diagram_response",
    # Syntax check
    "KNOWN_DIAGRAM_TYPES",
    "check_syntax",
    "format_issues",
]
