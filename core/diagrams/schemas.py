"""Value objects passed between the extraction and rendering stages."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiagramSpec(BaseModel):
    """One diagram extracted from a model response."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Human-readable label; duplicates allowed")
    source_text: str = Field(description="Diagram definition in Mermaid syntax")


class ExtractionResult(BaseModel):
    """Diagrams found in one response plus how they were found."""

    model_config = ConfigDict(frozen=True)

    diagrams: list[DiagramSpec] = Field(default_factory=list)
    used_fallback: bool = Field(
        default=False,
        description="True when no delimiters were present and the whole response was used",
    )
    delimiter_count: int = Field(default=0, description="Delimiter lines seen in the response")

    @property
    def followed_protocol(self) -> bool:
        return self.delimiter_count > 0


class RenderState(str, Enum):
    """Per-diagram render lifecycle."""

    PENDING = "pending"
    SANITIZED = "sanitized"
    THEME_RESOLVED = "theme_resolved"
    RENDERED = "rendered"
    FAILED = "failed"


class RenderResult(BaseModel):
    """Outcome of rendering one DiagramSpec."""

    model_config = ConfigDict(frozen=True)

    title: str
    ok: bool
    artifact: str | None = Field(default=None, description="SVG markup, present iff ok")
    error_message: str | None = Field(default=None, description="Present iff not ok")
    sanitized_source: str = Field(description="Always populated, even on failure")
    state: RenderState
    failed_stage: RenderState | None = Field(
        default=None, description="Last state reached before failing"
    )
    png_bytes: bytes | None = None

    @model_validator(mode="after")
    def _artifact_xor_error(self) -> "RenderResult":
        if self.ok:
            if self.artifact is None or self.error_message is not None:
                raise ValueError("successful result needs an artifact and no error")
            if self.state != RenderState.RENDERED:
                raise ValueError("successful result must be in the rendered state")
        else:
            if self.error_message is None or self.artifact is not None:
                raise ValueError("failed result needs an error and no artifact")
            if self.state != RenderState.FAILED:
                raise ValueError("failed result must be in the failed state")
        return self


class SyntaxIssue(BaseModel):
    """A problem found by the local syntax check."""

    model_config = ConfigDict(frozen=True)

    line: int | None = Field(default=None, description="1-based line number")
    message: str

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of validate-only mode."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error_message: str | None = None
    sanitized_source: str
    issues: list[SyntaxIssue] = Field(default_factory=list)


__all__ = [
    "DiagramSpec",
    "ExtractionResult",
    "RenderResult",
    "RenderState",
    "SyntaxIssue",
    "ValidationResult",
]
