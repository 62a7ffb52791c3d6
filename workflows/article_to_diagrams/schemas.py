"""Result model for article-to-diagrams runs."""

from pydantic import BaseModel, Field

from core.diagrams import DiagramSpec, RenderResult


class ArticleDiagramsResult(BaseModel):
    """Diagrams extracted from one model response, plus their renders."""

    diagrams: list[DiagramSpec] = Field(description="Extracted diagrams in response order")
    results: list[RenderResult] = Field(
        default_factory=list,
        description="One render result per diagram; empty when rendering was skipped",
    )
    used_fallback: bool = Field(
        default=False, description="Model ignored the delimiter protocol"
    )
    raw_response: str = Field(description="Model response as received")

    @property
    def success_count(self) -> int:
        return sum(1 for result in self.results if result.ok)
