"""Exception classes for the article-to-diagrams workflow."""


class ArticleTooShortError(ValueError):
    """Article text is empty or too short to diagram."""

    pass


class EmptyResponseError(Exception):
    """Model returned no text."""

    pass


class NoDiagramsError(Exception):
    """Model response produced zero diagrams."""

    def __init__(self, message: str, raw_response: str = ""):
        self.message = message
        self.raw_response = raw_response
        super().__init__(message)
