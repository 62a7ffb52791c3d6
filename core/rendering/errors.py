"""Exception classes for diagram rendering."""


class RenderError(Exception):
    """Base rendering exception."""

    def __init__(self, message: str, renderer: str | None = None):
        self.message = message
        self.renderer = renderer
        super().__init__(message)


class DiagramSyntaxError(RenderError):
    """Renderer rejected the diagram grammar."""

    pass


class RendererUnavailableError(RenderError):
    """Renderer backend is not reachable or not installed."""

    pass


class RendererTimeoutError(RenderError):
    """Renderer did not answer in time."""

    pass
