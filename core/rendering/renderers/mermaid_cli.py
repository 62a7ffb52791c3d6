"""mermaid-cli (mmdc) renderer backend.

Runs `mmdc -i diagram.mmd -o diagram.svg` in a temporary directory. Needs
Node.js and @mermaid-js/mermaid-cli on the host.
"""

import asyncio
import logging
import tempfile
from pathlib import Path

from core.theming import ResolvedTheme

from ..errors import (
    DiagramSyntaxError,
    RenderError,
    RendererTimeoutError,
    RendererUnavailableError,
)
from .base import DiagramRenderer

logger = logging.getLogger(__name__)

# stderr markers mmdc prints when the grammar rejects the source
_SYNTAX_MARKERS = ("Parse error", "Syntax error", "Lexical error", "No diagram type detected")


async def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        pass  # Already exited
    await process.wait()
    logger.debug(f"Killed mermaid-cli process {process.pid}")


class MermaidCliRenderer(DiagramRenderer):
    """Render Mermaid with a local mmdc executable."""

    def __init__(self, mmdc_path: str = "mmdc", timeout: float = 30.0):
        self.mmdc_path = mmdc_path
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "mermaid-cli"

    async def render(self, source: str, theme: ResolvedTheme) -> str:
        """Render themed source to SVG with mmdc."""
        payload = self.prepare_source(source, theme)

        with tempfile.TemporaryDirectory(prefix="diagram-") as tmp:
            input_path = Path(tmp) / "diagram.mmd"
            output_path = Path(tmp) / "diagram.svg"
            input_path.write_text(payload, encoding="utf-8")

            try:
                process = await asyncio.create_subprocess_exec(
                    self.mmdc_path,
                    "-i",
                    str(input_path),
                    "-o",
                    str(output_path),
                    "-b",
                    theme.background,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError as e:
                raise RendererUnavailableError(
                    f"mermaid-cli not found at '{self.mmdc_path}'. "
                    "Run: npm install -g @mermaid-js/mermaid-cli",
                    renderer=self.name,
                ) from e

            try:
                _, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
            except asyncio.TimeoutError as e:
                raise RendererTimeoutError(
                    f"mermaid-cli timed out after {self.timeout}s", renderer=self.name
                ) from e
            finally:
                # Timeout or cancellation: the child must not outlive the temp dir
                if process.returncode is None:
                    await _kill(process)

            message = stderr.decode("utf-8", errors="replace").strip()
            if process.returncode != 0:
                if any(marker in message for marker in _SYNTAX_MARKERS):
                    raise DiagramSyntaxError(message, renderer=self.name)
                raise RenderError(
                    f"mermaid-cli exited with code {process.returncode}: {message}",
                    renderer=self.name,
                )
            if not output_path.exists():
                raise RenderError("mermaid-cli produced no output file", renderer=self.name)

            return output_path.read_text(encoding="utf-8")
