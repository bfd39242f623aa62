"""Flowchart rendering collaborators.

The core never draws anything itself: it hands the mermaid source of a
``DiagramDescription`` to a ``GraphRenderer`` and gets an image back.  Two
renderers are provided:

* ``KrokiRenderer`` -- POSTs the source to a Kroki-compatible HTTP service.
* ``MermaidCliRenderer`` -- shells out to the local ``mmdc`` binary.

Both raise ``DiagramRenderError`` on failure and never retry.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, Field

from brainstorm.utils import run_command

from .models import DiagramDescription


_MEDIA_TYPES: dict[str, str] = {
    "svg": "image/svg+xml",
    "png": "image/png",
}


class DiagramRenderError(RuntimeError):
    """Raised when a renderer rejects or fails to draw a flowchart."""


class RenderedDiagram(BaseModel):
    """A drawn flowchart returned by a ``GraphRenderer``."""

    content: bytes = Field(..., description="Raw image bytes")
    format: str = Field(default="svg", description="'svg' or 'png'")

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES.get(self.format, "application/octet-stream")


@runtime_checkable
class GraphRenderer(Protocol):
    """Anything that can turn a flowchart description into an image."""

    async def render(self, description: DiagramDescription) -> RenderedDiagram:
        ...


# ---------------------------------------------------------------------------
# Kroki
# ---------------------------------------------------------------------------


class KrokiRenderer:
    """Renders flowcharts through the Kroki HTTP API.

    The client uses ``httpx.AsyncClient`` and posts the raw mermaid source to
    ``<base_url>/mermaid/<format>``.
    """

    def __init__(
        self,
        base_url: str = "https://kroki.io",
        output_format: str = "svg",
        timeout: int = 30,
    ) -> None:
        if output_format not in _MEDIA_TYPES:
            raise ValueError(f"Unsupported diagram format: {output_format}")
        self.base_url = base_url.rstrip("/")
        self.output_format = output_format
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )

    async def render(self, description: DiagramDescription) -> RenderedDiagram:
        source = description.to_mermaid()
        try:
            async with self._client() as client:
                response = await client.post(
                    f"/mermaid/{self.output_format}",
                    content=source.encode("utf-8"),
                    headers={"Content-Type": "text/plain; charset=utf-8"},
                )
                response.raise_for_status()
                return RenderedDiagram(content=response.content, format=self.output_format)
        except httpx.ConnectError as exc:
            raise DiagramRenderError(
                f"Cannot connect to Kroki at {self.base_url}."
            ) from exc
        except httpx.TimeoutException as exc:
            raise DiagramRenderError(
                f"Kroki render timed out after {self.timeout}s."
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise DiagramRenderError(
                f"Kroki returned HTTP {exc.response.status_code}: {exc.response.text[:500]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DiagramRenderError(f"Kroki request failed: {exc}") from exc


# ---------------------------------------------------------------------------
# mermaid-cli
# ---------------------------------------------------------------------------


class MermaidCliRenderer:
    """Renders flowcharts with the ``mmdc`` command from mermaid-cli."""

    def __init__(
        self,
        output_format: str = "svg",
        timeout: int = 60,
        executable: str = "mmdc",
    ) -> None:
        if output_format not in _MEDIA_TYPES:
            raise ValueError(f"Unsupported diagram format: {output_format}")
        self.output_format = output_format
        self.timeout = timeout
        self.executable = executable

    def is_available(self) -> bool:
        """Return ``True`` if the ``mmdc`` binary is on PATH."""
        return shutil.which(self.executable) is not None

    async def render(self, description: DiagramDescription) -> RenderedDiagram:
        if not self.is_available():
            raise DiagramRenderError(
                f"'{self.executable}' not found. Install with: npm install -g @mermaid-js/mermaid-cli"
            )

        with tempfile.TemporaryDirectory() as tmp:
            in_file = Path(tmp) / "flowchart.mmd"
            out_file = Path(tmp) / f"flowchart.{self.output_format}"
            in_file.write_text(description.to_mermaid(), encoding="utf-8")

            try:
                returncode, _, stderr = await run_command(
                    [self.executable, "-i", str(in_file), "-o", str(out_file), "-b", "transparent"],
                    timeout=self.timeout,
                )
            except OSError as exc:
                raise DiagramRenderError(f"Cannot run '{self.executable}': {exc}") from exc
            if returncode != 0 or not out_file.exists():
                raise DiagramRenderError(
                    f"mmdc exited with code {returncode}: {stderr[:500]}"
                )
            return RenderedDiagram(content=out_file.read_bytes(), format=self.output_format)


def create_renderer(backend: str, *, kroki_url: str, output_format: str, timeout: int) -> GraphRenderer:
    """Build the renderer named by *backend* (``"kroki"`` or ``"mmdc"``)."""
    if backend == "kroki":
        return KrokiRenderer(base_url=kroki_url, output_format=output_format, timeout=timeout)
    if backend == "mmdc":
        return MermaidCliRenderer(output_format=output_format, timeout=timeout)
    raise ValueError(f"Unknown renderer backend: {backend}")
