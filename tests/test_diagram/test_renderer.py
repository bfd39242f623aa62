"""Unit tests for flowchart renderers (brainstorm.diagram.renderer).

Tests cover:
- RenderedDiagram media types
- KrokiRenderer.render (success, connect error, timeout, HTTP error)
- MermaidCliRenderer (missing binary, non-zero exit, success)
- create_renderer factory
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from brainstorm.diagram import to_diagram
from brainstorm.diagram.renderer import (
    DiagramRenderError,
    GraphRenderer,
    KrokiRenderer,
    MermaidCliRenderer,
    RenderedDiagram,
    create_renderer,
)


@pytest.fixture
def diagram(commerce_analysis, commerce_idea):
    return to_diagram(commerce_analysis, commerce_idea)


def _mock_client(**post_kwargs) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.post = AsyncMock(**post_kwargs)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


# ---------------------------------------------------------------------------
# RenderedDiagram
# ---------------------------------------------------------------------------


class TestRenderedDiagram:
    @pytest.mark.unit
    def test_media_types(self):
        assert RenderedDiagram(content=b"", format="svg").media_type == "image/svg+xml"
        assert RenderedDiagram(content=b"", format="png").media_type == "image/png"
        assert RenderedDiagram(content=b"", format="pdf").media_type == "application/octet-stream"


# ---------------------------------------------------------------------------
# KrokiRenderer
# ---------------------------------------------------------------------------


class TestKrokiRenderer:
    @pytest.mark.unit
    def test_defaults(self):
        renderer = KrokiRenderer()
        assert renderer.base_url == "https://kroki.io"
        assert renderer.output_format == "svg"
        assert renderer.timeout == 30
        assert isinstance(renderer, GraphRenderer)

    @pytest.mark.unit
    def test_trailing_slash_stripped(self):
        assert KrokiRenderer(base_url="http://kroki:8000/").base_url == "http://kroki:8000"

    @pytest.mark.unit
    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported"):
            KrokiRenderer(output_format="gif")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_render(self, diagram):
        mock_response = MagicMock()
        mock_response.content = b"<svg>ok</svg>"
        mock_response.raise_for_status = MagicMock()
        mock_client = _mock_client(return_value=mock_response)

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = await KrokiRenderer().render(diagram)

        assert result.content == b"<svg>ok</svg>"
        assert result.format == "svg"
        call_args = mock_client.post.call_args
        assert call_args.args[0] == "/mermaid/svg"
        assert call_args.kwargs["content"] == diagram.to_mermaid().encode("utf-8")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_connect_error(self, diagram):
        mock_client = _mock_client(side_effect=httpx.ConnectError("Connection refused"))
        with patch("httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(DiagramRenderError, match="Cannot connect"):
                await KrokiRenderer().render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self, diagram):
        mock_client = _mock_client(side_effect=httpx.TimeoutException("timed out"))
        with patch("httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(DiagramRenderError, match="timed out"):
                await KrokiRenderer(timeout=5).render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_http_error(self, diagram):
        request = httpx.Request("POST", "https://kroki.io/mermaid/svg")
        response = httpx.Response(400, text="Syntax error in graph", request=request)
        mock_response = MagicMock()
        mock_response.raise_for_status = MagicMock(
            side_effect=httpx.HTTPStatusError("bad", request=request, response=response)
        )
        mock_client = _mock_client(return_value=mock_response)

        with patch("httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(DiagramRenderError, match="HTTP 400"):
                await KrokiRenderer().render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_read_error(self, diagram):
        mock_client = _mock_client(side_effect=httpx.ReadError("connection reset"))
        with patch("httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(DiagramRenderError, match="request failed"):
                await KrokiRenderer().render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unsupported_protocol(self, diagram):
        with pytest.raises(DiagramRenderError) as exc_info:
            await KrokiRenderer(base_url="ftp://kroki.example").render(diagram)
        assert isinstance(exc_info.value.__cause__, httpx.UnsupportedProtocol)


# ---------------------------------------------------------------------------
# MermaidCliRenderer
# ---------------------------------------------------------------------------


class TestMermaidCliRenderer:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_binary(self, diagram):
        renderer = MermaidCliRenderer(executable="definitely-not-mmdc")
        assert renderer.is_available() is False
        with pytest.raises(DiagramRenderError, match="not found"):
            await renderer.render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_zero_exit(self, diagram):
        renderer = MermaidCliRenderer()
        with (
            patch.object(MermaidCliRenderer, "is_available", return_value=True),
            patch(
                "brainstorm.diagram.renderer.run_command",
                new=AsyncMock(return_value=(1, "", "Parse error")),
            ),
        ):
            with pytest.raises(DiagramRenderError, match="Parse error"):
                await renderer.render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_os_error_from_subprocess(self, diagram):
        renderer = MermaidCliRenderer()
        with (
            patch.object(MermaidCliRenderer, "is_available", return_value=True),
            patch(
                "brainstorm.diagram.renderer.run_command",
                new=AsyncMock(side_effect=PermissionError("Permission denied")),
            ),
        ):
            with pytest.raises(DiagramRenderError, match="Permission denied"):
                await renderer.render(diagram)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success_reads_output_file(self, diagram):
        async def fake_run(cmd, **kwargs):
            out_file = Path(cmd[cmd.index("-o") + 1])
            out_file.write_bytes(b"PNGDATA")
            return (0, "", "")

        renderer = MermaidCliRenderer(output_format="png")
        with (
            patch.object(MermaidCliRenderer, "is_available", return_value=True),
            patch("brainstorm.diagram.renderer.run_command", new=fake_run),
        ):
            result = await renderer.render(diagram)

        assert result.content == b"PNGDATA"
        assert result.format == "png"


# ---------------------------------------------------------------------------
# create_renderer
# ---------------------------------------------------------------------------


class TestCreateRenderer:
    @pytest.mark.unit
    def test_kroki(self):
        renderer = create_renderer(
            "kroki", kroki_url="http://local:8000", output_format="png", timeout=10
        )
        assert isinstance(renderer, KrokiRenderer)
        assert renderer.base_url == "http://local:8000"
        assert renderer.output_format == "png"

    @pytest.mark.unit
    def test_mmdc(self):
        renderer = create_renderer(
            "mmdc", kroki_url="unused", output_format="svg", timeout=10
        )
        assert isinstance(renderer, MermaidCliRenderer)

    @pytest.mark.unit
    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown renderer"):
            create_renderer("graphviz", kroki_url="", output_format="svg", timeout=1)
