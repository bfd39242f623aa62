"""Unit tests for the command-line entry point (brainstorm.cli)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from brainstorm.cli import build_parser, main, run
from brainstorm.config import Config
from brainstorm.diagram.renderer import DiagramRenderError


class TestParser:
    @pytest.mark.unit
    def test_defaults(self):
        args = build_parser().parse_args(["A plant shop"])
        assert args.idea == "A plant shop"
        assert args.output is None
        assert args.no_delay is False
        assert args.render is True
        assert args.deck is False
        assert args.preview is False

    @pytest.mark.unit
    def test_flags(self):
        args = build_parser().parse_args(
            ["x", "-o", "out", "--no-delay", "--no-render", "--deck", "--preview"]
        )
        assert args.output == "out"
        assert args.no_delay is True
        assert args.render is False
        assert args.deck is True
        assert args.preview is True


class TestRun:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_blank_idea_exit_code(self, config):
        args = build_parser().parse_args(["   ", "--no-render"])
        assert await run(args, config) == 1
        assert not config.output_dir.exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_writes_exports(self, config, commerce_idea):
        args = build_parser().parse_args([commerce_idea, "--no-render"])
        assert await run(args, config) == 0
        assert config.summary_path.exists()
        assert config.analysis_path.exists()
        assert config.mermaid_path.exists()
        assert (config.output_dir / "an-online-store-for-used-books-scaffold.txt").exists()
        assert not config.diagram_path.exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_bracketed_idea_is_not_markup(self, config):
        args = build_parser().parse_args(["My [/app] idea", "--no-render"])
        assert await run(args, config) == 0
        assert (config.output_dir / "my-app-idea-scaffold.txt").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_long_idea_writes_all_outputs(self, config):
        args = build_parser().parse_args(["an idea " * 40, "--no-render", "--deck"])
        assert await run(args, config) == 0
        names = [path.name for path in config.output_dir.iterdir()]
        assert any(name.endswith("-scaffold.txt") for name in names)
        assert any(name.endswith("-project-analysis.pptx") for name in names)
        assert max(len(name) for name in names) <= 80

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_render_failure_is_not_fatal(self, config, commerce_idea):
        failing = AsyncMock()
        failing.render = AsyncMock(side_effect=DiagramRenderError("offline"))
        args = build_parser().parse_args([commerce_idea])
        with patch("brainstorm.cli.create_renderer", return_value=failing):
            assert await run(args, config) == 0
        assert config.mermaid_path.exists()
        assert not config.diagram_path.exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_render_success_saves_image(self, config, commerce_idea, mock_renderer):
        args = build_parser().parse_args([commerce_idea])
        with patch("brainstorm.cli.create_renderer", return_value=mock_renderer):
            assert await run(args, config) == 0
        assert config.diagram_path.read_bytes() == b"<svg></svg>"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_deck_and_preview(self, config, commerce_idea):
        args = build_parser().parse_args([commerce_idea, "--no-render", "--deck", "--preview"])
        assert await run(args, config) == 0
        assert (config.output_dir / "an-online-store-for-used-books-project-analysis.pptx").exists()


class TestMain:
    @pytest.mark.unit
    def test_main_applies_overrides(self, tmp_path: Path):
        captured: dict[str, Config] = {}

        async def fake_run(args, config):
            captured["config"] = config
            return 0

        argv = ["brainstorm", "idea", "-o", str(tmp_path), "--no-delay"]
        with (
            patch("sys.argv", argv),
            patch("brainstorm.cli.run", new=fake_run),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 0
        assert captured["config"].output_dir == tmp_path
        assert captured["config"].analysis_delay == 0.0
