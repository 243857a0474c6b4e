"""Tests for the grid-snake CLI."""

from grid_snake.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_serve_defaults(self):
        args = _build_parser().parse_args(["serve"])
        assert args.command == "serve"
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.config is None
        assert args.best_score_path is None

    def test_serve_flags(self):
        args = _build_parser().parse_args([
            "serve", "--port", "9000", "--best-score-path", "best.json",
        ])
        assert args.port == 9000
        assert args.best_score_path == "best.json"


class TestCLIRender:
    def test_render_prints_board(self, capsys):
        assert main(["render", "--seed", "3"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 21
        assert "@" in out[10]

    def test_render_with_config(self, tmp_path, capsys):
        from grid_snake.config import GameConfig

        path = tmp_path / "config.json"
        GameConfig(grid_size=10).save(path)
        assert main(["render", "--config", str(path)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 11


class TestCLIInitConfig:
    def test_writes_default_config(self, tmp_path):
        from grid_snake.config import GameConfig

        path = tmp_path / "conf" / "game.json"
        assert main(["init-config", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig()
