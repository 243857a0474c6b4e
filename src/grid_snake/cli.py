"""Command-line entry point for serving and previewing the game."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake game server and tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the HTTP/WebSocket server.")
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config file.",
    )
    serve_p.add_argument(
        "--best-score-path", type=str, default=None,
        help="Where to persist the best score (overrides the config).",
    )

    # --- render ---
    render_p = sub.add_parser(
        "render", help="Print the starting board as text.",
    )
    render_p.add_argument("--seed", type=int, default=None)
    render_p.add_argument("--config", type=str, default=None)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default game config as JSON.",
    )
    init_p.add_argument("output", help="Path for the config file.")

    return parser


def _load_config(path: str | None):
    from grid_snake.config import GameConfig

    return GameConfig.load(path) if path else GameConfig()


def _run_serve(args: argparse.Namespace) -> int:
    import dataclasses

    import uvicorn

    from grid_snake.server.app import create_app

    config = _load_config(args.config)
    if args.best_score_path:
        config = dataclasses.replace(config, best_score_path=args.best_score_path)
    logger.info("Serving on %s:%d.", args.host, args.port)
    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _run_render(args: argparse.Namespace) -> int:
    from grid_snake.engine import GameEngine
    from grid_snake.render import render_text

    engine = GameEngine(_load_config(args.config), seed=args.seed)
    print(render_text(engine.get_state()))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig

    GameConfig().save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "render": _run_render,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
