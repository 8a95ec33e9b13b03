"""Module entry point for `python -m gridpath`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from gridpath.app import run_search
from gridpath.config import load_config
from gridpath.render.grid_view import format_result, render_search
from gridpath.search.contracts import Coord
from gridpath.search.errors import GridPathError


def parse_coord(value: str) -> Coord:
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run an A* search on a grid.")
    parser.add_argument("--width", type=int, default=None, help="Grid width.")
    parser.add_argument("--height", type=int, default=None, help="Grid height.")
    parser.add_argument(
        "--start",
        type=parse_coord,
        default=None,
        help="Start cell as X,Y (defaults to 0,0).",
    )
    parser.add_argument(
        "--goal",
        type=parse_coord,
        default=None,
        help="Goal cell as X,Y (defaults to the bottom-right cell).",
    )
    parser.add_argument(
        "--obstacle",
        type=parse_coord,
        action="append",
        default=None,
        help="Mark X,Y as an obstacle. May be repeated.",
    )
    parser.add_argument(
        "--lattice-spacing",
        type=int,
        default=None,
        help="Spacing of the default obstacle lattice, 0 disables it.",
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="ASCII (#, ., S, G) or JSON grid map to load instead of a blank grid.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (defaults to $GRIDPATH_CONFIG).",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Only print the one-line result.",
    )
    parser.add_argument(
        "--highlight",
        type=parse_coord,
        default=None,
        help="Highlight the neighbours of cell X,Y in the rendered grid.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        config = load_config(
            args.config,
            overrides={
                "width": args.width,
                "height": args.height,
                "start": args.start,
                "goal": args.goal,
                "obstacles": args.obstacle,
                "lattice_spacing": args.lattice_spacing,
                "map_file": args.map,
                "log_level": args.log_level,
            },
        )
        logging.basicConfig(
            level=getattr(logging, config.log_level),
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
        run = run_search(config)
        view = None
        if not args.no_render:
            view = render_search(
                run.grid,
                run.result,
                start=run.start,
                goal=run.goal,
                highlight=args.highlight,
            )
    except (GridPathError, FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    if view is not None:
        console.print(view)
    console.print(format_result(run.result))


if __name__ == "__main__":
    main()
