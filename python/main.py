#!/usr/bin/env python3
"""M×N Sliding Puzzle with a constructive auto-solver.

Usage::

    python main.py                     # shuffle a 4×4 board and play it
    python main.py -r 5 -c 7 --auto    # shuffle 5×7 and solve it right away
    python main.py -r 6 -c 6 --auto --no-render -y -v
    python main.py -r 3 -c 3 --auto    # 3×3 solved by breadth-first search
"""

import logging
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import SolverConfig  # noqa: E402
from backend.models.board import PuzzleError  # noqa: E402
from frontend.cli.rich import app as rich_app  # noqa: E402

MIN_SIDE = 2
MAX_SIDE = 30
HELD_RECORDS = 100_000


def _configure_logging(verbose: int, console: Console) -> MemoryHandler:
    """Send logs to *console*, held back until flushed so board redraws keep them."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    held = MemoryHandler(HELD_RECORDS, flushLevel=logging.ERROR, target=handler)
    logging.basicConfig(level=level, handlers=[held])
    return held


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    rows: int = typer.Option(
        4, "-r", "--rows",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Number of rows (M).",
    ),
    cols: int = typer.Option(
        4, "-c", "--cols",
        min=MIN_SIDE, max=MAX_SIDE,
        help="Number of columns (N).",
    ),
    auto: bool = typer.Option(
        False, "--auto",
        help="Solve the shuffled board immediately instead of playing.",
    ),
    render: bool = typer.Option(
        True, "--render/--no-render",
        help="Animate every solver move.",
    ),
    pace_ms: int = typer.Option(
        0, "--pace-ms",
        min=0,
        help="Pause after each solved row or column pair, in milliseconds.",
    ),
    bfs: bool = typer.Option(
        True, "--bfs/--no-bfs",
        help="Solve boards of up to nine cells in the fewest moves by breadth-first search.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle.",
    ),
    yes: bool = typer.Option(
        False, "-y", "--yes",
        help="Answer yes to every prompt (parity swap, long animations).",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log solver phases (-v) or every relocation (-vv).",
    ),
) -> None:
    """M×N Sliding Puzzle."""
    held = _configure_logging(verbose, rich_app.console)

    config = SolverConfig(render=render, pace_ms=pace_ms)
    try:
        rich_app.run(
            rows, cols, config,
            seed=seed, auto=auto, assume_yes=yes, optimal=bfs,
        )
    except PuzzleError as exc:
        logging.getLogger(__name__).error("%s", exc)
        raise typer.Exit(code=1) from exc
    finally:
        held.flush()


if __name__ == "__main__":
    app()
