"""Rich terminal frontend — board tables, colours, and panels.

Shuffles an M×N board, reports whether it is solvable (offering the
one-swap repair when it is not), then lets the player slide the blank
or hand the board to the solver, which is animated move by move.
"""

from __future__ import annotations

import random
import time
from dataclasses import replace

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solution, Solver, SolverConfig
from backend.models.board import BLANK, Board, Direction
from frontend.cli.input_handler import get_key

console = Console()

_ARROW = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

# Delay between animated solver moves.
_FRAME_DELAY = 0.03

# Boards this large ask before animating every move.
ANIMATION_LIMIT = 600


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}"


def _format_moves(moves: list[Direction], limit: int = 120) -> str:
    text = " ".join(_ARROW[m] for m in moves[:limit])
    if len(moves) > limit:
        text += f" … (+{len(moves) - limit})"
    return text


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.rows * board.cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(board: Board, title: str, footer: Text | None = None) -> None:
    console.clear()
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]{title}  {board.rows}×{board.cols}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if footer is not None:
        console.print(Align.center(footer))


def _summary(solution: Solution) -> Panel:
    table = Table(box=rich.box.SIMPLE_HEAD, show_edge=False)
    table.add_column("Phase", style="cyan")
    table.add_column("Moves", justify="right", style="bold yellow")
    table.add_column("Solution")
    for segment in solution.segments:
        if segment.moves:
            table.add_row(
                segment.label, str(len(segment.moves)), _format_moves(segment.moves)
            )

    totals = Text()
    totals.append("Steps: ", style="dim")
    totals.append(str(solution.steps), style="bold yellow")
    totals.append("    Time: ", style="dim")
    totals.append(_format_time(solution.elapsed), style="bold yellow")

    return Panel(
        Group(table, Align.center(totals)),
        title="[bold green]Automatic solving successful[/bold green]",
        border_style="green",
    )


# -- solver helpers -----------------------------------------------------------


def _confirm(question: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    return console.input(f"  {question} [y/n] ").strip().lower().startswith("y")


def auto_solve(
    game: GamePlay,
    config: SolverConfig,
    optimal: bool = True,
    assume_yes: bool = False,
) -> Solution | None:
    """Hand the board to the solver; returns ``None`` if it is unsolvable.

    Boards small enough for breadth-first search are solved in the fewest
    moves unless *optimal* is false.  Animating a board of
    ``ANIMATION_LIMIT`` cells or more needs confirmation.
    """
    board = game.state.board
    if not Solver.is_solvable(board):
        return None

    if (
        config.render
        and board.rows * board.cols >= ANIMATION_LIMIT
        and not _confirm(
            "The solution is too long to animate comfortably. Animate anyway?",
            assume_yes,
        )
    ):
        config = replace(config, render=False)

    def renderer(current: Board) -> None:
        _draw(current, "Automatic solving")
        time.sleep(_FRAME_DELAY)

    if optimal and Solver.can_solve_optimal(board):
        console.print(Align.center(Text(
            f"Using breadth-first search to solve the {board.rows}×{board.cols} puzzle",
            style="cyan",
        )))
        solution = Solver.solve_optimal(board, config, renderer)
    else:
        solution = Solver.solve(board, config, renderer)
    game.state.history.extend(solution.moves)
    return solution


def _apply_hint(game: GamePlay) -> str:
    board = game.state.board
    if not Solver.is_solvable(board):
        return "[red]No hint: the board is unsolvable.[/red]"
    hint = Solver.hint(board)
    if hint is None:
        return "[green]Already solved![/green]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved the blank [bold]{hint.value}[/bold]"


# -- setup --------------------------------------------------------------------


def prepare(
    rows: int, cols: int, rng: random.Random, assume_yes: bool = False
) -> Board:
    """Shuffle a board and offer the parity repair if it is unsolvable."""
    board = GameGenerator.shuffled(rows, cols, rng)
    _draw(board, "Puzzle after shuffling")
    if Solver.is_solvable(board):
        console.print(Align.center(Text("Solvable!", style="bold green")))
        return board

    console.print(Align.center(Text("Unsolvable!", style="bold red")))
    if _confirm("Swap to solvable?", assume_yes):
        Solver.repair(board)
        _draw(board, "Puzzle after swapping")
        console.print(Align.center(Text("Solvable!", style="bold green")))
    return board


# -- play loop ----------------------------------------------------------------


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move blank   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  new board   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _play(
    game: GamePlay, config: SolverConfig, rng: random.Random, optimal: bool = True
) -> None:
    status = ""
    while True:
        footer = Text()
        footer.append("Moves: ", style="dim")
        footer.append(str(game.state.moves), style="bold yellow")
        footer.append("    Time: ", style="dim")
        footer.append(_format_time(game.state.elapsed_time), style="bold yellow")
        if status:
            footer.append("\n")
            footer.append_text(Text.from_markup(status))
        footer.append("\n")
        footer.append_text(_controls())
        _draw(game.state.board, "Sliding Puzzle", footer)

        if game.is_won:
            game.state.pause()
            console.print(Align.center(Text("★ Solved! ★", style="bold green")))
            return

        status = ""
        key = get_key()
        if isinstance(key, Direction):
            if not game.move(key):
                status = "[yellow]The blank cannot move that way.[/yellow]"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            solution = auto_solve(game, config, optimal)
            if solution is None:
                status = "[red]Board is unsolvable.[/red]"
            else:
                _draw(game.state.board, "Sliding Puzzle")
                console.print(_summary(solution))
                return
        elif key == "restart":
            game = GamePlay.from_board(prepare(game.rows, game.cols, rng))
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(
    rows: int,
    cols: int,
    config: SolverConfig,
    seed: int | None = None,
    auto: bool = False,
    assume_yes: bool = False,
    optimal: bool = True,
) -> Solution | None:
    """Shuffle a rows × cols board, then play it or solve it straight away."""
    rng = random.Random(seed)
    game = GamePlay.from_board(prepare(rows, cols, rng, assume_yes))

    if not auto:
        _play(game, config, rng, optimal)
        return None

    solution = auto_solve(game, config, optimal, assume_yes)
    if solution is None:
        console.print(Align.center(Text("Board is unsolvable.", style="bold red")))
        return None
    _draw(game.state.board, "Sliding Puzzle")
    console.print(_summary(solution))
    return solution
