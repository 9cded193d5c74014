"""Rich terminal frontend — coloured board, keyboard cursor and panels.

Reads engine state only through :class:`GamePlay` and its snapshots;
every rule lives in the backend.  Includes a menu for board size, play
and an autoplay demo.
"""

from __future__ import annotations

import sys
import time
from dataclasses import replace

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tileconnect.engine.gameplay import GamePlay, SelectOutcome
from tileconnect.engine.gamesolver import Solver
from tileconnect.engine.gamestate import GameStatus, HighlightKind
from tileconnect.models.board import Board, Position
from tileconnect.models.config import GameConfig
from tileconnect_ui.cli.input_handler import get_key, get_key_timeout

console = Console()

# Board shapes offered by the menu: (rows, cols).
PRESETS: list[tuple[int, int]] = [(4, 6), (6, 10), (8, 14)]

_GLYPHS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_COLORS = [
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "orange1",
    "spring_green1",
]

_DIRECTIONS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _glyph(type_id: int) -> tuple[str, str]:
    i = type_id - 1
    return _GLYPHS[i % len(_GLYPHS)], _COLORS[i % len(_COLORS)]


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: Position | None = None) -> Table:
    """Return a Rich Table of the whole lattice, border ring included."""
    board: Board = game.board
    highlight = game.highlight
    path = set(highlight.path) if highlight else set()
    path_style = "bold red" if highlight and highlight.kind is HighlightKind.MATCH else "bold yellow"

    table = Table(
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=3, justify="center")

    for r in range(board.height):
        cells: list[Text] = []
        for c in range(board.width):
            tile = board.get(r, c)
            at_cursor = cursor == (r, c)
            if tile is not None:
                glyph, color = _glyph(tile.type_id)
                style = f"bold {color}"
                if tile.selected:
                    style = f"bold black on {color}"
                elif (r, c) in path:
                    style = f"{path_style} underline"
                if at_cursor:
                    cells.append(Text(f"[{glyph}]", style=style))
                else:
                    cells.append(Text(f" {glyph} ", style=style))
            elif (r, c) in path:
                cells.append(Text(" • ", style=path_style))
            elif at_cursor:
                cells.append(Text("[ ]", style="dim"))
            elif board.is_border(r, c):
                cells.append(Text("   "))
            else:
                cells.append(Text(" · ", style="dim"))
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    snap = game.snapshot
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(snap.score), style="bold yellow")
    stats.append("    Pairs: ", style="dim")
    stats.append(str(snap.pairs_remaining), style="bold yellow")
    stats.append("    Time: ", style="dim")
    time_style = "bold red" if snap.remaining_time <= 10 else "bold yellow"
    stats.append(_format_time(snap.remaining_time), style=time_style)
    stats.append("    Hints: ", style="dim")
    stats.append(str(snap.hint_budget), style="bold cyan")
    stats.append("    Shuffles: ", style="dim")
    stats.append(str(snap.shuffle_budget), style="bold cyan")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel: int) -> None:
    console.clear()

    sizes = Text()
    for i, (rows, cols) in enumerate(PRESETS):
        if i:
            sizes.append("  ")
        label = f" {rows}×{cols} "
        if i == sel:
            sizes.append(label, style="bold green on #313244")
        else:
            sizes.append(label, style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Autoplay    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T I L E   C O N N E C T[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, cursor: Position, status: str = "") -> None:
    console.clear()

    board = game.board
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  pick   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(game, cursor)),
        title=f"[bold cyan]Tile Connect  {board.rows}×{board.cols}[/bold cyan]",
        border_style="bright_blue",
        box=rich.box.HEAVY,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_game_over(game: GamePlay) -> None:
    console.clear()

    board = game.board
    won = game.status is GameStatus.WON

    banner = Text()
    if won:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("BOARD CLEARED!", style="bold green")
        banner.append("  ★\n", style="bold yellow")
    else:
        banner.append("\n  TIME'S UP", style="bold red")
        banner.append(f"  {board.pairs_remaining} pairs left\n", style="red")

    group = Group(
        Align.center(_render_board(game)),
        Align.center(banner),
        Align.center(_stats(game)),
    )

    color = "green" if won else "red"
    panel = Panel(
        group,
        title=f"[bold {color}]Tile Connect  {board.rows}×{board.cols}[/bold {color}]",
        border_style=f"bold {color}",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- actions ------------------------------------------------------------------


def _apply_select(game: GamePlay, cursor: Position) -> str:
    result = game.select_cell(*cursor)
    if result.outcome is SelectOutcome.MATCHED:
        msg = f"[green]+{result.points}[/green]"
        if result.reshuffled:
            msg += "  [yellow]No moves left, tiles reshuffled.[/yellow]"
        return msg
    if result.outcome is SelectOutcome.MISMATCHED:
        return "[red]No path between those tiles.[/red]"
    return ""


def _apply_hint(game: GamePlay) -> str:
    if game.snapshot.hint_budget <= 0:
        return "[yellow]No hints left.[/yellow]"
    if game.use_hint() is None:
        return "[yellow]No hint available.[/yellow]"
    return "[cyan]Hint shown.[/cyan]"


def _apply_shuffle(game: GamePlay) -> str:
    if not game.shuffle():
        return "[yellow]No shuffles left.[/yellow]"
    return "[cyan]Shuffled![/cyan]"


def _move_cursor(board: Board, cursor: Position, key: str) -> Position:
    dr, dc = _DIRECTIONS[key]
    r = min(max(cursor[0] + dr, 1), board.rows)
    c = min(max(cursor[1] + dc, 1), board.cols)
    return (r, c)


def _autoplay(game: GamePlay, delay: float = 0.15) -> None:
    """Clear the board move by move using the scanner."""
    step = 0
    while not game.is_over:
        move = Solver.find_move(game.board)
        if move is None:
            break
        game.select_cell(*move.first)
        game.select_cell(*move.second)
        step += 1

        progress = Text()
        progress.append(f"  Autoplay… match {step} ", style="bold cyan")
        progress.append(f"({game.board.pairs_remaining} pairs left)", style="dim")

        console.clear()
        panel = Panel(
            Align.center(_render_board(game)),
            title=f"[bold cyan]Autoplay  {game.board.rows}×{game.board.cols}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(delay)
        game.tick(delay)


# -- game loops ---------------------------------------------------------------


def _play_game(config: GameConfig) -> None:
    """Play until the board is cleared, time runs out or the player backs out."""
    while True:
        game = GamePlay(config)
        game.start()
        cursor: Position = (1, 1)
        status = ""
        last = time.monotonic()
        redraw = True

        while not game.is_over:
            if redraw:
                _draw_game(game, cursor, status)
                status = ""
                redraw = False

            key = get_key_timeout(0.25)
            now = time.monotonic()
            redraw = game.tick(now - last)
            last = now
            if key is None:
                continue

            redraw = True
            if key in _DIRECTIONS:
                cursor = _move_cursor(game.board, cursor, key)
            elif key == "select":
                status = _apply_select(game, cursor)
            elif key == "hint":
                status = _apply_hint(game)
            elif key == "shuffle":
                status = _apply_shuffle(game)
            elif key == "restart":
                game.restart()
                cursor = (1, 1)
            elif key == "quit":
                return

        # -- game over ----------------------------------------------------------
        _draw_game_over(game)
        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to go back.\n", style="dim")
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


def _autoplay_game(config: GameConfig) -> None:
    game = GamePlay(config)
    game.start()
    _autoplay(game)
    _draw_game_over(game)
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: GameConfig) -> None:
    shape = (config.rows, config.cols)
    sel = PRESETS.index(shape) if shape in PRESETS else len(PRESETS) - 1

    while True:
        _draw_menu(sel)
        key = get_key()
        rows, cols = PRESETS[sel]
        chosen = replace(config, rows=rows, cols=cols)

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key == "left":
            sel = max(0, sel - 1)
        elif key == "right":
            sel = min(len(PRESETS) - 1, sel + 1)
        elif key in ("1", "select"):
            _play_game(chosen)
        elif key in ("2", "autoplay"):
            _autoplay_game(chosen)


# -- public entry point -------------------------------------------------------


def run(config: GameConfig, menu: bool = True, autoplay: bool = False) -> None:
    """Launch the Rich CLI.

    With *menu* the player picks a preset size; otherwise *config* is
    played directly (or demonstrated, with *autoplay*).
    """
    if autoplay:
        _autoplay_game(config)
    elif menu:
        _menu_loop(config)
    else:
        _play_game(config)
