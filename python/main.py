#!/usr/bin/env python3
"""Tile Connect.

Usage::

    python main.py                  # interactive menu
    python main.py -r 6 -c 10       # play a 6×10 board directly
    python main.py --autoplay       # watch the solver clear a board
    python main.py -v               # debug logging
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tileconnect.models.config import GameConfig  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _build_config(**options) -> GameConfig:
    try:
        return GameConfig(**options)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    rows: Optional[int] = typer.Option(
        None, "-r", "--rows",
        min=1, max=12,
        help="Interior rows. Omit (with --cols) for the interactive menu.",
    ),
    cols: Optional[int] = typer.Option(
        None, "-c", "--cols",
        min=1, max=20,
        help="Interior columns.",
    ),
    types: int = typer.Option(
        25, "-t", "--types",
        min=1,
        help="Number of distinct tile types.",
    ),
    time_limit: float = typer.Option(
        180.0, "--time-limit",
        min=1.0,
        help="Seconds on the clock.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for reproducible boards.",
    ),
    autoplay: bool = typer.Option(
        False, "--autoplay",
        help="Let the solver clear a board and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Tile Connect — match pairs joined by a path with at most two turns."""
    _setup_logging(verbose)

    direct = rows is not None or cols is not None
    config = _build_config(
        rows=rows if rows is not None else 8,
        cols=cols if cols is not None else 14,
        types=types,
        time_limit=time_limit,
        seed=seed,
    )

    from tileconnect_ui.cli.rich.app import run

    run(config, menu=not direct, autoplay=autoplay)


if __name__ == "__main__":
    app()
