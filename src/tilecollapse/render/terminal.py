# src/tilecollapse/render/terminal.py
# Colored grid printing for the terminal via rich.
from __future__ import annotations

from typing import Iterable, Optional, Set, Tuple

from rich.console import Console
from rich.text import Text

from ..grid import Grid
from ..tiles import Tile

TILE_STYLES = {
    Tile.GRASS: "bold magenta",
    Tile.DIRT: "yellow",
    Tile.WATER: "bold blue",
    Tile.TREE: "bold green",
    Tile.PATH: "bold bright_yellow",
}

UNRESOLVED_GLYPH = "?"


def grid_text(
    grid: Grid,
    highlight: Iterable[Tuple[int, int]] = (),
    hide_uncollapsed: bool = False,
) -> Text:
    """
    One line per row, each cell as its tile id followed by a space.

    Uncollapsed cells print as "?" (or "0" with hide_uncollapsed, which is how
    the starting map looks before any propagation). Cells in `highlight`
    are shown reversed.
    """
    marked: Set[Tuple[int, int]] = set(highlight)
    out = Text()
    for y in range(grid.height):
        for x in range(grid.width):
            cell = grid.cell(x, y)
            if not cell.collapsed:
                out.append("0 " if hide_uncollapsed else f"{UNRESOLVED_GLYPH} ")
                continue
            tile = cell.options[0]
            style = TILE_STYLES.get(tile, "")
            if (x, y) in marked:
                style = f"{style} reverse".strip()
            out.append(str(int(tile)), style=style)
            out.append(" ")
        out.append("\n")
    return out


def print_grid(
    grid: Grid,
    title: Optional[str] = None,
    console: Optional[Console] = None,
    highlight: Iterable[Tuple[int, int]] = (),
    hide_uncollapsed: bool = False,
) -> None:
    console = console or Console()
    if title:
        console.print(title, style="bold")
    console.print(grid_text(grid, highlight=highlight, hide_uncollapsed=hide_uncollapsed), end="")
