import io

from rich.console import Console

from tilecollapse.grid import Grid
from tilecollapse.render.image import PATH_OUTLINE, render_matrix
from tilecollapse.render.palette import TILE_COLORS
from tilecollapse.render.terminal import grid_text, print_grid
from tilecollapse.tiles import Tile

def small_grid():
    g = Grid.initialize(3, 1, [Tile.GRASS, Tile.DIRT])
    g.force(0, 0, Tile.GRASS)
    g.force(2, 0, Tile.PATH)
    return g

def test_grid_text_plain():
    g = small_grid()
    assert grid_text(g).plain == "1 ? 5 \n"
    assert grid_text(g, hide_uncollapsed=True).plain == "1 0 5 \n"

def test_print_grid_to_console():
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=False, width=80)
    print_grid(small_grid(), title="Generated map", console=console)
    out = buf.getvalue()
    assert "Generated map" in out
    assert "1 ? 5" in out

def test_render_matrix_colors():
    img = render_matrix([[Tile.GRASS, Tile.WATER]], tile_size=16)
    assert img.size == (32, 16)
    assert img.getpixel((0, 0)) == TILE_COLORS[Tile.GRASS]
    assert img.getpixel((16, 0)) == TILE_COLORS[Tile.WATER]

def test_render_matrix_highlight():
    img = render_matrix([[Tile.PATH, Tile.PATH]], tile_size=16, highlight=[(1, 0)])
    assert img.getpixel((16, 0)) == PATH_OUTLINE
    assert img.getpixel((0, 0)) == TILE_COLORS[Tile.PATH]
