from tilecollapse.grid import Grid
from tilecollapse.mapgen.connectivity import count_passable, is_connected, reachable_from
from tilecollapse.tiles import DEFAULT_CATALOG

# G grass, D dirt, W water (obstacle), T tree, P path
LETTERS = {"G": 1, "D": 2, "W": 3, "T": 4, "P": 5}

def grid_from_rows(*rows):
    g = Grid.initialize(len(rows[0]), len(rows), [])
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            g.force(x, y, LETTERS[ch])
    return g

def test_two_disjoint_regions():
    g = grid_from_rows(
        "GWD",
        "GWD",
        "TWP",
    )
    assert not is_connected(g, (0, 0), DEFAULT_CATALOG)
    assert not is_connected(g, (2, 2), DEFAULT_CATALOG)
    assert reachable_from(g, (0, 0), DEFAULT_CATALOG) == {(0, 0), (0, 1), (0, 2)}

def test_single_region():
    g = grid_from_rows(
        "GGW",
        "WGW",
        "PDD",
    )
    assert count_passable(g, DEFAULT_CATALOG) == 6
    assert is_connected(g, (0, 2), DEFAULT_CATALOG)

def test_only_start_passable():
    g = grid_from_rows(
        "WWW",
        "WPW",
        "WWW",
    )
    assert is_connected(g, (1, 1), DEFAULT_CATALOG)

def test_blocked_start():
    g = grid_from_rows("WG")
    assert reachable_from(g, (0, 0), DEFAULT_CATALOG) == set()
    assert not is_connected(g, (0, 0), DEFAULT_CATALOG)

def test_diagonal_does_not_connect():
    g = grid_from_rows(
        "GW",
        "WG",
    )
    assert not is_connected(g, (0, 0), DEFAULT_CATALOG)
