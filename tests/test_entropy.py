import pytest

from tilecollapse.errors import ContradictionError
from tilecollapse.grid import Grid
from tilecollapse.mapgen.entropy import select_lowest_entropy
from tilecollapse.rng import PMRandom

def row_with_options(*option_sets):
    g = Grid.initialize(len(option_sets), 1, [])
    for x, opts in enumerate(option_sets):
        g.cell(x, 0).options = tuple(opts)
    return g

def test_none_when_everything_collapsed():
    g = Grid.initialize(2, 2, [1])
    for x, y in g.coords():
        g.force(x, y, 1)
    assert select_lowest_entropy(g, PMRandom.from_seed(1)) is None

def test_picks_among_minimum_only():
    g = row_with_options([1, 2, 3], [1, 2], [2, 3], [1, 2, 3])
    rng = PMRandom.from_seed(3)
    seen = {select_lowest_entropy(g, rng) for _ in range(200)}
    assert seen == {(1, 0), (2, 0)}

def test_collapsed_cells_are_skipped():
    g = row_with_options([1, 2, 3], [1], [1, 2])
    g.force(1, 0, 1)
    rng = PMRandom.from_seed(8)
    for _ in range(50):
        assert select_lowest_entropy(g, rng) == (2, 0)

def test_single_option_cell_still_selected():
    # narrowed to one option by propagation but not yet collapsed
    g = row_with_options([1, 2], [2], [1, 2])
    assert select_lowest_entropy(g, PMRandom.from_seed(4)) == (1, 0)

def test_empty_option_set_is_a_contradiction():
    g = row_with_options([1, 2], [], [1])
    with pytest.raises(ContradictionError) as e:
        select_lowest_entropy(g, PMRandom.from_seed(1))
    assert e.value.coord == (1, 0)
