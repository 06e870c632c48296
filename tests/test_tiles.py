import pytest

from tilecollapse.errors import ConfigurationError
from tilecollapse.tiles import (
    DEFAULT_CATALOG, DEFAULT_WEIGHTS, Direction, Tile, TileCatalog,
)

def all_sides(*tiles):
    return [list(tiles)] * 4

def test_default_compatibility_lookup():
    assert DEFAULT_CATALOG.compatible(Tile.GRASS, Direction.UP) == {Tile.GRASS, Tile.DIRT, Tile.TREE}
    assert DEFAULT_CATALOG.compatible(Tile.PATH, Direction.LEFT) == {Tile.DIRT, Tile.PATH}
    assert DEFAULT_CATALOG.compatible(Tile.WATER, Direction.DOWN) == {Tile.WATER}

def test_unknown_tile_is_configuration_error():
    with pytest.raises(ConfigurationError):
        DEFAULT_CATALOG.compatible(9, Direction.UP)
    with pytest.raises(ConfigurationError):
        DEFAULT_CATALOG.compatible(0, Direction.UP)

def test_rules_referencing_undefined_tile_rejected():
    with pytest.raises(ConfigurationError):
        TileCatalog({1: all_sides(1, 2)}, obstacle=1, path=1)

def test_obstacle_and_path_must_exist():
    with pytest.raises(ConfigurationError):
        TileCatalog({1: all_sides(1)}, obstacle=2, path=1)

def test_default_rules_are_symmetric():
    assert DEFAULT_CATALOG.asymmetries() == []

def test_one_way_rule_is_reported_not_fixed():
    cat = TileCatalog({1: [[1, 2], [1], [1], [1]], 2: all_sides(2)}, obstacle=1, path=2)
    assert cat.asymmetries() == [(1, Direction.UP, 2)]
    assert 1 not in cat.compatible(2, Direction.DOWN)

def test_weight_validation():
    DEFAULT_CATALOG.validate_weights(DEFAULT_WEIGHTS)
    missing = dict(DEFAULT_WEIGHTS)
    del missing[Tile.TREE]
    with pytest.raises(ConfigurationError):
        DEFAULT_CATALOG.validate_weights(missing)
    with pytest.raises(ConfigurationError):
        DEFAULT_CATALOG.validate_weights({**DEFAULT_WEIGHTS, Tile.DIRT: 0.0})

def test_passability_and_directions():
    assert not DEFAULT_CATALOG.is_passable(Tile.WATER)
    assert DEFAULT_CATALOG.is_passable(Tile.TREE)
    assert DEFAULT_CATALOG.is_passable(Tile.PATH)
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.UP.delta == (0, -1)
