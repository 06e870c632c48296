# src/tilecollapse/render/palette.py
# RGBA per tile and asset lookup, shared by the PNG export and the pygame viewer.
import os
from typing import Optional, Tuple

from ..tiles import Tile

UNRESOLVED = 0
ASSET_DIR = os.path.join("assets", "tiles")
PATH_OUTLINE = (200, 30, 30, 255)

TILE_COLORS = {
    Tile.GRASS: (120, 200,  80, 255),
    Tile.DIRT:  (150, 110,  60, 255),
    Tile.WATER: ( 40,  90, 220, 255),
    Tile.TREE:  ( 20, 110,  40, 255),
    Tile.PATH:  (230, 200,  90, 255),
}

def fallback_color(tile_id: int) -> Tuple[int, int, int, int]:
    return TILE_COLORS.get(tile_id, (220, 220, 220, 255))

def asset_path(tile_id: int, asset_dir: str = ASSET_DIR) -> Optional[str]:
    """First of `<id>.png` / `tile_<id>.png` that exists, else None."""
    for name in (f"{tile_id}.png", f"tile_{tile_id}.png"):
        p = os.path.join(asset_dir, name)
        if os.path.exists(p):
            return p
    return None
