# src/tilecollapse/render/tileset.py
# pygame surfaces for map tiles, used by the interactive viewer.
from __future__ import annotations
import pygame
from typing import Dict, Iterable, Sequence, Tuple

from ..grid import XY
from .palette import ASSET_DIR, PATH_OUTLINE, UNRESOLVED, asset_path, fallback_color


class Tileset:
    """
    Surfaces keyed by tile id. Image files under `asset_dir` win; any other
    tile is a flat palette swatch labelled with its id (`?` when unresolved).
    Caches live on the instance and die with it.
    """
    def __init__(self, tile_size: int, font=None, asset_dir: str = ASSET_DIR):
        self.tile_size = tile_size
        self.asset_dir = asset_dir
        self.font = font or pygame.font.SysFont(None, max(10, tile_size // 2))
        self._base: Dict[int, pygame.Surface] = {}
        self._scaled: Dict[Tuple[int, int], pygame.Surface] = {}

    def _swatch(self, tile_id: int) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fallback_color(tile_id))
        label = "?" if tile_id == UNRESOLVED else str(tile_id)
        txt = self.font.render(label, True, (0, 0, 0))
        img.blit(txt, txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2)))
        return img

    def get(self, tile_id: int) -> pygame.Surface:
        img = self._base.get(tile_id)
        if img is None:
            p = asset_path(tile_id, self.asset_dir)
            img = pygame.image.load(p).convert_alpha() if p else self._swatch(tile_id)
            self._base[tile_id] = img
        return img

    def view(self, tile_id: int, size: int) -> pygame.Surface:
        base = self.get(tile_id)
        if base.get_size() == (size, size):
            return base
        key = (tile_id, size)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(base, (size, size))
        return self._scaled[key]

    def draw_matrix(self, surface: pygame.Surface, matrix: Sequence[Sequence[int]], size: int) -> None:
        for y, row in enumerate(matrix):
            for x, tid in enumerate(row):
                surface.blit(self.view(tid, size), (x * size, y * size))

    def outline_cells(self, surface: pygame.Surface, cells: Iterable[XY], size: int,
                      color=PATH_OUTLINE) -> None:
        for x, y in cells:
            pygame.draw.rect(surface, color, pygame.Rect(x * size, y * size, size, size), 1)
