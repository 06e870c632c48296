# src/tilecollapse/render/image.py
# Grid matrices to PNG using Pillow.
# Works with tile filenames like "4.png" or "tile_4.png" under assets/tiles/.

import os
from typing import Iterable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .palette import PATH_OUTLINE, UNRESOLVED, asset_path, fallback_color

def tile_image(tile_id: int, tile_size: int) -> Image.Image:
    p = asset_path(tile_id)
    if p:
        img = Image.open(p).convert("RGBA")
        if img.size != (tile_size, tile_size):
            img = img.resize((tile_size, tile_size), Image.NEAREST)
        return img
    # Fallback: colored tile with the ID text
    img = Image.new("RGBA", (tile_size, tile_size), color=fallback_color(tile_id))
    if tile_size >= 12:
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        text = "?" if tile_id == UNRESOLVED else str(tile_id)
        tw, th = draw.textlength(text, font=font), 8
        draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), text, fill=(0, 0, 0, 255), font=font)
    return img

def render_matrix(
    matrix: List[List[int]],
    tile_size: int = 16,
    margin: int = 0,
    highlight: Iterable[Tuple[int, int]] = (),
) -> Image.Image:
    """Paint a row-major tile matrix; cells in `highlight` get an outline."""
    h_cells, w_cells = len(matrix), len(matrix[0]) if matrix else 0
    w, h = w_cells * tile_size + 2 * margin, h_cells * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    cache = {}
    for y, row in enumerate(matrix):
        for x, tid in enumerate(row):
            if tid not in cache:
                cache[tid] = tile_image(tid, tile_size)
            img = cache[tid]
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            # Use a 4-item box so Pillow never complains about region size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    draw = ImageDraw.Draw(canvas)
    for x, y in highlight:
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), outline=PATH_OUTLINE)
    return canvas

def save_png(image: Image.Image, out_png: str) -> None:
    parent: Optional[str] = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image.save(out_png)
