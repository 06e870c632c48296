#!/usr/bin/env python3
# Minimal interactive viewer for generated maps.
# - R: regenerate with the next seed
# - C: toggle carved-path outline
# - ESC: quit
# - 60 Hz fixed loop

import argparse, logging
from dataclasses import replace
import pygame

from tilecollapse.config import GeneratorConfig
from tilecollapse.logging_config import setup_logging
from tilecollapse.mapgen.generator import generate
from tilecollapse.render.tileset import Tileset

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=20)
    ap.add_argument("--height", type=int, default=20)
    ap.add_argument("--seed", type=int, default=1, help="First seed; R steps to the next one")
    ap.add_argument("--tile", type=int, default=24, help="Tile size in pixels")
    ap.add_argument("--no-border", action="store_true")
    args = ap.parse_args()
    setup_logging(logging.INFO)

    base = GeneratorConfig(width=args.width, height=args.height, bordered=not args.no_border)
    seed = args.seed
    show_path = True

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))
    tiles = Tileset(args.tile)

    def load_map():
        return generate(replace(base, seed=seed))

    gen = load_map()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    seed += 1
                    gen = load_map()
                elif ev.key == pygame.K_c:
                    show_path = not show_path

        screen.fill((0, 0, 0))
        tiles.draw_matrix(screen, gen.as_matrix(), args.tile)
        if show_path:
            tiles.outline_cells(screen, gen.path, args.tile)

        pygame.display.set_caption(
            f"tilecollapse viewer | seed {seed}  attempts {gen.attempts}  exit {gen.exit}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
