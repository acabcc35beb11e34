"""Window front end drawing the grid world with pygame."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from .maps import default_map
from .world import SCREEN_HEIGHT, SCREEN_WIDTH, Key, World

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESC,
}


def key_from_pygame(key: int) -> Optional[Key]:
    """Translate a pygame key constant into a Key, or None if unused."""
    return _KEYMAP.get(key)


def render(world: World, surface: "pygame.Surface") -> None:
    """Paint the map and the player onto ``surface``."""
    width, height = surface.get_size()
    for x, y, colour in (*world.pixels(), *world.player_pixels()):
        if 0 <= x < width and 0 <= y < height:
            surface.set_at((x, y), pygame.Color(colour << 8 | 0xFF))


def run(world: World) -> int:
    """Open the window and process input until it is closed or Esc is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Cub3d")
        render(world, screen)
        pygame.display.flip()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                key = key_from_pygame(event.key)
                if key is Key.ESC:
                    return 0
                if key is not None:
                    world.move(key)
                render(world, screen)
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the viewer on the built-in map."""
    parser = argparse.ArgumentParser(prog="cubgrid", description="Grid map viewer.")
    parser.parse_args(argv)
    return run(World.from_rows(default_map()))