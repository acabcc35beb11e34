from unittest.mock import patch

import pygame

from cubgrid.app import key_from_pygame, main, render, run
from cubgrid.world import CELL, SCREEN_HEIGHT, SCREEN_WIDTH, Key, World
from cubgrid.maps import default_map


def _rgb(surface, x, y):
    colour = surface.get_at((x, y))
    return (colour.r, colour.g, colour.b)


def test_key_from_pygame_movement_keys():
    assert key_from_pygame(pygame.K_w) is Key.W
    assert key_from_pygame(pygame.K_a) is Key.A
    assert key_from_pygame(pygame.K_s) is Key.S
    assert key_from_pygame(pygame.K_d) is Key.D
    assert key_from_pygame(pygame.K_ESCAPE) is Key.ESC


def test_key_from_pygame_unknown():
    assert key_from_pygame(pygame.K_q) is None


def test_render_paints_map_and_player():
    world = World.from_rows(default_map())
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    render(world, surface)
    assert _rgb(surface, 0, 0) == (0xFF, 0xFF, 0xFF)
    assert _rgb(surface, 1, 1) == (0xC0, 0x9E, 0x06)
    assert _rgb(surface, CELL + 1, CELL + 1) == (0x87, 0x87, 0x87)
    assert _rgb(surface, int(world.px), int(world.py)) == (0, 0, 0)


def test_render_clips_to_small_surface():
    world = World.from_rows(default_map())
    surface = pygame.Surface((10, 10))
    render(world, surface)
    assert _rgb(surface, 0, 0) == (0xFF, 0xFF, 0xFF)


def test_run_exits_on_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    world = World.from_rows(default_map())
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert run(world) == 0


def test_run_moves_then_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    world = World.from_rows(["111", "101", "111"])
    y = world.py
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ]
    with patch("pygame.event.get", return_value=events):
        assert run(world) == 0
    assert world.py == y + 2


def test_main_returns_zero(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([]) == 0