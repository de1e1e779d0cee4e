from collections import defaultdict

import pygame

from ant_grid.actions import Key
from ant_grid.viewer import parse_args, sample_input


def held(*codes: int) -> defaultdict:
    return defaultdict(bool, {code: True for code in codes})


def test_held_keys_map_to_snapshot() -> None:
    snapshot = sample_input(held(pygame.K_w, pygame.K_LEFT), [])
    assert snapshot.held == frozenset({Key.FORWARD, Key.LEFT})
    assert snapshot.pressed == frozenset()


def test_escape_and_quit_request_close() -> None:
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert sample_input(held(), [escape]).was_pressed(Key.CLOSE)
    assert sample_input(held(), [pygame.event.Event(pygame.QUIT)]).was_pressed(Key.CLOSE)


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert (args.width, args.height, args.spacing) == (1280.0, 640.0, 10.0)
    assert args.log_level == "INFO"
