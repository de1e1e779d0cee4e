"""Interactive pygame window.

Opens a window the size of the play area and drives :func:`ant_grid.step.step`
once per rendered frame with the elapsed frame time.

Controls: W/S or Up/Down move, A/D or Left/Right turn, Escape (or the close
button) quits.

Usage:
    python -m ant_grid.viewer [--spacing 10] [--fps 60] [--log-level INFO]
"""

import argparse
import logging
import math
from typing import Dict, List, Optional, Sequence

import pygame

from ant_grid.actions import InputSnapshot, Key
from ant_grid.config import GridConfig, PlayArea
from ant_grid.levels.grid import generate
from ant_grid.renderer.draw import draw_commands, scale_for, world_to_screen
from ant_grid.state import State
from ant_grid.step import step

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[Key, List[int]] = {
    Key.FORWARD: [pygame.K_w, pygame.K_UP],
    Key.BACKWARD: [pygame.K_s, pygame.K_DOWN],
    Key.LEFT: [pygame.K_a, pygame.K_LEFT],
    Key.RIGHT: [pygame.K_d, pygame.K_RIGHT],
    Key.CLOSE: [pygame.K_ESCAPE],
}


def sample_input(
    held_keys: Sequence[bool], events: Sequence[pygame.event.Event]
) -> InputSnapshot:
    """Translate pygame key state and this frame's events into a snapshot."""
    held = [
        key
        for key, codes in KEY_BINDINGS.items()
        if any(held_keys[code] for code in codes)
    ]
    pressed: List[Key] = []
    for event in events:
        if event.type == pygame.QUIT:
            pressed.append(Key.CLOSE)
        elif event.type == pygame.KEYDOWN:
            pressed.extend(
                key for key, codes in KEY_BINDINGS.items() if event.key in codes
            )
    return InputSnapshot.from_keys(held, pressed)


def draw(screen: pygame.Surface, state: State) -> None:
    """Submit the state's draw commands to the pygame surface."""
    area = state.config.area
    scale = scale_for(area, screen.get_width())
    screen.fill(state.config.clear_color)
    for command in draw_commands(state):
        points = world_to_screen(area, command.outline(), scale)
        pygame.draw.polygon(screen, command.color, [tuple(p) for p in points])


def run(config: GridConfig, fps: int = 60) -> State:
    """Run the window loop until closed; returns the final state."""
    state = generate(config)
    area = config.area

    pygame.init()
    screen = pygame.display.set_mode((int(area.width), int(area.height)))
    pygame.display.set_caption("Ant Grid")
    clock = pygame.time.Clock()

    try:
        while not state.closed:
            # milliseconds since the previous tick
            dt = clock.tick(fps) / 1000.0
            snapshot = sample_input(pygame.key.get_pressed(), pygame.event.get())
            state = step(state, snapshot, dt)
            if state.closed:
                break
            draw(screen, state)
            pygame.display.flip()
    finally:
        pygame.quit()

    logger.info("Session closed after %d frames (%.1fs)", state.frame, state.elapsed)
    return state


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive the ant over the grid.")
    parser.add_argument("--width", type=float, default=1280.0)
    parser.add_argument("--height", type=float, default=640.0)
    parser.add_argument("--spacing", type=float, default=10.0)
    parser.add_argument("--stroke", type=float, default=1.0)
    parser.add_argument("--speed", type=float, default=200.0, help="units per second")
    parser.add_argument("--turn-rate", type=float, default=math.pi, help="radians per second")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GridConfig(
        area=PlayArea(width=args.width, height=args.height, spacing=args.spacing),
        stroke=args.stroke,
        movement_speed=args.speed,
        rotation_speed=args.turn_rate,
    )
    run(config, fps=args.fps)


if __name__ == "__main__":
    main()
