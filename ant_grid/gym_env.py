"""Gymnasium environment wrapper for the ant grid.

Each ``step`` advances the simulation by one frame of fixed duration with the
keys selected by the action held down. The observation pairs the rendered
RGBA image with the agent pose and the occupied cell:

``{"image": np.ndarray(H,W,4), "pose": np.ndarray([x, y, angle]), "cell": np.ndarray([i, j])}``

``cell`` is ``[-1, -1]`` while the agent is outside the grid. There is no
reward signal (always ``0.0``) and episodes only end when truncated by the
caller.

Usage:

``env = AntGridEnv(resolution=320, frame_seconds=1 / 30)``
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from ant_grid.actions import MOVE_KEYS, InputSnapshot, Key
from ant_grid.config import DEFAULT_CONFIG, GridConfig
from ant_grid.levels.grid import generate
from ant_grid.renderer.draw import GridRenderer, image_size, to_array
from ant_grid.state import State
from ant_grid.step import step
from ant_grid.utils.grid import cell_index_at

ObsType = Dict[str, Any]

DEFAULT_FRAME_SECONDS = 1.0 / 60.0


def action_to_snapshot(action: np.ndarray) -> InputSnapshot:
    """Map a ``MultiBinary(4)`` vector (forward, backward, left, right) to input."""
    flags = np.asarray(action).reshape(-1)
    if flags.shape != (len(MOVE_KEYS),):
        raise ValueError(f"Invalid action: {action}")
    held: List[Key] = [key for key, flag in zip(MOVE_KEYS, flags) if flag]
    return InputSnapshot.holding(*held)


def state_info(state: State) -> Dict[str, Any]:
    """Structured diagnostics returned as the Gymnasium ``info`` dict."""
    return {
        "frame": int(state.frame),
        "elapsed": float(state.elapsed),
        "markers": [list(index) for index in state.marker],
        "closed": state.closed,
    }


class AntGridEnv(gym.Env[ObsType, np.ndarray]):
    """Gymnasium ``Env`` implementation for the ant grid.

    The action space is ``MultiBinary(4)``; see :data:`ant_grid.actions.MOVE_KEYS`
    for the key order.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        resolution: int = 640,
        frame_seconds: float = DEFAULT_FRAME_SECONDS,
        config: Optional[GridConfig] = None,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a viewer.
            resolution: Width (pixels) of rendered image; height is scaled.
            frame_seconds: Simulated duration of one ``step``.
            config: Play area and agent configuration.
        """
        if frame_seconds < 0:
            raise ValueError(f"Frame time must be non-negative, got {frame_seconds}")
        self.config = config or DEFAULT_CONFIG
        self.frame_seconds = frame_seconds
        self.state: Optional[State] = None
        self._render_mode = render_mode
        self._renderer = GridRenderer(resolution=resolution)

        width, height = image_size(self.config.area, resolution)
        area = self.config.area
        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=(height, width, 4), dtype=np.uint8
                ),
                "pose": spaces.Box(
                    low=-np.inf, high=np.inf, shape=(3,), dtype=np.float64
                ),
                "cell": spaces.Box(
                    low=-1,
                    high=max(area.columns, area.rows),
                    shape=(2,),
                    dtype=np.int64,
                ),
            }
        )
        self.action_space = spaces.MultiBinary(len(MOVE_KEYS))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode from the configured start pose.

        Arguments:
            seed: Forwarded to Gymnasium's RNG; the simulation is deterministic.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = generate(self.config)
        return self._get_obs(), state_info(self.state)

    def step(
        self, action: np.ndarray
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Advance one frame holding the keys flagged in ``action``.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None
        self.state = step(self.state, action_to_snapshot(action), self.frame_seconds)
        return self._get_obs(), 0.0, self.state.closed, False, state_info(self.state)

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def close(self) -> None:
        pass

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        agent = self.state.agent
        index = cell_index_at(self.config.area, agent.position)
        return {
            "image": to_array(self._renderer.render(self.state)),
            "pose": np.array(
                [agent.position[0], agent.position[1], agent.angle], dtype=np.float64
            ),
            "cell": np.array(index if index is not None else (-1, -1), dtype=np.int64),
        }
