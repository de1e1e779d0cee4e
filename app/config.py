from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import streamlit as st

from ant_grid.config import DEFAULT_CONFIG, GridConfig, PlayArea


@dataclass(frozen=True)
class Config:
    width: int
    height: int
    spacing: int
    stroke: float
    movement_speed: float
    rotation_speed: float
    frame_seconds: float
    frames_per_key: int
    resolution: int

    def grid_config(self) -> GridConfig:
        return GridConfig(
            area=PlayArea(
                width=float(self.width),
                height=float(self.height),
                spacing=float(self.spacing),
            ),
            stroke=self.stroke,
            movement_speed=self.movement_speed,
            rotation_speed=self.rotation_speed,
        )


def set_default_config() -> None:
    if "config" not in st.session_state:
        area = DEFAULT_CONFIG.area
        st.session_state["config"] = Config(
            width=int(area.width),
            height=int(area.height),
            spacing=int(area.spacing),
            stroke=DEFAULT_CONFIG.stroke,
            movement_speed=DEFAULT_CONFIG.movement_speed,
            rotation_speed=DEFAULT_CONFIG.rotation_speed,
            frame_seconds=1.0 / 30.0,
            frames_per_key=3,
            resolution=960,
        )


def play_area_section(config: Config) -> Tuple[int, int, int, float]:
    st.subheader("Play Area")
    width: int = st.slider("Width", 160, 1920, config.width, step=20, key="width")
    height: int = st.slider("Height", 80, 1080, config.height, step=20, key="height")
    spacing: int = st.slider("Grid spacing", 5, 80, config.spacing, key="spacing")
    stroke: float = st.slider(
        "Line stroke", 0.5, 4.0, config.stroke, step=0.5, key="stroke"
    )
    return width, height, spacing, stroke


def agent_section(config: Config) -> Tuple[float, float]:
    st.subheader("Agent")
    movement_speed: float = st.slider(
        "Movement speed (units/s)",
        10.0,
        800.0,
        config.movement_speed,
        key="movement_speed",
    )
    rotation_speed: float = st.slider(
        "Turn rate (rad/s)",
        0.1,
        12.0,
        config.rotation_speed,
        key="rotation_speed",
    )
    return movement_speed, rotation_speed


def timing_section(config: Config) -> Tuple[float, int, int]:
    st.subheader("Timing & Rendering")
    frame_seconds: float = st.number_input(
        "Frame duration (s)",
        min_value=0.001,
        max_value=1.0,
        value=config.frame_seconds,
        format="%.3f",
        key="frame_seconds",
    )
    frames_per_key: int = st.number_input(
        "Frames per key press",
        min_value=1,
        max_value=60,
        value=config.frames_per_key,
        key="frames_per_key",
    )
    resolution: int = st.slider(
        "Image width (px)", 320, 1920, config.resolution, step=32, key="resolution"
    )
    return frame_seconds, frames_per_key, resolution


def get_config_from_widgets() -> Config:
    config: Config = st.session_state["config"]
    width, height, spacing, stroke = play_area_section(config)
    movement_speed, rotation_speed = agent_section(config)
    frame_seconds, frames_per_key, resolution = timing_section(config)
    return Config(
        width=width,
        height=height,
        spacing=spacing,
        stroke=stroke,
        movement_speed=movement_speed,
        rotation_speed=rotation_speed,
        frame_seconds=frame_seconds,
        frames_per_key=frames_per_key,
        resolution=resolution,
    )
