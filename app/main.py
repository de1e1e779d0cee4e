from typing import Dict, List, Optional

import numpy as np
import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from ant_grid.actions import MOVE_KEYS, Key
from ant_grid.gym_env import AntGridEnv
from ant_grid.utils.grid import cell_index_at

from config import Config, get_config_from_widgets, set_default_config

KEY_MAP: Dict[str, Key] = {
    "w": Key.FORWARD,
    "s": Key.BACKWARD,
    "a": Key.LEFT,
    "d": Key.RIGHT,
}

st.set_page_config(layout="wide", page_title="Ant Grid")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def make_env_and_reset(config: Config) -> AntGridEnv:
    try:
        env = AntGridEnv(
            render_mode="texture",
            resolution=config.resolution,
            frame_seconds=config.frame_seconds,
            config=config.grid_config(),
        )
    except ValueError as e:
        st.error(f"Environment creation failed: {e}")
        st.stop()
    st.session_state["env"] = env
    return env


def key_action(key: Key) -> np.ndarray:
    action = np.zeros(len(MOVE_KEYS), dtype=np.int8)
    action[MOVE_KEYS.index(key)] = 1
    return action


def get_keyboard_key() -> Optional[Key]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="ant_key_input",
            placeholder="Type: W/S to move, A/D to turn",
        )
        or ""
    )
    prev_value: str = st.session_state.get("ant_key_input_prev", "")
    st.session_state["ant_key_input_prev"] = value
    if value != prev_value:
        from collections import Counter

        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return KEY_MAP.get(new_values[-1].lower())
    return None


def hold_key(env: AntGridEnv, key: Key, frames: int) -> None:
    for _ in range(frames):
        env.step(key_action(key))


# --------- Main App ---------
set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: Config = get_config_from_widgets()
    st.session_state["config"] = config
    if st.button("🔄 Rebuild Grid", key="rebuild_btn", use_container_width=True):
        make_env_and_reset(config)
    st.divider()

with tab_game:
    if "env" not in st.session_state:
        make_env_and_reset(st.session_state["config"])
    env: AntGridEnv = st.session_state["env"]
    frames: int = st.session_state["config"].frames_per_key

    left_col, middle_col, right_col = st.columns([0.2, 0.6, 0.2])

    with right_col:
        if st.button("🔄 Reset", key="reset_btn", use_container_width=True):
            env.reset()

        st.divider()

        pressed = get_keyboard_key()
        if pressed is not None:
            hold_key(env, pressed, frames)

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="forward_btn", use_container_width=True):
                hold_key(env, Key.FORWARD, frames)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("↺", key="left_btn", use_container_width=True):
                hold_key(env, Key.LEFT, frames)
        with down_btn:
            if st.button("⬇️", key="backward_btn", use_container_width=True):
                hold_key(env, Key.BACKWARD, frames)
        with right_btn:
            if st.button("↻", key="right_btn", use_container_width=True):
                hold_key(env, Key.RIGHT, frames)

    with left_col:
        state = env.state
        if state is not None:
            x, y = state.agent.position
            st.info(f"**Position:** ({x:.1f}, {y:.1f})", icon="🐜")
            st.info(f"**Heading:** {np.degrees(state.agent.angle):.0f}°", icon="🧭")
            index = cell_index_at(state.config.area, state.agent.position)
            if index is None:
                st.warning("Outside the grid")
            else:
                st.success(f"**Cell:** {index}", icon="🟧")
            st.info(f"**Frame:** {state.frame}", icon="⏱️")

    with middle_col:
        img = env.render(mode="texture")
        if img is not None:
            st.image(img, use_container_width=True)

with tab_state:
    if env.state:
        st.json(thaw(env.state.description), expanded=1)
