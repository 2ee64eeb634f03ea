import html
import logging
import random
import time

import streamlit as st
import streamlit.components.v1 as components
from streamlit_autorefresh import st_autorefresh

from settings import load_settings
from wheel_geometry import slice_color
from wheel_render import render_wheel_html
from wheel_state import (
    MIN_OPTIONS_TO_SPIN,
    WheelState,
    add_option,
    complete_spin,
    dismiss_winner,
    is_spin_due,
    remove_option,
    shuffle_options,
    start_spin,
)

st.set_page_config(page_title="Wheel of Names", page_icon="🎡")

logger = logging.getLogger("wheel_app")

try:
    settings = load_settings()
except ValueError as error:
    logger.error("Invalid wheel settings: %s", error)
    st.error(f"Invalid [wheel] settings in .streamlit/secrets.toml: {error}")
    st.stop()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.title("🎡 Wheel of Names")
st.markdown("""
Add some choices, then spin the wheel to pick one at random.
""")


def current_time_ms():
    return int(time.time_ns() // 1_000_000)


def get_state():
    return st.session_state.wheel_state


def set_state(state):
    st.session_state.wheel_state = state


def color_chip(color, highlighted=False):
    ring = "box-shadow:0 0 0 2px #86efac;" if highlighted else ""
    return (
        f'<span style="display:inline-block; width:14px; height:14px; border-radius:50%;'
        f' background:{color}; vertical-align:middle; margin-right:8px; {ring}"></span>'
    )


# Initialize session state if it doesn't exist
if 'wheel_state' not in st.session_state:
    st.session_state.wheel_state = WheelState()

if 'rng' not in st.session_state:
    st.session_state.rng = random.Random(settings.seed)

if 'spin_from_rotation' not in st.session_state:
    st.session_state.spin_from_rotation = 0

wheel_state = get_state()
is_spinning = wheel_state.spinning

# --- Sidebar: Inputs ---
with st.sidebar:
    st.header("Inputs")

    with st.form("add_option_form", clear_on_submit=True):
        new_option_text = st.text_input(
            "Option",
            placeholder="Input text here...",
            key="new_option_text",
            disabled=is_spinning
        )
        submitted = st.form_submit_button("Add", disabled=is_spinning)

        if submitted and new_option_text.strip():
            set_state(add_option(get_state(), new_option_text))
            st.rerun()

    st.divider()
    if st.button("Shuffle", key="shuffle_btn", disabled=is_spinning or len(wheel_state.options) < 2):
        set_state(shuffle_options(get_state(), st.session_state.rng))
        st.rerun()

    st.caption(f"Spin duration: {settings.spin_duration_ms} ms, at least {settings.min_spins} turns")

# --- Main Area: Wheel and Options ---

wheel_col, options_col = st.columns([2.2, 1])

with wheel_col:
    st.subheader("Wheel")

    if not wheel_state.options:
        st.info("Add options to see the wheel.")
    else:
        wheel_html = render_wheel_html(
            options=list(wheel_state.spin_options if is_spinning else wheel_state.options),
            rotation=wheel_state.rotation,
            from_rotation=st.session_state.spin_from_rotation,
            animate=is_spinning,
            duration_ms=settings.spin_duration_ms,
            winning_index=wheel_state.winning_index,
            spin_key=wheel_state.spin_id
        )
        components.html(wheel_html, height=390)

    spin_btn = st.button(
        "SPIN!",
        key="spin_btn",
        disabled=not wheel_state.can_spin,
        use_container_width=True,
        type="primary"
    )

    if len(wheel_state.options) < MIN_OPTIONS_TO_SPIN:
        st.caption("Add at least 2 options to spin")
    else:
        st.caption("Tap SPIN to start")

with options_col:
    st.markdown("#### Choices")
    if not wheel_state.options:
        st.info("Add some choices to the wheel!")
    else:
        for index, option in enumerate(wheel_state.options):
            is_winner = wheel_state.winning_index == index
            label_col, remove_col = st.columns([4, 1])
            with label_col:
                text = html.escape(option)
                if is_winner:
                    text = f'<span style="color:#15803d; font-weight:600;">{text}</span> ✅ <b>Winner</b>'
                st.markdown(
                    color_chip(slice_color(index), highlighted=is_winner) + text,
                    unsafe_allow_html=True
                )
            with remove_col:
                if st.button("🗑️", key=f"remove-{index}", help="Remove", disabled=is_spinning):
                    set_state(remove_option(get_state(), index))
                    st.rerun()

if spin_btn:
    previous_rotation = get_state().rotation
    next_state = start_spin(
        get_state(),
        st.session_state.rng,
        current_time_ms(),
        min_spins=settings.min_spins
    )
    if next_state is not get_state():
        st.session_state.spin_from_rotation = previous_rotation
        set_state(next_state)
    st.rerun()

if wheel_state.winner is not None and not is_spinning:
    st.markdown("### 🏆 We have a winner!")
    st.success(f"**{wheel_state.winner.label}**")
    if st.button("Continue", key="dismiss_winner_btn", use_container_width=True):
        set_state(dismiss_winner(get_state()))
        st.rerun()

if is_spinning:
    spin_id = wheel_state.spin_id
    st_autorefresh(
        interval=settings.spin_duration_ms,
        key=f"spin-finish-{spin_id}"
    )
    if is_spin_due(wheel_state, current_time_ms(), settings.spin_duration_ms):
        set_state(complete_spin(get_state(), spin_id))
        st.rerun()
