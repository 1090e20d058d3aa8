# app.py — 8-Puzzle UI (image upload at top, manual/auto play in sidebar)
import json
import logging
import random
import time
from typing import List

import streamlit as st
from PIL import Image

from board import GOAL, ORDERED_GOAL, Board
from display import render_grid, slice_image_to_tiles
from generator import DEFAULT_SHUFFLE_STEPS, random_solvable_board, shuffle_via_legal_moves
from solver_impl import solve_puzzle

logger = logging.getLogger(__name__)

GOALS = {"Spiral (1 2 3 / 8 _ 4 / 7 6 5)": GOAL, "Ordered (1 2 3 / 4 5 6 / 7 8 _)": ORDERED_GOAL}


def _reset_playback(ss) -> None:
    ss.moves, ss.path, ss.step = [], [], 0
    ss.last_tick = 0.0


#  Streamlit UI
st.set_page_config(page_title="8-Puzzle", layout="centered")
st.title("8-Puzzle")
st.caption("Upload an image → Shuffle → Solve (A*) → Step-by-step.")

#  SIDEBAR: controls
st.sidebar.header("Controls")
goal_name = st.sidebar.selectbox("Goal", list(GOALS), index=0)
goal: Board = GOALS[goal_name]
shuffle_mode = st.sidebar.radio("Shuffle mode", ["Legal moves", "Random permutation"], index=0)
shuffle_steps = st.sidebar.slider("Shuffle moves", 10, 100, DEFAULT_SHUFFLE_STEPS, 5)
seed_text = st.sidebar.text_input("Seed (optional)", value="")

# Session state
ss = st.session_state
if "state" not in ss: ss.state = goal
if "goal" not in ss: ss.goal = goal
if "moves" not in ss: ss.moves = []               # List[str]
if "path" not in ss: ss.path = []                 # List[Board]
if "step" not in ss: ss.step = 0
if "tiles" not in ss: ss.tiles = None             # List[Image.Image] | None
if "moves_made" not in ss: ss.moves_made = 0
if "start_time" not in ss: ss.start_time = time.time()
if "last_tick" not in ss: ss.last_tick = 0.0
if "stats" not in ss: ss.stats = ""

if ss.goal != goal:
    ss.goal, ss.state = goal, goal
    _reset_playback(ss)

#  TOP: Image upload
st.subheader("1) Choose an image (optional)")
uploaded_main = st.file_uploader("Upload an image (JPG/PNG) for the puzzle tiles", type=["jpg", "jpeg", "png"])
if uploaded_main:
    try:
        ss.tiles = slice_image_to_tiles(Image.open(uploaded_main))
        st.success("Image sliced into 9 tiles.")
    except OSError as e:
        ss.tiles = None
        st.error(f"Couldn’t process image: {e}")

st.divider()

st.sidebar.subheader("Manual moves")


def _try_move(label: str) -> None:
    try:
        ss.state = ss.state.move(label)
    except ValueError:
        return
    _reset_playback(ss)
    ss.moves_made += 1


# Labels name the direction the blank travels
if st.sidebar.button("⬆️ Up"):    _try_move("Up")
if st.sidebar.button("⬅️ Left"):  _try_move("Left")
if st.sidebar.button("➡️ Right"): _try_move("Right")
if st.sidebar.button("⬇️ Down"):  _try_move("Down")

st.sidebar.subheader("Autoplay solution")
auto_play = st.sidebar.checkbox("Enable autoplay", value=False, key="autoplay")
auto_speed_ms = st.sidebar.slider("Speed (ms/step)", 100, 1500, 300, 50)

#  MAIN: top buttons
col1, col2, col3 = st.columns(3)

if col1.button("Shuffle"):
    try:
        rng = random.Random(int(seed_text)) if seed_text.strip() else random.Random()
    except ValueError:
        st.error(f"Seed must be an integer, got {seed_text!r}.")
    else:
        if shuffle_mode == "Legal moves":
            ss.state = shuffle_via_legal_moves(shuffle_steps, goal, rng)
        else:
            ss.state = random_solvable_board(goal, rng)
        _reset_playback(ss)
        ss.moves_made = 0
        ss.start_time = time.time()
        ss.stats = ""

if col2.button("Solve"):
    with st.spinner("Searching..."):
        result = solve_puzzle(ss.state, goal)
    logger.info("UI solve from %s: success=%s expanded=%d", ss.state.signature, result.success, result.expanded)
    if result.success:
        ss.moves, ss.path, ss.step = result.moves, result.path, 0
        ss.moves_made = 0
        ss.start_time = time.time()
        ss.last_tick = 0.0
        ss.stats = (f"Expanded {result.expanded} • Generated {result.generated} • "
                    f"Max frontier {result.max_frontier} • {result.elapsed:0.3f}s")
    else:
        _reset_playback(ss)
        ss.stats = ""
        st.error(f"A* failed to find a solution ({result.expanded} states expanded).")

if col3.button("Reset"):
    ss.state = goal
    _reset_playback(ss)
    ss.moves_made = 0
    ss.start_time = time.time()
    ss.stats = ""

#  Playback + stats
path: List[Board] = ss.path
elapsed = time.time() - ss.get("start_time", time.time())
st.caption(f"Manual moves: {ss.moves_made}  •  Elapsed: {elapsed:0.1f}s")
if ss.stats:
    st.caption(ss.stats)

if path and len(path) > 1:
    last_idx = len(path) - 1
    ss.step = min(max(ss.step, 0), last_idx)

    st.write(f"Solution length: **{last_idx}** moves: {' '.join(ss.moves)}")
    c1, c2, c3 = st.columns(3)
    if c1.button("⬅️ Prev", disabled=ss.step <= 0):
        ss.step = max(0, ss.step - 1)
        ss.last_tick = 0.0
        st.rerun()
    if c2.button("➡️ Next", disabled=ss.step >= last_idx):
        ss.step = min(last_idx, ss.step + 1)
        ss.last_tick = 0.0
        st.rerun()
    if c3.button("⏩ End", disabled=ss.step >= last_idx):
        ss.step = last_idx
        ss.last_tick = 0.0
        st.rerun()

    display_state = path[ss.step]
    caption = f"Step {ss.step}/{last_idx}" + (f" • after {ss.moves[ss.step - 1]}" if ss.step else "")
else:
    last_idx = 0
    display_state = ss.state
    caption = "Current puzzle" + (" (solved)" if ss.state == goal else "")

#  Show current frame (image)
st.image(render_grid(display_state, ss.tiles), caption=caption, use_container_width=True)

#  Autoplay tick (render, then schedule next step)
if path and len(path) > 1 and auto_play and ss.step < last_idx:
    now_ms = time.time() * 1000.0
    if ss.last_tick == 0.0:
        ss.last_tick = now_ms
    remaining_ms = max(0.0, ss.last_tick + auto_speed_ms - now_ms)
    if remaining_ms > 0:
        time.sleep(remaining_ms / 1000.0)

    ss.step = min(last_idx, ss.step + 1)
    ss.last_tick = time.time() * 1000.0
    st.rerun()

#  Download solution as JSON
if path and len(path) > 1:
    data = {"goal": list(goal.cells), "moves": ss.moves, "path": [list(b.cells) for b in path]}
    st.download_button("Download solution (JSON)",
                       data=json.dumps(data, indent=2),
                       file_name="solution.json",
                       mime="application/json")
