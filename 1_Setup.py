import streamlit as st

from constants import (
    DEFAULT_DURATION_HOURS,
    DEFAULT_NUM_COURTS,
    DEFAULT_PLAYER_INPUT,
    DEFAULT_ROUND_MINUTES,
    DURATION_STEP_HOURS,
    MAX_DURATION_HOURS,
    MAX_ROUND_MINUTES,
    MIN_DURATION_HOURS,
    MIN_ROUND_MINUTES,
    ROUND_MINUTES_STEP,
)
from exceptions import InputError
from logger import setup_logging
from roster import max_courts, parse_player_names
from scheduler import calculate_rounds
from session_service import create_new_session

setup_logging()

st.set_page_config(layout="wide", page_title="Padel Setup")

st.title("🎾 Padel Match Scheduler")
st.caption(
    "Generate fair match schedules for 4+ players across any number of courts. "
    "Players with the fewest games go on court first; everyone else rests."
)

# --- Resume an existing session ---
if "session" in st.session_state:
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            session = st.session_state.session
            st.markdown(
                f"### Active session: {len(session.players)} players, "
                f"{session.num_courts} courts"
            )
        with col2:
            if st.button("▶️ Resume", use_container_width=True):
                st.switch_page("pages/2_Session.py")
    st.divider()

# --- Main Setup UI ---
st.header("Session Setup")

st.subheader("1. Players")
player_input = st.text_area(
    "Enter player names (one per line or separated by commas)",
    value=st.session_state.get("player_input_persistent", DEFAULT_PLAYER_INPUT),
    height=300,
)
player_names = parse_player_names(player_input)
st.caption(f"{len(player_names)} players entered")

st.subheader("2. Courts & Timing")
court_limit = max_courts(len(player_names))
col_courts, col_duration, col_round = st.columns(3)

with col_courts:
    num_courts = st.number_input(
        "🏟️ Courts",
        min_value=1,
        max_value=court_limit,
        value=min(st.session_state.get("num_courts_persistent", DEFAULT_NUM_COURTS), court_limit),
        step=1,
        help="Each court holds 4 players (2 vs 2).",
    )

with col_duration:
    duration_hours = st.slider(
        "⏱️ Session length (hours)",
        min_value=MIN_DURATION_HOURS,
        max_value=MAX_DURATION_HOURS,
        value=float(st.session_state.get("duration_hours_persistent", DEFAULT_DURATION_HOURS)),
        step=DURATION_STEP_HOURS,
    )

with col_round:
    round_minutes = st.slider(
        "🔁 Round length (minutes)",
        min_value=MIN_ROUND_MINUTES,
        max_value=MAX_ROUND_MINUTES,
        value=int(st.session_state.get("round_minutes_persistent", DEFAULT_ROUND_MINUTES)),
        step=ROUND_MINUTES_STEP,
    )

st.info(
    f"**Rounds:** {calculate_rounds(duration_hours, round_minutes, int(num_courts))} "
    "(rounded down to a multiple of the court count)"
)

st.subheader("3. Generate")
if st.button("🚀 Generate Schedule", type="primary"):
    try:
        session = create_new_session(
            player_input=player_input,
            num_courts=int(num_courts),
            duration_hours=duration_hours,
            round_minutes=round_minutes,
        )
    except InputError as e:
        st.error(str(e))
    else:
        st.session_state.session = session
        st.session_state.player_input_persistent = player_input
        st.session_state.num_courts_persistent = int(num_courts)
        st.session_state.duration_hours_persistent = duration_hours
        st.session_state.round_minutes_persistent = round_minutes
        st.switch_page("pages/2_Session.py")
