import streamlit as st

from app_types import Team
from constants import (
    DURATION_STEP_HOURS,
    MAX_DURATION_HOURS,
    MAX_ROUND_MINUTES,
    MIN_DURATION_HOURS,
    MIN_ROUND_MINUTES,
    ROUND_MINUTES_STEP,
)
from roster import max_courts
from session_service import record_court_result, update_session_settings
from session_tables import (
    create_leaderboard_dataframe,
    create_player_stats_dataframe,
    team_label,
)

st.set_page_config(
    initial_sidebar_state="collapsed",
    layout="wide"
)

# --- Page Entry Logic ---
if "session" not in st.session_state or st.session_state.session.schedule is None:
    st.error("No active session found. Please set up a session first.")
    st.switch_page("1_Setup.py")

session = st.session_state.session
schedule = session.schedule


def on_winner_change(widget_key: str, round_index: int, court_index: int) -> None:
    """Copies a winner selection (or its removal) into the session ledger."""
    record_court_result(session, round_index, court_index, st.session_state.get(widget_key))


st.title("🎾 Padel Schedule")
st.markdown(
    f"**{len(session.players)} players** · **{session.num_courts} courts** · "
    f"**{schedule.num_rounds} rounds** of {session.round_minutes} minutes"
)

col1, col2 = st.columns([2, 1])

with col1:
    st.header("Rounds")
    for round_index, round_ in enumerate(schedule.rounds):
        with st.container(border=True):
            st.subheader(f"Round {round_index + 1}")
            court_cols = st.columns(len(round_.courts))
            for court_index, court in enumerate(round_.courts):
                with court_cols[court_index]:
                    st.markdown(f"#### Court {court_index + 1}")
                    st.markdown(
                        f"🟢 **Team 1:** {court.team_1[0]} & {court.team_1[1]}  \n"
                        f"🟣 **Team 2:** {court.team_2[0]} & {court.team_2[1]}"
                    )
                    # Seeded from the ledger; generation in the key resets it on regeneration
                    widget_key = f"winner_{session.generation}_{round_index}_{court_index}"
                    st.segmented_control(
                        "Select Winner",
                        [Team.TEAM_1, Team.TEAM_2],
                        format_func=lambda team, court=court: team_label(
                            team, court.players_on(team)
                        ),
                        default=session.get_winner(round_index, court_index),
                        key=widget_key,
                        on_change=on_winner_change,
                        args=(widget_key, round_index, court_index),
                        label_visibility="collapsed",
                    )
            resting = ", ".join(round_.resting) if round_.resting else "No one resting"
            st.info(f"😴 **Resting:** {resting}")

with col2:
    st.header("🏆 Leaderboard")
    st.dataframe(create_leaderboard_dataframe(schedule, session.ledger), use_container_width=True)

    st.header("📊 Player Stats")
    st.dataframe(
        create_player_stats_dataframe(schedule, session.ledger),
        use_container_width=True,
        hide_index=True,
    )

# --- Session Management in Sidebar ---
with st.sidebar:
    st.header("Manage Session")

    with st.expander("⚙️ Settings", expanded=False):
        new_courts = st.number_input(
            "Courts",
            min_value=1,
            max_value=max_courts(len(session.players)),
            value=session.num_courts,
            step=1,
        )
        new_duration = st.slider(
            "Session length (hours)",
            min_value=MIN_DURATION_HOURS,
            max_value=MAX_DURATION_HOURS,
            value=float(session.duration_hours),
            step=DURATION_STEP_HOURS,
        )
        new_round_minutes = st.slider(
            "Round length (minutes)",
            min_value=MIN_ROUND_MINUTES,
            max_value=MAX_ROUND_MINUTES,
            value=int(session.round_minutes),
            step=ROUND_MINUTES_STEP,
        )

    st.caption("Regenerating discards every recorded winner.")
    if st.button("🔀 Regenerate Schedule", key="regenerate_btn", use_container_width=True):
        success, error = update_session_settings(
            session, int(new_courts), new_duration, new_round_minutes
        )
        if success:
            st.rerun()
        else:
            st.error(error)

    if st.button("⚠️ End Session", key="end_session_btn"):
        # Keep the setup inputs for the next session
        st.session_state.num_courts_persistent = session.num_courts
        st.session_state.duration_hours_persistent = session.duration_hours
        st.session_state.round_minutes_persistent = session.round_minutes
        del st.session_state["session"]
        st.switch_page("1_Setup.py")
