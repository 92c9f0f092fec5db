import logging
from typing import Optional

import pandas as pd
import streamlit as st

from jsm.conference import (
    CONF_NAME,
    DAY_CHOICES,
    DEFAULT_SPONSORS,
    DEFAULT_TALK_KEYWORDS,
    DEFAULT_TIME_RANGE,
    PROGRAM_URL,
    TALK_KEYWORD_CHOICES,
    TIME_MAX,
    TIME_MIN,
)
from jsm.data import DATA_DIR, DataContractError, load_program_data
from jsm.facets import default_day
from jsm.filters import normalize_session_filters, normalize_talk_filters
from jsm.keywords import InvalidKeywordPattern
from jsm.sessions import compute_schedule
from jsm.talks import compute_talks

logger = logging.getLogger(__name__)


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .row-count {color: #6b7280; font-size: 0.9rem; margin-bottom: 6px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


def render_results(grid: pd.DataFrame, key: str, column_config: dict, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(f"<div class='row-count'>{len(grid)} matching</div>", unsafe_allow_html=True)
    with c2:
        if export_df is not None and not export_df.empty:
            st.download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name=export_name,
                mime="text/csv",
                key=f"export_{key}",
            )
    if grid.empty:
        st.info("No matches for the current selection.")
        return
    st.dataframe(grid, column_config=column_config, use_container_width=True, hide_index=True)


SCHEDULE_COLUMN_CONFIG = {
    "date_time": st.column_config.TextColumn("Date / time", width="small"),
    "session": st.column_config.TextColumn("Session", width="large"),
    "location": st.column_config.TextColumn("Location", width="small"),
    "type": st.column_config.TextColumn("Type", width="small"),
    "sponsor": st.column_config.TextColumn("Sponsor", width="medium"),
    "url": st.column_config.LinkColumn("Link", display_text="Open", width="small"),
}
TALK_COLUMN_CONFIG = {
    "title": st.column_config.TextColumn("Title", width="large"),
    "url": st.column_config.LinkColumn("Link", display_text="Open", width="small"),
}


def footnote():
    st.markdown("---")
    st.markdown(
        f"For the official {CONF_NAME} website, including conference information, registration for short "
        f"courses, and an online program with more customization options, visit [here]({PROGRAM_URL})."
    )


# ---------- UI setup ----------
st.set_page_config(page_title=CONF_NAME, layout="wide")
inject_base_styles()
st.title(CONF_NAME)

try:
    data_ctx = load_program_data()
except FileNotFoundError as exc:
    logger.exception("program data missing")
    st.error(f"{exc}. Place the session and talk CSV files in {DATA_DIR}.")
    st.stop()
except DataContractError as exc:
    logger.exception("program data failed validation")
    st.error(f"Program data failed validation: {exc}")
    st.stop()

sponsors = data_ctx["sponsors"]
types = data_ctx["types"]

schedule_tab, talks_tab = st.tabs(["Session Schedule", "Talk Finder"])

# ----- Tab 1: session schedule -----
with schedule_tab:
    controls, output = st.columns([3, 9])
    with controls:
        st.markdown("#### Select date/time, sponsors, and type of session.")

        st.markdown("**Day**")
        initial_day = default_day()
        selected_days = [
            code
            for label, code in DAY_CHOICES.items()
            if st.checkbox(label, value=(code == initial_day), key=f"day_{code}")
        ]

        time_range = st.slider("Time", min_value=TIME_MIN, max_value=TIME_MAX, value=DEFAULT_TIME_RANGE, step=1)
        selected_sponsors = st.multiselect(
            "Session sponsor",
            options=sponsors,
            default=[s for s in DEFAULT_SPONSORS if s in sponsors],
        )
        selected_types = st.multiselect("Session type", options=types, default=[])
        session_keyword_text = st.text_input(
            "Keywords or phrases in session title, separated by commas", "", key="session_keyword_text"
        )
        session_exclude_fee = st.checkbox("Exclude added fee events", key="session_exclude_fee")
        footnote()

    session_filters = normalize_session_filters(
        {
            "days": selected_days,
            "time_range": time_range,
            "sponsors": selected_sponsors,
            "types": selected_types,
            "keyword_text": session_keyword_text,
            "exclude_fee": session_exclude_fee,
        }
    )

    with output:
        try:
            schedule = compute_schedule(session_filters, data_ctx)
        except InvalidKeywordPattern as exc:
            st.error(str(exc))
        else:
            if not schedule["ready"]:
                st.info("Select at least one day to see sessions.")
            else:
                chart = schedule["charts"].get("sessions_by_hour")
                if chart:
                    st.vega_lite_chart(chart, use_container_width=True)
                render_results(schedule["grid"], "schedule", SCHEDULE_COLUMN_CONFIG, schedule["export"], "jsm_sessions.csv")

# ----- Tab 2: talk finder -----
with talks_tab:
    controls, output = st.columns([3, 9])
    with controls:
        st.markdown("#### Search for keywords or phrases in session titles.")

        st.markdown("**Select keywords you're interested in**")
        keyword_choices = [
            pattern
            for label, pattern in TALK_KEYWORD_CHOICES.items()
            if st.checkbox(label, value=(pattern in DEFAULT_TALK_KEYWORDS), key=f"talk_kw_{label}")
        ]
        talk_keyword_text = st.text_input(
            "Add additional keywords or phrases, separated by commas", "", key="talk_keyword_text"
        )
        talk_exclude_fee = st.checkbox("Exclude added fee events", key="talk_exclude_fee")
        footnote()

    talk_filters = normalize_talk_filters(
        {
            "keyword_choices": keyword_choices,
            "keyword_text": talk_keyword_text,
            "exclude_fee": talk_exclude_fee,
        }
    )

    with output:
        try:
            talks = compute_talks(talk_filters, data_ctx)
        except InvalidKeywordPattern as exc:
            st.error(str(exc))
        else:
            render_results(talks["grid"], "talks", TALK_COLUMN_CONFIG, talks["export"], "jsm_talks.csv")
