from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def sessions_by_hour_chart(sessions: pd.DataFrame) -> Dict[str, Any]:
    counts = (
        sessions.assign(start_hour=sessions["beg_time_round"].astype(float).apply(int))
        .groupby(["day", "start_hour"])
        .size()
        .reset_index(name="sessions")
    )
    chart = (
        alt.Chart(counts)
        .mark_bar()
        .encode(
            x=alt.X("start_hour:O", title="Start hour", axis=alt.Axis(labelAngle=0)),
            y=alt.Y("sessions:Q", title="Sessions", axis=alt.Axis(format="d", gridDash=[4, 4], domain=False, ticks=False)),
            color=alt.Color("day:N", title="Day"),
            tooltip=[
                alt.Tooltip("day:N", title="Day"),
                alt.Tooltip("start_hour:O", title="Start hour"),
                alt.Tooltip("sessions:Q", title="Sessions"),
            ],
        )
        .properties(height=180)
    )
    return to_vega_spec(chart)
