from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any, Dict, List, Optional

import pandas as pd

from jsm.charts import sessions_by_hour_chart
from jsm.filters import SessionFilters
from jsm.keywords import match_keywords

SCHEDULE_COLUMNS = ["date_time", "session", "location", "type", "sponsor"]


def match_sponsors(sponsor_column: pd.Series, selected: List[str]) -> pd.Series:
    """Rows whose sponsor cell contains any selected sponsor name.

    Nothing selected matches every row, including rows without a sponsor.
    """
    if not selected:
        return pd.Series(True, index=sponsor_column.index, dtype=bool)
    pattern = re.compile("|".join(re.escape(s) for s in selected))
    return sponsor_column.map(lambda cell: isinstance(cell, str) and pattern.search(cell) is not None).astype(bool)


def filter_sessions(sessions: pd.DataFrame, filters: SessionFilters) -> Optional[pd.DataFrame]:
    """Raw session rows matching every active facet, in source order.

    Returns None while no day is selected.
    """
    if not filters.days:
        return None

    df = sessions
    if filters.exclude_fee:
        df = df[~df["has_fee"].astype(bool)]

    lo, hi = filters.time_range
    mask = (
        df["day"].isin(filters.days)
        & (df["beg_time_round"] >= lo)
        & (df["end_time_round"] <= hi)
        & match_sponsors(df["sponsor"], filters.sponsors)
        & match_keywords(filters.keywords, df["session"])
    )
    if filters.types:
        mask &= df["type"].isin(filters.types)
    return df[mask].copy()


def decorate_sessions(rows: pd.DataFrame) -> pd.DataFrame:
    out = rows.copy()
    out["date_time"] = out["day"] + ", " + out["date"] + "<br/>" + out["time"]
    out["session"] = '<a href="' + out["url"].fillna("") + '" target="_blank">' + out["session"] + "</a>"
    return out[SCHEDULE_COLUMNS].reset_index(drop=True)


def session_grid(rows: pd.DataFrame) -> pd.DataFrame:
    """Undecorated projection for an interactive grid; the link stays in its own column."""
    out = rows.copy()
    out["date_time"] = out["day"] + ", " + out["date"] + " " + out["time"]
    return out[["date_time", "session", "location", "type", "sponsor", "url"]].reset_index(drop=True)


def compute_schedule(filters: SessionFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    sessions: pd.DataFrame = ctx.get("sessions", pd.DataFrame())
    matched = filter_sessions(sessions, filters)
    if matched is None:
        return {"filters": asdict(filters), "ready": False, "row_count": 0, "rows": [], "charts": {}}

    table = decorate_sessions(matched)
    export = matched[["day", "date", "time", "session", "location", "type", "sponsor", "url"]].reset_index(drop=True)

    charts: Dict[str, Any] = {}
    if not matched.empty:
        charts["sessions_by_hour"] = sessions_by_hour_chart(matched)

    return {
        "filters": asdict(filters),
        "ready": True,
        "row_count": int(len(table)),
        "rows": table.to_dict(orient="records"),
        "table": table,
        "grid": session_grid(matched),
        "export": export,
        "charts": charts,
    }
