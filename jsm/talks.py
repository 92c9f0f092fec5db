from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import pandas as pd

from jsm.filters import TalkFilters
from jsm.keywords import match_keywords

TALK_COLUMNS = ["title"]


def filter_talks(talks: pd.DataFrame, filters: TalkFilters) -> pd.DataFrame:
    df = talks
    if filters.exclude_fee:
        df = df[~df["has_fee"].astype(bool)]
    return df[match_keywords(filters.keywords, df["title"])].copy()


def decorate_talks(rows: pd.DataFrame) -> pd.DataFrame:
    out = rows.copy()
    out["title"] = '<a href="' + out["url"].fillna("") + '" target="_blank">' + out["title"] + "</a>"
    return out[TALK_COLUMNS].reset_index(drop=True)


def talk_grid(rows: pd.DataFrame) -> pd.DataFrame:
    return rows[["title", "url"]].reset_index(drop=True)


def compute_talks(filters: TalkFilters, ctx: Dict[str, Any]) -> Dict[str, Any]:
    talks: pd.DataFrame = ctx.get("talks", pd.DataFrame())
    matched = filter_talks(talks, filters)
    table = decorate_talks(matched)
    return {
        "filters": asdict(filters),
        "row_count": int(len(table)),
        "rows": table.to_dict(orient="records"),
        "table": table,
        "grid": talk_grid(matched),
        "export": talk_grid(matched),
    }
