from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from jsm.conference import CONF_START, DAY_CODES, DEFAULT_DAY, SPONSOR_SEPARATOR

TYPE_PREFIX_BUCKETS = ("Invited", "Topic", "Contributed")
OTHER_TYPE = "Other"


def _present(values: Iterable[object]) -> List[str]:
    return [str(v) for v in values if v is not None and not pd.isna(v)]


def extract_sponsors(sponsor_column: Iterable[object]) -> List[str]:
    """Split multi-sponsor cells into a sorted list of unique sponsor names."""
    joined = SPONSOR_SEPARATOR.join(_present(sponsor_column))
    if not joined:
        return []
    names = {name.strip() for name in joined.split(SPONSOR_SEPARATOR)}
    return sorted(n for n in names if n)


def extract_types(type_column: Iterable[object]) -> List[str]:
    """Order session types as Invited*, Topic*, Contributed*, the rest, then "Other".

    "Other" is always offered last, whether or not any session carries it.
    """
    distinct = set(_present(type_column))
    buckets: List[List[str]] = [[] for _ in TYPE_PREFIX_BUCKETS]
    remainder: List[str] = []
    for value in distinct:
        for i, prefix in enumerate(TYPE_PREFIX_BUCKETS):
            if value.startswith(prefix):
                buckets[i].append(value)
                break
        else:
            if value != OTHER_TYPE:
                remainder.append(value)

    ordered: List[str] = []
    for bucket in buckets:
        ordered.extend(sorted(bucket))
    ordered.extend(sorted(remainder))
    ordered.append(OTHER_TYPE)
    return ordered


def day_code(day: date) -> str:
    # date.weekday() is Monday=0; Friday=4 opens the conference week.
    return DAY_CODES[(day.weekday() - 4) % 7]


def default_day(today: Optional[date] = None, conf_start: date = CONF_START) -> str:
    today = today or date.today()
    if today < conf_start:
        return DEFAULT_DAY
    return day_code(today)
