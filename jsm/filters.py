from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from jsm.conference import DEFAULT_TIME_RANGE, TIME_MAX, TIME_MIN
from jsm.keywords import split_keywords


@dataclass(frozen=True)
class SessionFilters:
    days: List[str] = field(default_factory=list)
    time_range: Tuple[float, float] = DEFAULT_TIME_RANGE
    sponsors: List[str] = field(default_factory=list)
    types: List[str] = field(default_factory=list)
    keyword_text: str = ""
    exclude_fee: bool = False

    @property
    def keywords(self) -> List[str]:
        return split_keywords(self.keyword_text)


@dataclass(frozen=True)
class TalkFilters:
    keyword_choices: List[str] = field(default_factory=list)
    keyword_text: str = ""
    exclude_fee: bool = False

    @property
    def keywords(self) -> List[str]:
        return list(self.keyword_choices) + split_keywords(self.keyword_text)


def _as_str_list(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v) for v in values if v is not None]


def _as_time_range(value: object) -> Tuple[float, float]:
    try:
        lo, hi = (float(v) for v in value)  # type: ignore[union-attr]
    except Exception:
        return DEFAULT_TIME_RANGE
    lo, hi = sorted((lo, hi))
    return max(float(TIME_MIN), lo), min(float(TIME_MAX), hi)


def normalize_session_filters(raw: dict) -> SessionFilters:
    return SessionFilters(
        days=_as_str_list(raw.get("days")),
        time_range=_as_time_range(raw.get("time_range", DEFAULT_TIME_RANGE)),
        sponsors=_as_str_list(raw.get("sponsors")),
        types=_as_str_list(raw.get("types")),
        keyword_text=str(raw.get("keyword_text") or ""),
        exclude_fee=bool(raw.get("exclude_fee", False)),
    )


def normalize_talk_filters(raw: dict) -> TalkFilters:
    return TalkFilters(
        keyword_choices=_as_str_list(raw.get("keyword_choices")),
        keyword_text=str(raw.get("keyword_text") or ""),
        exclude_fee=bool(raw.get("exclude_fee", False)),
    )
