from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jsm.conference import DAY_CODES


class SessionRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    day: str
    date: str
    time: str
    beg_time_round: float
    end_time_round: float
    sponsor: Optional[str] = None
    type: Optional[str] = None
    session: str
    location: Optional[str] = None
    url: Optional[str] = None
    has_fee: bool = False

    @field_validator("day")
    @classmethod
    def _known_day(cls, value: str) -> str:
        if value not in DAY_CODES:
            raise ValueError(f"unknown day code {value!r}; expected one of {', '.join(DAY_CODES)}")
        return value

    @model_validator(mode="after")
    def _ordered_times(self) -> "SessionRecord":
        if self.beg_time_round > self.end_time_round:
            raise ValueError(
                f"beg_time_round ({self.beg_time_round}) is after end_time_round ({self.end_time_round})"
            )
        return self


class TalkRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    url: Optional[str] = None
    has_fee: bool = False
