from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Type

import pandas as pd
from pydantic import BaseModel, TypeAdapter, ValidationError

from jsm.facets import extract_sponsors, extract_types
from jsm.schemas import SessionRecord, TalkRecord


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1] / "app-data"
SESSIONS_FILE = "jsm2019_sessions.csv"
TALKS_FILE = "jsm2019_talks.csv"

SESSIONS_PATH = DATA_DIR / SESSIONS_FILE
TALKS_PATH = DATA_DIR / TALKS_FILE

SESSION_COLUMNS = [
    "day",
    "date",
    "time",
    "beg_time_round",
    "end_time_round",
    "sponsor",
    "type",
    "session",
    "location",
    "url",
    "has_fee",
]
TALK_COLUMNS = ["title", "url", "has_fee"]

SESSION_TEXT_COLUMNS = ["day", "date", "time", "sponsor", "type", "session", "location", "url"]
TALK_TEXT_COLUMNS = ["title", "url"]


class DataContractError(ValueError):
    """A source table is missing columns or holds values of the wrong type."""


def get_source_files(data_dir: Optional[Path] = None) -> List[Path]:
    base = Path(data_dir) if data_dir is not None else DATA_DIR
    return [base / SESSIONS_FILE, base / TALKS_FILE]


def file_signature(files: List[Path]) -> Tuple[Tuple[str, float], ...]:
    return tuple((str(f), f.stat().st_mtime) for f in files)


def check_columns(df: pd.DataFrame, required: Iterable[str], *, source: str) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataContractError(f"{source}: missing required column(s): {', '.join(missing)}")


def _validate_rows(
    df: pd.DataFrame, model: Type[BaseModel], columns: List[str], text_columns: List[str], *, source: str
) -> pd.DataFrame:
    raw = df[columns].astype(object).where(df[columns].notna(), None)
    try:
        records = TypeAdapter(List[model]).validate_python(raw.to_dict(orient="records"))
    except ValidationError as exc:
        raise DataContractError(f"{source}: {exc.error_count()} invalid value(s)\n{exc}") from exc
    dumped = [r.model_dump() for r in records]
    # Text columns stay object dtype so missing values come back as None.
    return pd.DataFrame(
        {
            c: pd.Series([d[c] for d in dumped], dtype=object if c in text_columns else None)
            for c in columns
        },
        columns=columns,
    )


def load_sessions(path: Path = SESSIONS_PATH) -> pd.DataFrame:
    path = Path(path)
    df = pd.read_csv(path, dtype={c: "string" for c in SESSION_TEXT_COLUMNS})
    check_columns(df, SESSION_COLUMNS, source=path.name)
    sessions = _validate_rows(df, SessionRecord, SESSION_COLUMNS, SESSION_TEXT_COLUMNS, source=path.name)
    sessions["has_fee"] = sessions["has_fee"].astype(bool)
    logger.info("Loaded %d sessions from %s", len(sessions), path)
    return sessions


def load_talks(path: Path = TALKS_PATH) -> pd.DataFrame:
    path = Path(path)
    df = pd.read_csv(path, dtype={c: "string" for c in TALK_TEXT_COLUMNS})
    check_columns(df, TALK_COLUMNS, source=path.name)
    talks = _validate_rows(df, TalkRecord, TALK_COLUMNS, TALK_TEXT_COLUMNS, source=path.name)
    talks["has_fee"] = talks["has_fee"].astype(bool)
    logger.info("Loaded %d talks from %s", len(talks), path)
    return talks


@lru_cache(maxsize=4)
def _load_program_data_cached(files_sig: Tuple[Tuple[str, float], ...]) -> Dict[str, object]:
    (sessions_path, _), (talks_path, _) = files_sig
    sessions = load_sessions(Path(sessions_path))
    talks = load_talks(Path(talks_path))
    return {
        "files": [Path(sessions_path), Path(talks_path)],
        "sessions": sessions,
        "talks": talks,
        "sponsors": extract_sponsors(sessions["sponsor"]),
        "types": extract_types(sessions["type"]),
    }


def load_program_data(data_dir: Optional[Path] = None) -> Dict[str, object]:
    """Load both source tables once per file signature and derive the facet lists.

    The returned frames are shared between every browser session; callers filter
    copies and never write to them.
    """
    files = get_source_files(data_dir)
    missing = [str(f) for f in files if not f.exists()]
    if missing:
        raise FileNotFoundError(f"Program data file(s) not found: {', '.join(missing)}")
    return _load_program_data_cached(file_signature(files))
