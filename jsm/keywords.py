from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd


logger = logging.getLogger(__name__)


class InvalidKeywordPattern(ValueError):
    def __init__(self, keyword: str, reason: str):
        super().__init__(f"Invalid keyword pattern {keyword!r}: {reason}")
        self.keyword = keyword
        self.reason = reason


def split_keywords(text: Optional[str]) -> List[str]:
    """Comma-separated free text -> trimmed keywords, blanks dropped."""
    if not text:
        return []
    return [k.strip() for k in str(text).split(",") if k.strip()]


def match_keywords(keywords: Iterable[str], titles: pd.Series) -> pd.Series:
    """Boolean mask of titles matching every keyword (case-insensitive regex search).

    No keywords means no constraint, so every row matches, missing titles
    included; a non-empty keyword never matches a missing title. Keywords are regular expressions, so menu
    patterns such as ``( R | R$)`` and user text share one code path; a user's
    ``.`` or ``+`` is regex syntax, not a literal.
    """
    patterns = [str(k).lower() for k in keywords] or [""]
    lowered = [t.lower() if isinstance(t, str) else None for t in titles]

    masks = []
    for pattern in patterns:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            logger.warning("Rejected keyword pattern %r: %s", pattern, exc)
            raise InvalidKeywordPattern(pattern, str(exc)) from exc
        masks.append(np.array([(compiled.search(t) is not None if t is not None else not pattern) for t in lowered], dtype=bool))

    return pd.Series(np.logical_and.reduce(masks), index=titles.index, dtype=bool)
