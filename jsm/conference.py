from __future__ import annotations

from datetime import date
from typing import Dict, List, Tuple

CONF_NAME = "JSM 2019"
CONF_START = date(2019, 7, 26)

# Conference week runs Friday through Thursday.
DAY_CODES: Tuple[str, ...] = ("Fri", "Sat", "Sun", "Mon", "Tue", "Wed", "Thu")
DAY_CHOICES: Dict[str, str] = {
    "Fri, Jul 26": "Fri",
    "Sat, Jul 27": "Sat",
    "Sun, Jul 28": "Sun",
    "Mon, Jul 29": "Mon",
    "Tue, Jul 30": "Tue",
    "Wed, Jul 31": "Wed",
    "Thu, Aug 1": "Thu",
}
DEFAULT_DAY = "Sun"

TIME_MIN = 7
TIME_MAX = 23
DEFAULT_TIME_RANGE: Tuple[int, int] = (8, 18)

DEFAULT_SPONSORS: List[str] = [
    "Section on Statistics and Data Science Education",
    "Section on Statistical Computing",
    "Section on Statistical Graphics",
]

SPONSOR_SEPARATOR = ", "

TALK_KEYWORD_CHOICES: Dict[str, str] = {
    "R": "( R | R$)",
    "tidy": "tidy",
    "Shiny": "shiny",
    "RStudio": "(RStudio|R Studio)",
    "Python": "python",
    "data science": "data science",
    "education": "education",
    "teaching": "teaching",
}
DEFAULT_TALK_KEYWORDS: List[str] = ["( R | R$)"]

PROGRAM_URL = "https://ww2.amstat.org/meetings/jsm/2019/onlineprogram/index.cfm"
