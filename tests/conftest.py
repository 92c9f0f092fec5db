import pandas as pd
import pytest


SESSION_ROWS = [
    # day, date, time, beg, end, sponsor, type, session, location, url, has_fee
    ("Fri", "Jul 26", "8:00 AM - 5:00 PM", 8, 17, "Section on Statistical Computing", "Professional Development Continuing Education Course", "Tidy Data Science with R", "CC-101", "https://example.org/s1", True),
    ("Fri", "Jul 26", "6:00 PM - 8:00 PM", 18, 20, "JSM Partner Societies", "Other", "Opening Mixer", "Hotel Ballroom", "https://example.org/s2", False),
    ("Sat", "Jul 27", "9:00 AM - 5:00 PM", 9, 17, "Section on Statistical Graphics, Section on Statistical Computing", "Invited Papers", "Shiny Dashboards in Practice", "CC-102", "https://example.org/s3", False),
    ("Sun", "Jul 28", "2:00 PM - 3:50 PM", 14, 15.83, "Section on Statistics and Data Science Education", "Topic Contributed Papers", "Teaching R to Beginners", "CC-103", "https://example.org/s4", False),
    ("Sun", "Jul 28", "8:30 AM - 10:20 AM", 8.5, 10.33, "Biometrics Section", "Contributed Papers", "Survival Models", "CC-104", "https://example.org/s5", False),
    ("Sun", "Jul 28", "8:00 AM - 12:00 AM", 8, 24, "Section on Statistical Computing", "Contributed Posters", "Late Night Computing Hack", "CC-105", "https://example.org/s6", False),
    ("Fri", "Jul 26", "9:00 AM - 12:00 PM", 9, 12, "Section on Statistical Computing, Biometrics Section", "Invited Panel", "Computing Tools for Trials", "CC-106", "https://example.org/s7", False),
]

TALK_ROWS = [
    ("Teaching Shiny in Statistics Education", "https://example.org/t1", False),
    ("Shiny Apps for Clinical Trials", "https://example.org/t2", False),
    ("Statistics Education Research", "https://example.org/t3", False),
    ("A Gentle Introduction to R", "https://example.org/t4", True),
    ("Python and R for Data Science", "https://example.org/t5", False),
    ("Shiny Tools for Education Workshops", "https://example.org/t6", True),
]


@pytest.fixture
def sessions():
    cols = ["day", "date", "time", "beg_time_round", "end_time_round", "sponsor", "type", "session", "location", "url", "has_fee"]
    df = pd.DataFrame(SESSION_ROWS, columns=cols)
    df["beg_time_round"] = df["beg_time_round"].astype(float)
    df["end_time_round"] = df["end_time_round"].astype(float)
    return df


@pytest.fixture
def talks():
    return pd.DataFrame(TALK_ROWS, columns=["title", "url", "has_fee"])


@pytest.fixture
def program_ctx(sessions, talks):
    return {"sessions": sessions, "talks": talks}
