from dataclasses import replace

import pandas as pd

from jsm.filters import SessionFilters
from jsm.sessions import compute_schedule, decorate_sessions, filter_sessions, match_sponsors


ALL_HOURS = (7, 23)


def test_no_day_selected_is_not_ready(sessions):
    filters = SessionFilters(days=[], time_range=ALL_HOURS, sponsors=["Biometrics Section"], keyword_text="shiny")
    assert filter_sessions(sessions, filters) is None


def test_not_ready_payload(program_ctx):
    payload = compute_schedule(SessionFilters(), program_ctx)
    assert payload["ready"] is False
    assert payload["rows"] == []


def test_single_day_without_other_constraints_keeps_source_order(sessions):
    out = filter_sessions(sessions, SessionFilters(days=["Fri"], time_range=ALL_HOURS))
    expected = sessions[sessions["day"] == "Fri"]
    assert out.index.tolist() == expected.index.tolist()
    assert out["session"].tolist() == ["Tidy Data Science with R", "Opening Mixer", "Computing Tools for Trials"]


def test_time_window_rejects_partial_overlap(sessions):
    out = filter_sessions(sessions, SessionFilters(days=["Sun"], time_range=(8, 18)))
    assert "Late Night Computing Hack" not in out["session"].tolist()
    assert out["session"].tolist() == ["Teaching R to Beginners", "Survival Models"]


def test_time_window_is_inclusive(sessions):
    out = filter_sessions(sessions, SessionFilters(days=["Fri"], time_range=(8, 17)))
    assert out["session"].tolist() == ["Tidy Data Science with R", "Computing Tools for Trials"]


def test_exclude_fee_drops_fee_rows(sessions):
    filters = SessionFilters(
        days=["Fri"],
        time_range=(8, 18),
        sponsors=["Section on Statistical Computing"],
        keyword_text="tidy",
    )
    assert filter_sessions(sessions, filters)["session"].tolist() == ["Tidy Data Science with R"]

    excluded = replace(filters, exclude_fee=True)
    assert filter_sessions(sessions, excluded).empty


def test_sponsor_match_is_disjunctive(sessions):
    filters = SessionFilters(
        days=["Fri", "Sat", "Sun"],
        time_range=ALL_HOURS,
        sponsors=["Section on Statistical Graphics", "Section on Physical and Engineering Sciences"],
    )
    out = filter_sessions(sessions, filters)
    assert out["session"].tolist() == ["Shiny Dashboards in Practice"]


def test_match_sponsors_any_of_selected():
    cells = pd.Series(["A, C", "C", "B", None])
    assert match_sponsors(cells, ["A", "B"]).tolist() == [True, False, True, False]


def test_match_sponsors_empty_selection_matches_all():
    cells = pd.Series(["A, C", None])
    assert match_sponsors(cells, []).tolist() == [True, True]


def test_match_sponsors_treats_names_literally():
    cells = pd.Series(["Section on Risk Analysis (SRA)", "Section on Risk Analysis"])
    assert match_sponsors(cells, ["(SRA)"]).tolist() == [True, False]


def test_type_selection(sessions):
    filters = SessionFilters(days=["Sat", "Sun"], time_range=ALL_HOURS, types=["Invited Papers", "Contributed Papers"])
    out = filter_sessions(sessions, filters)
    assert out["session"].tolist() == ["Shiny Dashboards in Practice", "Survival Models"]


def test_title_keywords(sessions):
    filters = SessionFilters(days=["Fri", "Sat", "Sun"], time_range=ALL_HOURS, keyword_text="computing, trials")
    out = filter_sessions(sessions, filters)
    assert out["session"].tolist() == ["Computing Tools for Trials"]


def test_zero_rows_is_not_an_error(sessions):
    out = filter_sessions(sessions, SessionFilters(days=["Thu"], time_range=ALL_HOURS))
    assert out is not None
    assert out.empty


def test_filter_does_not_mutate_source(sessions):
    before = sessions.copy()
    out = filter_sessions(sessions, SessionFilters(days=["Fri"], time_range=ALL_HOURS, exclude_fee=True))
    decorate_sessions(out)
    pd.testing.assert_frame_equal(sessions, before)


def test_decorate_sessions_projection(sessions):
    out = decorate_sessions(sessions.iloc[[1]])
    assert out.columns.tolist() == ["date_time", "session", "location", "type", "sponsor"]
    row = out.iloc[0]
    assert row["date_time"] == "Fri, Jul 26<br/>6:00 PM - 8:00 PM"
    assert row["session"] == '<a href="https://example.org/s2" target="_blank">Opening Mixer</a>'


def test_compute_schedule_payload(program_ctx):
    filters = SessionFilters(days=["Sun"], time_range=(8, 18))
    payload = compute_schedule(filters, program_ctx)
    assert payload["ready"] is True
    assert payload["row_count"] == 2
    assert payload["filters"]["days"] == ["Sun"]
    assert payload["export"]["session"].tolist() == ["Teaching R to Beginners", "Survival Models"]
    assert "encoding" in payload["charts"]["sessions_by_hour"]


def test_compute_schedule_empty_result_has_no_chart(program_ctx):
    payload = compute_schedule(SessionFilters(days=["Thu"]), program_ctx)
    assert payload["ready"] is True
    assert payload["row_count"] == 0
    assert payload["charts"] == {}


def test_compute_schedule_grid_keeps_link_separate(program_ctx):
    payload = compute_schedule(SessionFilters(days=["Sun"], time_range=(8, 18)), program_ctx)
    grid = payload["grid"]
    assert grid.columns.tolist() == ["date_time", "session", "location", "type", "sponsor", "url"]
    assert grid.iloc[0]["date_time"] == "Sun, Jul 28 2:00 PM - 3:50 PM"
    assert grid.iloc[0]["session"] == "Teaching R to Beginners"
    assert grid.iloc[0]["url"] == "https://example.org/s4"
