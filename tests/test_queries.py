from __future__ import annotations

from src.hr_dashboard.hr_dashboard.common.queries import count_by, filter_by_text, percent, sum_by, total

ROWS = [
    {"name": "Alice", "dept": "IT", "pay": 10},
    {"name": "bob", "dept": None, "pay": 5},
    {"name": "Carol", "dept": "IT", "pay": 7},
    {"name": "Dave", "dept": "", "pay": 1},
]


def test_filter_by_text_is_case_insensitive_and_keeps_order():
    assert [r["name"] for r in filter_by_text(ROWS, "O", "name")] == ["bob", "Carol"]
    assert [r["name"] for r in filter_by_text(ROWS, "it", "name", "dept")] == ["Alice", "Carol"]


def test_filter_by_text_empty_query_returns_everything():
    assert filter_by_text(ROWS, "", "name") == ROWS
    assert filter_by_text(ROWS, None, "name") == ROWS


def test_filter_accepts_callables():
    assert filter_by_text(ROWS, "ve", lambda r: r["name"]) == [ROWS[3]]


def test_grouping_keeps_empty_keys_as_their_own_group():
    assert count_by(ROWS, "dept") == {"IT": 2, "": 2}
    assert sum_by(ROWS, "dept", "pay") == {"IT": 17, "": 6}


def test_total_and_percent():
    assert total(ROWS, "pay") == 23
    assert percent(9, 10) == 90
    assert percent(41, 50) == 82
    assert percent(1, 8) == 13
    assert percent(1, 3) == 33
    assert percent(5, 0) == 0


def test_filter_by_text_keeps_whitespace_in_query():
    assert [r["name"] for r in filter_by_text(ROWS, "carol ", "name")] == []
    assert [r["name"] for r in filter_by_text(ROWS, " ", "name")] == []
