from datetime import datetime

import pytest

from calculator.history import CalculationHistory, HistoryEntry


def test_record_returns_entry_with_timestamp():
    history = CalculationHistory()
    entry = history.record("2+3", 5.0, note="  sum ", now=datetime(2024, 5, 17, 9, 30, 5))
    assert entry == HistoryEntry(expression="2+3", result=5.0, note="sum", timestamp="2024-05-17 09:30:05")
    assert history.latest() == entry
    assert len(history) == 1


def test_entries_are_newest_first():
    history = CalculationHistory()
    for expression in ("1", "2", "3"):
        history.record(expression, float(expression))
    assert [e.expression for e in history.entries()] == ["3", "2", "1"]


def test_oldest_entries_are_evicted_at_the_limit():
    history = CalculationHistory(limit=100)
    for i in range(105):
        history.record(str(i), float(i))
    assert len(history) == 100
    expressions = [e.expression for e in history.entries()]
    assert expressions[0] == "104"
    assert expressions[-1] == "5"


def test_resize_keeps_newest_entries():
    history = CalculationHistory(limit=5)
    for i in range(5):
        history.record(str(i), float(i))
    history.resize(2)
    assert [e.expression for e in history.entries()] == ["4", "3"]
    history.record("5", 5.0)
    assert [e.expression for e in history.entries()] == ["5", "4"]


def test_clear():
    history = CalculationHistory()
    history.record("1", 1.0)
    history.clear()
    assert len(history) == 0
    assert history.latest() is None
    assert history.entries() == []


@pytest.mark.parametrize("limit", [0, -1])
def test_limit_must_be_positive(limit):
    with pytest.raises(ValueError):
        CalculationHistory(limit=limit)
    with pytest.raises(ValueError):
        CalculationHistory().resize(limit)
