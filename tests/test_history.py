"""Tests for the history store and statistics."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from sentiscope.history.stats import compute_stats, records_frame, sentiment_timeline
from sentiscope.history.store import HistoryStore, RecordNotFoundError
from sentiscope.sentiment.types import SourcedResult


def _result(sentiment: str, confidence: float = 0.8) -> SourcedResult:
    value = {"positive": 1.5, "negative": -1.5}.get(sentiment, 0.0)
    return SourcedResult(sentiment=sentiment, score=value, confidence=confidence, source="local")


def test_add_assigns_ids_newest_first() -> None:
    store = HistoryStore()
    first = store.add("one", _result("positive"))
    second = store.add("two", _result("negative"))

    assert (first.id, second.id) == (1, 2)
    assert [r.id for r in store.list()] == [2, 1]
    assert first.timestamp.tzinfo is not None
    assert second.to_dict()["timestamp"] == second.timestamp.isoformat()


def test_store_is_capped() -> None:
    store = HistoryStore(max_records=3)
    for idx in range(5):
        store.add(f"text {idx}", _result("neutral"))

    assert len(store) == 3
    assert [r.id for r in store.all()] == [5, 4, 3]


def test_list_filter_and_limit() -> None:
    store = HistoryStore()
    for label in ["positive", "negative", "positive", "neutral", "positive"]:
        store.add(label, _result(label))

    assert [r.id for r in store.list(sentiment="positive")] == [5, 3, 1]
    assert [r.id for r in store.list(limit=2, sentiment="positive")] == [5, 3]
    assert len(store.list(sentiment="all")) == 5
    assert store.list(limit=0) == []
    with pytest.raises(ValueError):
        store.list(sentiment="happy")
    with pytest.raises(ValueError):
        store.list(limit=-1)


def test_get_and_delete() -> None:
    store = HistoryStore()
    record = store.add("hello", _result("neutral"))

    assert store.get(record.id) == record
    assert store.delete(record.id) == record
    assert len(store) == 0
    with pytest.raises(RecordNotFoundError):
        store.delete(record.id)
    with pytest.raises(KeyError):
        store.get(42)


def test_ids_are_not_reused_after_clear() -> None:
    store = HistoryStore()
    store.add("a", _result("neutral"))
    store.clear()

    assert store.add("b", _result("neutral")).id == 2


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        HistoryStore(max_records=0)


def test_compute_stats() -> None:
    store = HistoryStore()
    store.add("a", _result("positive", 0.9))
    store.add("b", _result("negative", 0.7))
    store.add("c", _result("positive", 0.5))

    stats = compute_stats(store.all())

    assert stats == {
        "total": 3,
        "positive": 2,
        "negative": 1,
        "neutral": 0,
        "average_confidence": pytest.approx(0.7),
    }


def test_compute_stats_empty() -> None:
    assert compute_stats([]) == {"total": 0, "positive": 0, "negative": 0, "neutral": 0, "average_confidence": 0.0}


def test_timeline_is_cumulative_and_chronological() -> None:
    store = HistoryStore()
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for offset, label in enumerate(["positive", "negative", "positive"]):
        store.add(label, _result(label), timestamp=start + timedelta(minutes=offset))

    frame = records_frame(store.all())
    timeline = sentiment_timeline(store.all())

    assert frame["id"].tolist() == [1, 2, 3]
    assert timeline["positive"].tolist() == [1, 1, 2]
    assert timeline["negative"].tolist() == [0, 1, 1]
    assert timeline["neutral"].tolist() == [0, 0, 0]
    assert sentiment_timeline([]).empty
