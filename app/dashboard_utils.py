"""Helpers turning history records into dashboard tables."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from sentiscope.history.stats import records_frame
from sentiscope.history.store import HistoryRecord

LABEL_MAP = {
    "positive": "🟢 Positive",
    "neutral": "🟡 Neutral",
    "negative": "🔴 Negative",
}


def display_label(value: object) -> str:
    key = str(value or "").strip().lower()
    return LABEL_MAP.get(key, "🟡 Neutral")


def history_table(records: Iterable[HistoryRecord]) -> pd.DataFrame:
    """Newest-first table with display labels and rounded numbers."""
    df = records_frame(records)
    if df.empty:
        return pd.DataFrame(columns=["id", "time", "sentiment", "score", "confidence", "source", "text"])
    df = df.sort_values(by="id", ascending=False)
    out = pd.DataFrame(
        {
            "id": df["id"],
            "time": df["timestamp"].dt.strftime("%Y-%m-%d %H:%M:%S"),
            "sentiment": df["sentiment"].map(display_label),
            "score": df["score"].astype(float).round(3),
            "confidence": (df["confidence"].astype(float) * 100).round(1).astype(str) + "%",
            "source": df["source"],
            "text": df["text"],
        }
    )
    return out.reset_index(drop=True)
