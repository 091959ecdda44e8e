"""Statistics over stored analysis results."""

from __future__ import annotations

from typing import Any, Dict, Iterable

import pandas as pd

from sentiscope.history.store import HistoryRecord
from sentiscope.sentiment.types import SENTIMENT_LABELS


def records_frame(records: Iterable[HistoryRecord]) -> pd.DataFrame:
    """Flatten records into a DataFrame ordered oldest first."""
    rows = [r.to_dict() for r in records]
    columns = ["id", "text", "sentiment", "score", "confidence", "source", "timestamp", "provider_label"]
    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(rows, columns=columns)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    return df.sort_values(by=["timestamp", "id"], kind="stable").reset_index(drop=True)


def compute_stats(records: Iterable[HistoryRecord]) -> Dict[str, Any]:
    """Count records per label and average their confidence."""
    df = records_frame(records)
    counts = df["sentiment"].value_counts()
    stats: Dict[str, Any] = {"total": int(len(df))}
    for label in SENTIMENT_LABELS:
        stats[label] = int(counts.get(label, 0))
    stats["average_confidence"] = float(df["confidence"].astype(float).mean()) if not df.empty else 0.0
    return stats


def sentiment_timeline(records: Iterable[HistoryRecord]) -> pd.DataFrame:
    """Cumulative per-label counts after each record, in chronological order."""
    df = records_frame(records)
    timeline = pd.DataFrame({"index": range(1, len(df) + 1)})
    for label in SENTIMENT_LABELS:
        timeline[label] = (df["sentiment"] == label).astype(int).cumsum().to_numpy()
    return timeline
