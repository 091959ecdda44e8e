"""Batch sentiment scoring over tabular text data."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pandas as pd

from sentiscope.sentiment.lexicon import build_lexicon_config
from sentiscope.sentiment.scoring import score
from sentiscope.sentiment.types import SENTIMENT_LABELS


def load_texts_csv(path: Path | str, text_col: str) -> pd.DataFrame:
    """Load a CSV of texts and drop rows with empty text."""
    df = pd.read_csv(path)
    df.columns = [str(c).strip() for c in df.columns]

    if text_col not in df.columns:
        raise ValueError(f"text column '{text_col}' not found")

    df = df.dropna(subset=[text_col])
    df[text_col] = df[text_col].astype(str).str.strip()
    df = df[df[text_col] != ""]
    return df.reset_index(drop=True)


def add_sentiment(df: pd.DataFrame, cfg: Dict[str, Any]) -> pd.DataFrame:
    """Add sentiment label, score and confidence columns."""
    sentiment_cfg = cfg.get("sentiment") or {}
    text_col = sentiment_cfg.get("text_column", "text")
    lexicon = build_lexicon_config(cfg)

    df = df.copy()
    results = df[text_col].astype(str).apply(lambda text: score(text, lexicon))
    df["sentiment_label"] = results.map(lambda r: r.sentiment)
    df["sentiment_score"] = results.map(lambda r: r.score)
    df["sentiment_confidence"] = results.map(lambda r: r.confidence)
    return df


def label_summary(df: pd.DataFrame) -> Dict[str, Any]:
    """Count rows per label and average the confidence."""
    counts = df["sentiment_label"].value_counts() if not df.empty else pd.Series(dtype="int64")
    summary: Dict[str, Any] = {"total": int(len(df))}
    for label in SENTIMENT_LABELS:
        summary[label] = int(counts.get(label, 0))
    summary["average_confidence"] = float(df["sentiment_confidence"].mean()) if not df.empty else 0.0
    return summary
