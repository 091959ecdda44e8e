"""Sentiment result data structures."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

SENTIMENT_LABELS = ("positive", "negative", "neutral")


@dataclass(frozen=True)
class AnalysisResult:
    sentiment: str
    score: float
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SourcedResult:
    """Analysis result tagged with the provider that produced it."""

    sentiment: str
    score: float
    confidence: float
    source: str
    provider_label: Optional[str] = None

    @classmethod
    def from_analysis(cls, result: AnalysisResult, source: str) -> "SourcedResult":
        return cls(
            sentiment=result.sentiment,
            score=result.score,
            confidence=result.confidence,
            source=source,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
