"""Bounded in-memory history of analysis results."""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sentiscope.sentiment.types import SENTIMENT_LABELS, SourcedResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 100


class RecordNotFoundError(KeyError):
    """Raised when a history id does not exist."""


@dataclass(frozen=True)
class HistoryRecord:
    id: int
    text: str
    sentiment: str
    score: float
    confidence: float
    source: str
    timestamp: datetime
    provider_label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


class HistoryStore:
    """Newest-first store capped at ``max_records`` entries."""

    def __init__(self, max_records: int = DEFAULT_MAX_RECORDS) -> None:
        if max_records < 1:
            raise ValueError("max_records must be at least 1")
        self.max_records = max_records
        self._records: List[HistoryRecord] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def add(self, text: str, result: SourcedResult, timestamp: datetime | None = None) -> HistoryRecord:
        with self._lock:
            record = HistoryRecord(
                id=next(self._ids),
                text=text,
                sentiment=result.sentiment,
                score=result.score,
                confidence=result.confidence,
                source=result.source,
                timestamp=timestamp or datetime.now(timezone.utc),
                provider_label=result.provider_label,
            )
            self._records.insert(0, record)
            if len(self._records) > self.max_records:
                evicted = self._records[self.max_records :]
                del self._records[self.max_records :]
                logger.debug("Evicted %d history records", len(evicted))
        return record

    def list(self, limit: int = 50, sentiment: str | None = None) -> List[HistoryRecord]:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if sentiment not in (None, "all") and sentiment not in SENTIMENT_LABELS:
            raise ValueError(f"Unknown sentiment filter: {sentiment}")
        with self._lock:
            records = list(self._records)
        if sentiment not in (None, "all"):
            records = [r for r in records if r.sentiment == sentiment]
        return records[:limit]

    def get(self, record_id: int) -> HistoryRecord:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        raise RecordNotFoundError(record_id)

    def delete(self, record_id: int) -> HistoryRecord:
        with self._lock:
            for idx, record in enumerate(self._records):
                if record.id == record_id:
                    del self._records[idx]
                    logger.debug("Deleted history record %d", record_id)
                    return record
        raise RecordNotFoundError(record_id)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def all(self) -> List[HistoryRecord]:
        with self._lock:
            return list(self._records)
