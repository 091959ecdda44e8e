"""REST API for sentiment analysis, history and statistics."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from sentiscope.history.stats import compute_stats
from sentiscope.history.store import DEFAULT_MAX_RECORDS, HistoryStore, RecordNotFoundError
from sentiscope.providers.chain import FallbackAnalyzer, build_analyzer

logger = logging.getLogger(__name__)


class AnalyzeIn(BaseModel):
    text: str = ""


def create_app(
    cfg: Optional[Dict[str, Any]] = None,
    analyzer: Optional[FallbackAnalyzer] = None,
    store: Optional[HistoryStore] = None,
) -> FastAPI:
    cfg = cfg or {}
    api_cfg = cfg.get("api") or {}
    history_cfg = cfg.get("history") or {}

    if analyzer is None:
        analyzer = build_analyzer(cfg)
    if store is None:
        store = HistoryStore(max_records=int(history_cfg.get("max_records", DEFAULT_MAX_RECORDS)))
    default_limit = int(history_cfg.get("default_limit", 50))

    app = FastAPI(title="SentiScope API", version="0.1.0")
    app.state.analyzer = analyzer
    app.state.store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_cfg.get("allowed_origins") or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> Dict[str, str]:
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.post("/api/sentiment/analyze")
    def analyze_sentiment(body: AnalyzeIn) -> Dict[str, Any]:
        if not body.text or not body.text.strip():
            raise HTTPException(status_code=400, detail="Text is required")
        try:
            result = analyzer.analyze(body.text)
        except Exception:
            logger.exception("Analysis failed")
            raise HTTPException(status_code=500, detail="Failed to analyze sentiment")
        record = store.add(body.text, result)
        return record.to_dict()

    @app.get("/api/sentiment/history")
    def get_history(
        limit: int = Query(default_limit, ge=0),
        sentiment: str = Query("all", alias="filter"),
    ) -> List[Dict[str, Any]]:
        try:
            records = store.list(limit=limit, sentiment=sentiment)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return [r.to_dict() for r in records]

    @app.delete("/api/sentiment/history/{record_id}")
    def delete_analysis(record_id: int) -> Dict[str, str]:
        try:
            store.delete(record_id)
        except RecordNotFoundError:
            raise HTTPException(status_code=404, detail="Analysis not found")
        return {"message": "Analysis deleted successfully"}

    @app.get("/api/sentiment/stats")
    def get_stats() -> Dict[str, Any]:
        return compute_stats(store.all())

    return app
