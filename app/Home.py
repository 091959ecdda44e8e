"""SentiScope Streamlit dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st
import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from dashboard_utils import history_table
from theme import LABEL_COLORS, PAGE_TITLE, apply_theme, render_sidebar_branding, sentiment_badge

from sentiscope.history.stats import compute_stats, sentiment_timeline
from sentiscope.history.store import DEFAULT_MAX_RECORDS, HistoryStore
from sentiscope.providers.chain import build_analyzer

DEFAULT_CONFIG = PROJECT_ROOT / "configs" / "config.yaml"


@st.cache_data
def load_config(config_path: Path) -> dict:
    path = config_path if config_path.is_absolute() else PROJECT_ROOT / config_path
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _store(cfg: dict) -> HistoryStore:
    if "history" not in st.session_state:
        history_cfg = cfg.get("history") or {}
        st.session_state["history"] = HistoryStore(int(history_cfg.get("max_records", DEFAULT_MAX_RECORDS)))
    return st.session_state["history"]


def render_input(cfg: dict, store: HistoryStore) -> None:
    analyzer = build_analyzer(cfg)
    render_sidebar_branding([p.name for p in analyzer.providers])

    text = st.text_area(
        "Text to analyze",
        placeholder="Try 'I love this product!', 'This is terrible service.' or 'I feel neutral about this movie.'",
    )
    col_analyze, col_clear = st.columns(2)
    if col_analyze.button("Analyze"):
        if not text.strip():
            st.error("Please enter some text to analyze")
        else:
            record = store.add(text, analyzer.analyze(text))
            st.markdown(
                f"{sentiment_badge(record.sentiment)} score {record.score:.3f}, "
                f"confidence {record.confidence:.0%} via {record.source}",
                unsafe_allow_html=True,
            )
    if col_clear.button("Clear history"):
        store.clear()


def render_stats(store: HistoryStore) -> None:
    records = store.all()
    stats = compute_stats(records)
    cols = st.columns(5)
    cols[0].metric("Total", stats["total"])
    for col, label in zip(cols[1:4], ("positive", "negative", "neutral")):
        share = f"{stats[label] / stats['total']:.1%}" if stats["total"] else "0%"
        col.metric(label.title(), stats[label], share)
    cols[4].metric("Avg confidence", f"{stats['average_confidence']:.0%}")

    if not records:
        return
    chart_left, chart_right = st.columns(2)
    distribution = pd.DataFrame(
        {"count": [stats[label] for label in LABEL_COLORS]},
        index=[label.title() for label in LABEL_COLORS],
    )
    chart_left.bar_chart(distribution)
    timeline = sentiment_timeline(records).set_index("index")
    chart_right.area_chart(timeline, color=[LABEL_COLORS[c] for c in timeline.columns])


def render_history(store: HistoryStore) -> None:
    st.subheader("History")
    choice = st.selectbox("Filter", ["all", "positive", "negative", "neutral"])
    records = store.list(limit=store.max_records, sentiment=choice)
    st.dataframe(history_table(records), use_container_width=True, hide_index=True)

    if records:
        to_delete = st.selectbox("Delete analysis", [r.id for r in records])
        if st.button("Delete"):
            store.delete(to_delete)
            st.rerun()


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    apply_theme()
    st.title(PAGE_TITLE)

    cfg = load_config(DEFAULT_CONFIG)
    store = _store(cfg)
    render_input(cfg, store)
    render_stats(store)
    render_history(store)


if __name__ == "__main__":
    main()
