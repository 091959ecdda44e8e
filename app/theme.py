"""Shared dashboard theme helpers."""

from __future__ import annotations

import streamlit as st

PAGE_TITLE = "SentiScope: Sentiment Dashboard"
LABEL_COLORS = {"positive": "#10B981", "negative": "#EF4444", "neutral": "#6B7280"}


def apply_theme() -> None:
    """Inject dashboard CSS."""
    st.markdown(
        """
        <style>
        :root {
            --ss-surface: #F9FAFB;
            --ss-border: rgba(107, 114, 128, 0.25);
            --ss-positive: #10B981;
            --ss-negative: #EF4444;
            --ss-neutral: #6B7280;
        }
        [data-testid="stMetric"] {
            background-color: var(--ss-surface);
            border: 1px solid var(--ss-border);
            border-radius: 12px;
            padding: 12px;
        }
        [data-testid="stDataFrame"] {
            border: 1px solid var(--ss-border);
            border-radius: 12px;
        }
        .ss-badge {
            padding: 4px 10px;
            border-radius: 999px;
            font-size: 12px;
            letter-spacing: 0.08em;
            text-transform: uppercase;
            color: #FFFFFF;
            white-space: nowrap;
        }
        .ss-badge-positive { background-color: var(--ss-positive); }
        .ss-badge-negative { background-color: var(--ss-negative); }
        .ss-badge-neutral { background-color: var(--ss-neutral); }
        .stButton > button {
            width: 100%;
            border-radius: 10px;
            font-weight: 600;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def sentiment_badge(label: str) -> str:
    label = (label or "neutral").lower()
    return f'<span class="ss-badge ss-badge-{label}">{label}</span>'


def render_sidebar_branding(source_names: list[str]) -> None:
    st.sidebar.markdown("### SentiScope")
    if source_names:
        st.sidebar.caption("Remote providers: " + ", ".join(source_names))
    else:
        st.sidebar.caption("Remote providers: none (local lexicon scorer)")
    st.sidebar.markdown("---")
