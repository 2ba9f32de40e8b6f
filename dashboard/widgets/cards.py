# dashboard/widgets/cards.py
import streamlit as st

from dashboard.config import CHART_TITLES


def summary_row(summary):
    if summary is None:
        return
    cols = st.columns(4)
    for col, (label, value) in zip(cols, summary.display().items()):
        col.metric(label, value)


def status_banner(status, target=None):
    """Show status with the widget matching its kind; target defaults to the page (st)."""
    if status is None:
        return
    if target is None:
        target = st
    show = {"success": target.success, "error": target.error, "info": target.info}.get(status.kind, target.info)
    show(status.message)


def chart_grid(charts: dict):
    """Two charts per row, in CHART_TITLES order."""
    keys = [k for k in CHART_TITLES if k in charts]
    for i in range(0, len(keys), 2):
        cols = st.columns(2)
        for col, key in zip(cols, keys[i:i + 2]):
            with col:
                st.subheader(CHART_TITLES[key])
                st.altair_chart(charts[key], use_container_width=True)
