# dashboard/main.py
# streamlit run dashboard/main.py
import logging

import streamlit as st

from dashboard.data import fetch_analytics_data
from dashboard.render import RenderContext, RefreshControl, load_data
from dashboard.widgets import summary_row, status_banner, chart_grid

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="Barocci Analytics", layout="wide")
st.title("📊 Barocci Analytics")

control: RefreshControl = st.session_state.setdefault("refresh_control", RefreshControl())

# First visit loads immediately, with the button already locked
if "render_ctx" not in st.session_state:
    control.disabled = True


def _request_refresh():
    # Runs before the rerun, so the button below is drawn disabled for the whole fetch
    control.disabled = True


header_left, header_right = st.columns([4, 1])
with header_right:
    st.button("🔄 Refresh", disabled=control.disabled, on_click=_request_refresh, use_container_width=True)

if control.disabled:
    status_slot = st.empty()
    with st.spinner("Loading…"):
        st.session_state.render_ctx = load_data(
            st.session_state.get("render_ctx", RenderContext()),
            control,
            fetch=fetch_analytics_data,
            on_status=lambda s: status_banner(s, status_slot),
        )
    # load_data re-enabled the control; redraw so the button shows it
    st.rerun()

ctx: RenderContext = st.session_state.render_ctx

with header_left:
    st.caption(f"Last updated: {ctx.last_updated or '–'}")

status_banner(ctx.status)
summary_row(ctx.summary)
chart_grid(ctx.charts)
