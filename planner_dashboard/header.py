import logging

import requests
import streamlit as st

from planner_dashboard.data import api_client

logger = logging.getLogger(__name__)


def render_global_header(ctx):
    st.markdown("<div class='sticky-header-wrap'>", unsafe_allow_html=True)
    cols = st.columns([4, 1])
    cols[0].markdown("## Life Planner")
    cols[0].caption(ctx.today.strftime("%A, %B %d, %Y"))
    if not ctx.get("backend_ok", True):
        cols[1].warning(f"API offline ({ctx.api_base_url})")
    st.markdown("</div>", unsafe_allow_html=True)


def check_backend():
    try:
        return api_client.request("GET", "/health", timeout=3) == {"ok": True}
    except (api_client.ApiError, requests.RequestException) as exc:
        logger.warning("Health check failed: %s", exc)
        return False
