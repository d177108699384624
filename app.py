import logging
import os

import streamlit as st

from planner_dashboard.context import DashboardContext
from planner_dashboard.data import api_client
from planner_dashboard.data.query_client import QueryClient
from planner_dashboard.header import check_backend, render_global_header
from planner_dashboard.logging_config import configure_logging
from planner_dashboard.router import render_router
from planner_dashboard.state import session_slices

ENV_FALLBACK_KEYS = {
    ("app", "API_BASE_URL"): "API_BASE_URL",
}

BASE_CSS = """
<style>
.section-title { font-size: 1.35rem; font-weight: 700; margin: 0.5rem 0 0.75rem; }
.sticky-header-wrap { position: sticky; top: 0; z-index: 10; }
</style>
"""

configure_logging()
logger = logging.getLogger("planner_dashboard")

st.set_page_config(page_title="Life Planner", layout="wide")
st.markdown(BASE_CSS, unsafe_allow_html=True)


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    current = st.secrets
    for key in path:
        try:
            if key not in current:
                return default
            current = current[key]
        except (KeyError, FileNotFoundError):
            return default
    return current


api_client.configure(get_secret)
client = session_slices.get_query_client(QueryClient)

context = DashboardContext(
    client=client,
    api_base_url=api_client.api_base_url(),
    extras={"backend_ok": check_backend()},
)

render_global_header(context)
render_router(context)
