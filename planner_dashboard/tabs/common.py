import logging

import requests
import streamlit as st

from planner_dashboard.data.api_client import ApiError

logger = logging.getLogger(__name__)


def call_api(fn, *args, default=None, success=None, **kwargs):
    """Run one repository call; API failures become a toast and ``default``."""
    try:
        result = fn(*args, **kwargs)
    except ApiError as exc:
        st.toast(exc.message, icon="⚠️")
        return default
    except requests.RequestException as exc:
        logger.warning("API unreachable: %s", exc)
        st.toast("Planner API unreachable", icon="⚠️")
        return default
    if success:
        st.toast(success)
    return result


def section_title(text):
    st.markdown(f"<div class='section-title'>{text}</div>", unsafe_allow_html=True)


def money(value):
    try:
        return f"${float(value):,.2f}"
    except (TypeError, ValueError):
        return "$0.00"
