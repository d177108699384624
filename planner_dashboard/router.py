import streamlit as st

from planner_dashboard.constants import TAB_OPTIONS
from planner_dashboard.tabs.calendar_tab import render_calendar_tab
from planner_dashboard.tabs.finance_tab import render_finance_tab
from planner_dashboard.tabs.goals_tab import render_goals_tab
from planner_dashboard.tabs.health_tab import render_health_tab
from planner_dashboard.tabs.passwords_tab import render_passwords_tab
from planner_dashboard.tabs.planner_tab import render_planner_tab
from planner_dashboard.tabs.todos_tab import render_todos_tab

RENDERERS = {
    "Daily Planner": render_planner_tab,
    "Calendar": render_calendar_tab,
    "Todos": render_todos_tab,
    "Passwords": render_passwords_tab,
    "Goals": render_goals_tab,
    "Finance": render_finance_tab,
    "Health": render_health_tab,
}


def render_router(ctx):
    active = st.session_state.get("ui.active_tab", TAB_OPTIONS[0])
    active = st.segmented_control(
        "Workspace",
        TAB_OPTIONS,
        key="ui.active_tab",
        default=active,
    )
    _render_active(RENDERERS.get(active or TAB_OPTIONS[0], render_planner_tab), ctx)


@st.fragment
def _render_active(renderer, ctx):
    renderer(ctx)
