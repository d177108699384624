import calendar
from datetime import date

import streamlit as st

from planner_dashboard.constants import MONTH_NAMES
from planner_dashboard.data import repositories
from planner_dashboard.metrics import cycle_habit_cell, progress_percent, tracking_for_cell
from planner_dashboard.tabs.common import call_api, section_title

LEGEND_ICONS = ["CheckCircle", "X", "Minus", "Circle", "Star", "Heart"]


def _render_goal_form(client):
    with st.expander("New goal"):
        with st.form("goals.create", clear_on_submit=True):
            title = st.text_input("Title")
            category = st.text_input("Category", value="Personal")
            description = st.text_area("Description", height=68)
            cols = st.columns(3)
            target = cols[0].number_input("Target", min_value=0, value=0)
            unit = cols[1].text_input("Unit")
            start = cols[2].date_input("Start", value=date.today())
            if st.form_submit_button("Add goal") and title and category:
                payload = {
                    "title": title,
                    "category": category,
                    "description": description or None,
                    "targetValue": int(target) or None,
                    "unit": unit or None,
                    "startDate": start.isoformat(),
                }
                call_api(repositories.create_goal, client, payload, success="Goal added")


def _render_legend_form(client, legends):
    st.markdown("**Legend**")
    for legend in legends:
        cols = st.columns([6, 1])
        cols[0].markdown(
            f"<span style='color:{legend['color']}'>■</span> {legend['label']} <small>{legend['iconKey']}</small>",
            unsafe_allow_html=True,
        )
        if cols[1].button("Delete", key=f"goals.legend_delete.{legend['id']}"):
            call_api(repositories.delete_habit_legend, client, legend["id"], success="Legend deleted")
            st.rerun()
    with st.expander("New legend item"):
        with st.form("goals.legend", clear_on_submit=True):
            label = st.text_input("Label")
            icon_key = st.text_input("Key")
            icon = st.selectbox("Icon", LEGEND_ICONS)
            color = st.color_picker("Color", "#10B981")
            if st.form_submit_button("Add legend") and label and icon_key:
                call_api(
                    repositories.create_habit_legend,
                    client,
                    {"iconKey": icon_key, "label": label, "icon": icon, "color": color},
                    success="Legend added",
                )


def _render_grid(client, goals, tracking, legends, month, year):
    legend_by_key = {legend["iconKey"]: legend for legend in legends}
    days = calendar.monthrange(year, month)[1]
    for goal in goals:
        st.markdown(f"**{goal['title']}**")
        cols = st.columns(min(days, 16))
        for day in range(1, days + 1):
            day_iso = f"{year}-{month:02d}-{day:02d}"
            current = tracking_for_cell(tracking, goal["id"], day_iso)
            legend = legend_by_key.get(current.get("iconKey")) if current else None
            label = f"{day}" if legend is None else f"{day} {legend['label'][:1]}"
            if cols[(day - 1) % len(cols)].button(label, key=f"goals.cell.{goal['id']}.{day_iso}", help=legend["label"] if legend else None):
                payload = cycle_habit_cell(tracking, legends, goal["id"], day_iso)
                if payload:
                    call_api(repositories.create_habit_tracking, client, payload)
                    st.rerun()


def _render_goal_row(client, goal):
    goal_id = goal["id"]
    cols = st.columns([4, 2, 1, 1])
    if goal.get("targetValue"):
        percent = progress_percent(goal.get("currentValue"), goal.get("targetValue"))
        cols[0].progress(min(percent, 100) / 100, text=f"{goal['title']} · {percent}%")
    else:
        cols[0].markdown(f"**{goal['title']}**")
    current = cols[1].number_input(
        "Current",
        min_value=0,
        value=int(goal.get("currentValue") or 0),
        key=f"goals.current.{goal_id}",
        label_visibility="collapsed",
    )
    if cols[2].button("Save", key=f"goals.save.{goal_id}") and int(current) != int(goal.get("currentValue") or 0):
        call_api(repositories.update_goal, client, goal_id, {"currentValue": int(current)}, success="Goal updated")
        st.rerun()
    if cols[3].button("Delete", key=f"goals.delete.{goal_id}"):
        call_api(repositories.delete_goal, client, goal_id, success="Goal deleted")
        st.rerun()


def render_goals_tab(ctx):
    client = ctx.client
    section_title("Goals")
    _render_goal_form(client)

    goals = call_api(repositories.list_goals, client, default=[])
    for goal in goals:
        _render_goal_row(client, goal)

    today = ctx.today
    cols = st.columns(2)
    month = cols[0].selectbox("Month", range(1, 13), index=today.month - 1, format_func=lambda m: MONTH_NAMES[m - 1], key="goals.month")
    year = int(cols[1].number_input("Year", min_value=2000, max_value=2100, value=today.year, key="goals.year"))

    tracking = call_api(repositories.list_habit_tracking, client, month, year, default=[])
    legends = call_api(repositories.list_habit_legends, client, default=[])
    _render_legend_form(client, legends)
    _render_grid(client, [goal for goal in goals if goal.get("isActive", True)], tracking, legends, month, year)
