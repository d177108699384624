from datetime import date

import streamlit as st

from planner_dashboard.constants import DEFAULT_MEETING_COLOR
from planner_dashboard.data import repositories
from planner_dashboard.tabs.common import call_api, section_title
from planner_dashboard.timeline import add_minutes_to_time, format_time


def render_calendar_tab(ctx):
    section_title("Calendar")
    selected_day = st.date_input("Day", key="calendar.selected_date", value=date.today())
    # Google Calendar sync is not wired up.
    st.button("Sync Google Calendar", key="calendar.sync", disabled=True)

    meetings = call_api(repositories.list_meetings, ctx.client, selected_day, default=[])
    if not meetings:
        st.info("No meetings on this day.")
        return
    for meeting in sorted(meetings, key=lambda m: m["startTime"]):
        color = meeting.get("color") or DEFAULT_MEETING_COLOR
        finish = add_minutes_to_time(meeting["startTime"], meeting["duration"])
        cols = st.columns([5, 1])
        cols[0].markdown(
            f"<div style='border-left:4px solid {color};padding:4px 8px;margin-bottom:6px'>"
            f"<b>{meeting['title']}</b><br>{format_time(meeting['startTime'])} - {format_time(finish)}</div>",
            unsafe_allow_html=True,
        )
        if cols[1].button("Delete", key=f"calendar.delete.{meeting['id']}"):
            call_api(repositories.delete_meeting, ctx.client, meeting["id"], success="Meeting deleted")
            st.rerun()
