from datetime import date

import streamlit as st

from planner_dashboard.constants import DEFAULT_MEETING_COLOR
from planner_dashboard.data import repositories
from planner_dashboard.drag_drop import DragDropCoordinator, draggable_id
from planner_dashboard.tabs.common import call_api, section_title
from planner_dashboard.timeline import (
    MIN_DURATION,
    calculate_item_height,
    color_for_priority,
    end_time,
    format_time,
    items_for_slot,
    slot_id,
    time_slots,
)


def _render_meetings_panel(client, meetings, day_iso):
    section_title("Meetings")
    for meeting in meetings:
        color = meeting.get("color") or DEFAULT_MEETING_COLOR
        st.markdown(
            f"<div style='border-left:4px solid {color};padding-left:8px'>"
            f"<b>{meeting['title']}</b><br>{format_time(meeting['startTime'])} · {meeting['duration']} min</div>",
            unsafe_allow_html=True,
        )
    with st.form("planner.meeting_form", clear_on_submit=True):
        title = st.text_input("Title")
        start = st.time_input("Start", value=None, step=900)
        duration = st.number_input("Duration (min)", min_value=5, value=30, step=5)
        color = st.color_picker("Color", DEFAULT_MEETING_COLOR)
        if st.form_submit_button("Add meeting") and title and start:
            call_api(
                repositories.create_meeting,
                client,
                {
                    "title": title,
                    "startTime": start.strftime("%H:%M"),
                    "duration": int(duration),
                    "date": day_iso,
                    "color": color,
                },
                success="Meeting added",
            )


def _render_todo_panel(todos):
    section_title("Todos")
    open_todos = [todo for todo in todos if not todo.get("completed")]
    if not open_todos:
        st.caption("Nothing open.")
    for todo in open_todos:
        color = color_for_priority(todo.get("priority"))
        st.markdown(
            f"<div style='border-left:4px solid {color};padding-left:8px'>"
            f"{todo['title']} · {todo.get('estimatedDuration') or 30} min</div>",
            unsafe_allow_html=True,
        )


def _render_item(client, item):
    color = item.get("color") or "#6B7280"
    height = calculate_item_height(item["duration"])
    st.markdown(
        f"<div style='min-height:{height}px;background:{color};color:white;border-radius:8px;padding:6px'>"
        f"<b>{item['title']}</b><br>{format_time(item['startTime'])} - {format_time(end_time(item))}</div>",
        unsafe_allow_html=True,
    )
    duration = int(item["duration"])
    # Items shorter than the resize floor can still be stored.
    new_duration = st.number_input(
        "Duration",
        min_value=min(MIN_DURATION, duration),
        value=duration,
        step=15,
        key=f"planner.duration.{item['id']}",
        label_visibility="collapsed",
    )
    if int(new_duration) != duration:
        call_api(repositories.update_scheduled_item, client, item["id"], {"duration": int(new_duration)}, success="Schedule updated!")
    if st.button("Remove", key=f"planner.remove.{item['id']}"):
        call_api(repositories.delete_scheduled_item, client, item["id"])
        st.rerun()


def _render_timeline(client, scheduled_items):
    section_title("Timeline")
    for slot in time_slots():
        cols = st.columns([1, 4])
        cols[0].markdown(f"**{format_time(slot)}**")
        with cols[1]:
            for item in items_for_slot(scheduled_items, slot):
                _render_item(client, item)


def _render_drag_controls(client, meetings, todos, day_iso):
    section_title("Schedule")
    sources = {draggable_id("meeting", m): f"Meeting: {m['title']}" for m in meetings}
    sources.update({draggable_id("todo", t): f"Todo: {t['title']}" for t in todos if not t.get("completed")})
    if not sources:
        st.caption("Add a meeting or todo to schedule it.")
        return
    cols = st.columns([3, 2, 1, 1])
    active_id = cols[0].selectbox("Item", list(sources), format_func=sources.get, key="planner.drag_source")
    target = cols[1].selectbox("Slot", [slot_id(slot) for slot in time_slots()], key="planner.drag_target")
    coordinator = DragDropCoordinator(
        meetings,
        todos,
        day_iso,
        lambda payload: call_api(repositories.create_scheduled_item, client, payload, success="Item scheduled successfully!"),
    )
    if cols[2].button("Drop", key="planner.drop"):
        coordinator.drag_start(active_id)
        coordinator.drag_end(target)
        st.rerun()
    # Decorative: scheduling cannot be undone from here.
    cols[3].button("Undo", key="planner.undo", disabled=True)


def render_planner_tab(ctx):
    client = ctx.client
    selected_day = st.date_input("Date", key="planner.selected_date", value=date.today())
    day_iso = selected_day.isoformat()
    st.markdown(f"### Today's Plan · {selected_day.strftime('%A, %B %d, %Y')}")

    meetings = call_api(repositories.list_meetings, client, day_iso, default=[])
    todos = call_api(repositories.list_todos, client, default=[])
    scheduled_items = call_api(repositories.list_scheduled_items, client, day_iso, default=[])

    left, middle, right = st.columns([1, 2, 1])
    with left:
        _render_meetings_panel(client, meetings, day_iso)
    with middle:
        _render_timeline(client, scheduled_items)
    with right:
        _render_todo_panel(todos)

    _render_drag_controls(client, meetings, todos, day_iso)

    completed = sum(1 for todo in todos if todo.get("completed"))
    stats = st.columns(4)
    stats[0].metric("Meetings", len(meetings))
    stats[1].metric("Open todos", len(todos) - completed)
    stats[2].metric("Scheduled hours", round(sum(item["duration"] for item in scheduled_items) / 60, 1))
    stats[3].metric("Todo completion", f"{round(completed / len(todos) * 100) if todos else 0}%")
