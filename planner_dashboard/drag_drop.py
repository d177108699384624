"""Turns a drop of a meeting or todo onto a timeline slot into a scheduled item.

Draggable ids are ``meeting-<id>`` and ``todo-<id>``; drop targets carry
``time-HH:MM`` somewhere in their id. A drop with no target, or onto a target
without a slot time, does nothing. There is no collision check against items
already in the slot.
"""
import logging
import re

from planner_dashboard.constants import DEFAULT_MEETING_COLOR, DEFAULT_TODO_COLOR, DEFAULT_TODO_DURATION

logger = logging.getLogger(__name__)

IDLE = "idle"
DRAGGING = "dragging"

SLOT_PATTERN = re.compile(r"time-(\d{2}:\d{2})")


def draggable_id(kind, record):
    return f"{kind}-{record['id']}"


def parse_slot(over_id):
    if not over_id:
        return None
    match = SLOT_PATTERN.search(str(over_id))
    return match.group(1) if match else None


def build_scheduled_item(source_kind, source, start_time, day):
    if source_kind == "meeting":
        return {
            "title": source["title"],
            "startTime": start_time,
            "duration": source["duration"],
            "date": day,
            "type": "meeting",
            "originalId": source["id"],
            "color": source.get("color") or DEFAULT_MEETING_COLOR,
        }
    return {
        "title": source["title"],
        "startTime": start_time,
        "duration": source.get("estimatedDuration") or DEFAULT_TODO_DURATION,
        "date": day,
        "type": "todo",
        "originalId": source["id"],
        "color": DEFAULT_TODO_COLOR,
    }


class DragDropCoordinator:
    """Tracks one drag gesture over the day's meetings and todos.

    ``create_item`` receives the scheduled item payload on a valid drop and
    returns whatever the create mutation returns.
    """

    def __init__(self, meetings, todos, day, create_item):
        self.meetings = list(meetings or [])
        self.todos = list(todos or [])
        self.day = str(day)
        self._create_item = create_item
        self.state = IDLE
        self.active_id = None
        self._source = None

    def _resolve(self, active_id):
        for meeting in self.meetings:
            if draggable_id("meeting", meeting) == active_id:
                return "meeting", meeting
        for todo in self.todos:
            if draggable_id("todo", todo) == active_id:
                return "todo", todo
        return None

    def drag_start(self, active_id):
        self.active_id = str(active_id)
        self._source = self._resolve(self.active_id)
        self.state = DRAGGING

    def drag_cancel(self):
        self._reset()

    def drag_end(self, over_id):
        source = self._source
        self._reset()
        start_time = parse_slot(over_id)
        if start_time is None or source is None:
            logger.debug("Ignoring drop onto %r", over_id)
            return None
        kind, record = source
        payload = build_scheduled_item(kind, record, start_time, self.day)
        return self._create_item(payload)

    def _reset(self):
        self.state = IDLE
        self.active_id = None
        self._source = None
