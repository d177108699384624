"""Drop handling for meetings and todos onto timeline slots."""
from __future__ import annotations

import pytest

from planner_dashboard.data import repositories
from planner_dashboard.data.query_client import QueryClient
from planner_dashboard.drag_drop import DRAGGING, IDLE, DragDropCoordinator, parse_slot

DAY = "2025-06-02"


@pytest.fixture
def created():
    return []


@pytest.fixture
def coordinator(created):
    meetings = [
        {"id": 1, "title": "Standup", "duration": 15, "color": "#FF0000"},
        {"id": 2, "title": "Review", "duration": 60, "color": None},
    ]
    todos = [
        {"id": 3, "title": "Write report", "estimatedDuration": 45},
        {"id": 4, "title": "Inbox", "estimatedDuration": None},
    ]

    def create_item(payload):
        created.append(payload)
        return payload

    return DragDropCoordinator(meetings, todos, DAY, create_item)


class TestParseSlot:
    def test_extracts_time(self) -> None:
        assert parse_slot("time-10:00") == "10:00"

    def test_slot_time_may_appear_anywhere_in_target_id(self) -> None:
        assert parse_slot("timeline-time-14:30-slot") == "14:30"
        assert parse_slot("xtime-10:00") == "10:00"

    def test_rejects_other_targets(self) -> None:
        assert parse_slot(None) is None
        assert parse_slot("todo-panel") is None
        assert parse_slot("time-9:00") is None


class TestCoordinator:
    def test_todo_drop_builds_item(self, coordinator, created) -> None:
        coordinator.drag_start("todo-3")
        assert coordinator.state == DRAGGING

        coordinator.drag_end("time-10:00")

        assert coordinator.state == IDLE
        assert created == [
            {
                "title": "Write report",
                "startTime": "10:00",
                "duration": 45,
                "date": DAY,
                "type": "todo",
                "originalId": 3,
                "color": "#7C3AED",
            }
        ]

    def test_todo_without_estimate_defaults_to_30(self, coordinator, created) -> None:
        coordinator.drag_start("todo-4")
        coordinator.drag_end("time-08:00")

        assert created[0]["duration"] == 30

    def test_meeting_keeps_its_color(self, coordinator, created) -> None:
        coordinator.drag_start("meeting-1")
        coordinator.drag_end("time-09:00")

        assert created[0]["color"] == "#FF0000"
        assert created[0]["duration"] == 15
        assert created[0]["type"] == "meeting"

    def test_meeting_without_color_gets_default(self, coordinator, created) -> None:
        coordinator.drag_start("meeting-2")
        coordinator.drag_end("time-11:00")

        assert created[0]["color"] == "#3B82F6"

    def test_drop_outside_a_slot_is_a_noop(self, coordinator, created) -> None:
        coordinator.drag_start("todo-3")

        assert coordinator.drag_end("todo-panel") is None
        assert coordinator.drag_end(None) is None
        assert created == []
        assert coordinator.state == IDLE

    def test_unknown_source_is_a_noop(self, coordinator, created) -> None:
        coordinator.drag_start("todo-999")
        coordinator.drag_end("time-10:00")

        assert created == []

    def test_cancel_returns_to_idle(self, coordinator, created) -> None:
        coordinator.drag_start("meeting-1")
        coordinator.drag_cancel()

        assert coordinator.state == IDLE
        assert coordinator.drag_end("time-10:00") is None
        assert created == []


class TestDropThroughApi:
    def test_todo_drop_creates_scheduled_item(self, api_transport) -> None:
        query_client = QueryClient(api_transport)
        todo = repositories.create_todo(query_client, {"title": "Write report", "estimatedDuration": 45})
        assert repositories.list_scheduled_items(query_client, DAY) == []

        coordinator = DragDropCoordinator(
            [],
            repositories.list_todos(query_client),
            DAY,
            lambda payload: repositories.create_scheduled_item(query_client, payload),
        )
        coordinator.drag_start(f"todo-{todo['id']}")
        coordinator.drag_end("time-10:00")

        items = repositories.list_scheduled_items(query_client, DAY)
        assert len(items) == 1
        assert items[0]["startTime"] == "10:00"
        assert items[0]["duration"] == 45
        assert items[0]["type"] == "todo"
        assert items[0]["originalId"] == todo["id"]
