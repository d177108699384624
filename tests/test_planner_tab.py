"""Rendering of scheduled items on the planner timeline."""
from __future__ import annotations

from streamlit.testing.v1 import AppTest


def _render_short_item():
    from planner_dashboard.data.query_client import QueryClient
    from planner_dashboard.tabs.planner_tab import _render_item

    client = QueryClient(lambda method, path, params=None, json=None: None)
    _render_item(client, {"id": 5, "title": "Check-in", "startTime": "09:00", "duration": 10, "color": None})


def _render_regular_item():
    from planner_dashboard.data.query_client import QueryClient
    from planner_dashboard.tabs.planner_tab import _render_item

    client = QueryClient(lambda method, path, params=None, json=None: None)
    _render_item(client, {"id": 6, "title": "Focus", "startTime": "10:00", "duration": 60, "color": "#10B981"})


class TestScheduledItemDuration:
    def test_item_shorter_than_resize_floor_renders(self) -> None:
        at = AppTest.from_function(_render_short_item).run()

        assert not at.exception
        assert at.number_input[0].value == 10
        assert at.number_input[0].min == 10

    def test_regular_item_keeps_resize_floor(self) -> None:
        at = AppTest.from_function(_render_regular_item).run()

        assert not at.exception
        assert at.number_input[0].value == 60
        assert at.number_input[0].min == 15
