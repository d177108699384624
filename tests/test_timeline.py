"""Timeline time arithmetic."""
from __future__ import annotations

import pytest

from planner_dashboard.timeline import (
    add_minutes_to_time,
    calculate_item_height,
    color_for_priority,
    color_for_type,
    end_time,
    format_time,
    items_for_slot,
    minutes_to_time,
    resize_duration,
    slot_id,
    time_slots,
    time_to_minutes,
)


class TestSlots:
    def test_hourly_from_eight_to_six(self) -> None:
        slots = time_slots()

        assert slots[0] == "08:00"
        assert slots[-1] == "18:00"
        assert len(slots) == 11

    def test_slot_id(self) -> None:
        assert slot_id("09:00") == "time-09:00"

    def test_items_for_slot(self) -> None:
        items = [{"startTime": "09:00", "title": "a"}, {"startTime": "09:30", "title": "b"}]

        assert [item["title"] for item in items_for_slot(items, "09:00")] == ["a"]


class TestFormatting:
    @pytest.mark.parametrize(
        "value,expected",
        [("00:05", "12:05 AM"), ("09:30", "9:30 AM"), ("12:00", "12:00 PM"), ("18:45", "6:45 PM")],
    )
    def test_format_time(self, value, expected) -> None:
        assert format_time(value) == expected

    def test_add_minutes_wraps_midnight(self) -> None:
        assert add_minutes_to_time("23:30", 45) == "00:15"
        assert add_minutes_to_time("09:00", 90) == "10:30"

    def test_minutes_conversion(self) -> None:
        assert time_to_minutes("10:15") == 615
        assert minutes_to_time(615) == "10:15"

    def test_end_time(self) -> None:
        assert end_time({"startTime": "10:00", "duration": 45}) == "10:45"


class TestSizing:
    def test_height_has_a_floor(self) -> None:
        assert calculate_item_height(15) == 40
        assert calculate_item_height(100) == pytest.approx(80)

    def test_resize_rounds_half_up(self) -> None:
        assert resize_duration(30, 1) == 31
        assert resize_duration(30, -1) == 30
        assert resize_duration(30, 40) == 50

    def test_resize_has_a_floor(self) -> None:
        assert resize_duration(30, -100) == 15


class TestColors:
    def test_type_and_priority_colors(self) -> None:
        assert color_for_type("meeting") == "#3B82F6"
        assert color_for_type("unknown") == "#6B7280"
        assert color_for_priority("high") == "#EF4444"
