"""Time arithmetic for the daily planner timeline. Times are ``HH:MM`` strings."""
import math

from planner_dashboard.constants import (
    DEFAULT_ITEM_COLOR,
    FIRST_SLOT_HOUR,
    LAST_SLOT_HOUR,
    PRIORITY_COLORS,
    TYPE_COLORS,
)

SLOT_ID_PREFIX = "time-"
MIN_ITEM_HEIGHT = 40
MIN_DURATION = 15


def js_round(value):
    # Halves round up, toward positive infinity.
    return int(math.floor(value + 0.5))


def time_slots():
    return [f"{hour:02d}:00" for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1)]


def slot_id(slot):
    return f"{SLOT_ID_PREFIX}{slot}"


def time_to_minutes(value):
    hours, minutes = (int(part) for part in str(value).split(":")[:2])
    return hours * 60 + minutes


def minutes_to_time(total):
    return f"{total // 60:02d}:{total % 60:02d}"


def add_minutes_to_time(value, minutes):
    total = time_to_minutes(value) + int(minutes)
    return f"{(total // 60) % 24:02d}:{total % 60:02d}"


def format_time(value):
    hours, minutes = str(value).split(":")[:2]
    hour = int(hours)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def calculate_item_height(duration):
    return max(MIN_ITEM_HEIGHT, duration * 0.8)


def resize_duration(start_duration, delta_y):
    return max(MIN_DURATION, start_duration + js_round(delta_y / 2))


def items_for_slot(items, slot):
    return [item for item in items or [] if item.get("startTime") == slot]


def end_time(item):
    return add_minutes_to_time(item["startTime"], item.get("duration") or 0)


def color_for_type(item_type):
    return TYPE_COLORS.get(item_type, DEFAULT_ITEM_COLOR)


def color_for_priority(priority):
    return PRIORITY_COLORS.get(priority, DEFAULT_ITEM_COLOR)
