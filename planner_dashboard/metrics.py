from __future__ import annotations

import math
from datetime import date

import pandas as pd

from planner_dashboard.constants import (
    HEALTH_DIMENSIONS,
    HEALTH_LABELS,
    LOWEST_HEALTH_LABEL,
    PRIORITIES,
    TREND_MONTHS,
)
from planner_dashboard.timeline import js_round


def _amount(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _transactions_frame(transactions):
    frame = pd.DataFrame(transactions or [], columns=["type", "amount", "category", "date"])
    frame["amount"] = frame["amount"].map(_amount).astype(float)
    frame["month"] = frame["date"].astype(str).str[:7]
    return frame


def finance_totals(accounts, transactions):
    balance = sum(_amount(account.get("balance")) for account in accounts or [])
    frame = _transactions_frame(transactions)
    income = float(frame.loc[frame["type"] == "income", "amount"].sum())
    expenses = float(frame.loc[frame["type"] == "expense", "amount"].sum())
    return {
        "balance": round(balance, 2),
        "income": round(income, 2),
        "expenses": round(expenses, 2),
        "net": round(income - expenses, 2),
    }


def expenses_by_category(transactions):
    frame = _transactions_frame(transactions)
    expenses = frame[frame["type"] == "expense"]
    if expenses.empty:
        return pd.DataFrame(columns=["category", "amount"])
    grouped = expenses.groupby("category", as_index=False)["amount"].sum()
    grouped = grouped[grouped["amount"] > 0]
    return grouped.sort_values("amount", ascending=False).reset_index(drop=True)


def monthly_trends(transactions, today: date | None = None, months: int = TREND_MONTHS):
    """Income and expenses for the last ``months`` calendar months, oldest first."""
    today = today or date.today()
    current = pd.Period(today.strftime("%Y-%m"), freq="M")
    periods = [current - offset for offset in range(months - 1, -1, -1)]
    frame = _transactions_frame(transactions)
    rows = []
    for period in periods:
        in_month = frame[frame["month"] == str(period)]
        rows.append(
            {
                "month": period.strftime("%b"),
                "income": float(in_month.loc[in_month["type"] == "income", "amount"].sum()),
                "expenses": float(in_month.loc[in_month["type"] == "expense", "amount"].sum()),
            }
        )
    return pd.DataFrame(rows, columns=["month", "income", "expenses"])


def progress_percent(current, target):
    target_value = _amount(target)
    if target_value <= 0:
        return 0
    return js_round(_amount(current) / target_value * 100)


def financial_goal_progress(goals):
    rows = []
    for goal in goals or []:
        if not goal.get("isActive", True):
            continue
        rows.append(
            {
                "id": goal.get("id"),
                "title": goal.get("title"),
                "current": _amount(goal.get("currentAmount")),
                "target": _amount(goal.get("targetAmount")),
                "weekly": goal.get("weeklyAllocation"),
                "percent": progress_percent(goal.get("currentAmount"), goal.get("targetAmount")),
            }
        )
    return rows


def overall_health_score(score):
    if not score:
        return 0
    values = [int(score.get(field) or 0) for field, _ in HEALTH_DIMENSIONS]
    return int(math.floor(sum(values) / len(values) + 0.5))


def health_label(overall):
    for threshold, label in HEALTH_LABELS:
        if overall >= threshold:
            return label
    return LOWEST_HEALTH_LABEL


def health_dimensions(score):
    return [(label, int((score or {}).get(field) or 0)) for field, label in HEALTH_DIMENSIONS]


def group_todos_by_priority(todos):
    groups = {priority: [] for priority in PRIORITIES}
    for todo in todos or []:
        if todo.get("completed"):
            continue
        groups.setdefault(todo.get("priority") or "medium", []).append(todo)
    return groups


def tracking_for_cell(tracking, habit_id, day_iso):
    """The first tracking record, in store order, for one habit on one day."""
    for record in tracking or []:
        if record.get("habitId") == habit_id and record.get("date") == day_iso:
            return record
    return None


def next_legend(legends, current_icon_key=None):
    if not legends:
        return None
    if current_icon_key is None:
        return legends[0]
    keys = [legend.get("iconKey") for legend in legends]
    index = keys.index(current_icon_key) if current_icon_key in keys else -1
    return legends[(index + 1) % len(legends)]


def cycle_habit_cell(tracking, legends, habit_id, day_iso):
    """Payload for the tracking record a click on a habit cell creates, or None."""
    existing = tracking_for_cell(tracking, habit_id, day_iso)
    legend = next_legend(legends, existing.get("iconKey") if existing else None)
    if legend is None:
        return None
    return {
        "habitId": habit_id,
        "date": day_iso,
        "status": legend["iconKey"],
        "iconKey": legend["iconKey"],
    }
