"""Dashboard summaries: finance, goals, health and habit cycling."""
from __future__ import annotations

from datetime import date

import pytest

from planner_dashboard.metrics import (
    cycle_habit_cell,
    expenses_by_category,
    finance_totals,
    financial_goal_progress,
    group_todos_by_priority,
    health_label,
    monthly_trends,
    next_legend,
    overall_health_score,
    progress_percent,
    tracking_for_cell,
)

TRANSACTIONS = [
    {"type": "income", "amount": "1000.00", "category": "Salary", "date": "2025-06-01"},
    {"type": "expense", "amount": "120.50", "category": "Food & Dining", "date": "2025-06-03"},
    {"type": "expense", "amount": "30.00", "category": "Food & Dining", "date": "2025-05-20"},
    {"type": "expense", "amount": "400.00", "category": "Housing", "date": "2025-05-01"},
    {"type": "transfer", "amount": "50.00", "category": "Other", "date": "2025-06-04"},
]

LEGENDS = [
    {"iconKey": "completed"},
    {"iconKey": "not_completed"},
    {"iconKey": "partial"},
]


class TestFinance:
    def test_totals(self) -> None:
        totals = finance_totals([{"balance": "100.00"}, {"balance": "25.5"}], TRANSACTIONS)

        assert totals == {"balance": 125.5, "income": 1000.0, "expenses": 550.5, "net": 449.5}

    def test_totals_with_no_data(self) -> None:
        assert finance_totals([], []) == {"balance": 0, "income": 0, "expenses": 0, "net": 0}

    def test_expenses_by_category(self) -> None:
        frame = expenses_by_category(TRANSACTIONS)

        assert list(frame["category"]) == ["Housing", "Food & Dining"]
        assert list(frame["amount"]) == pytest.approx([400.0, 150.5])

    def test_monthly_trends_oldest_first(self) -> None:
        frame = monthly_trends(TRANSACTIONS, today=date(2025, 6, 15))

        assert list(frame["month"]) == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
        assert frame.iloc[-1]["income"] == pytest.approx(1000.0)
        assert frame.iloc[-1]["expenses"] == pytest.approx(120.5)
        assert frame.iloc[-2]["expenses"] == pytest.approx(430.0)

    def test_goal_progress_skips_inactive(self) -> None:
        goals = [
            {"id": 1, "title": "Trip", "currentAmount": "250.00", "targetAmount": "1000.00", "isActive": True},
            {"id": 2, "title": "Old", "currentAmount": "0", "targetAmount": "10", "isActive": False},
        ]

        progress = financial_goal_progress(goals)

        assert [goal["percent"] for goal in progress] == [25]

    def test_zero_target_is_zero_percent(self) -> None:
        assert progress_percent(5, 0) == 0


class TestHealth:
    def test_overall_is_rounded_mean(self) -> None:
        up = {"spiritualScore": 7, "mentalScore": 8, "socialScore": 7, "physicalScore": 8, "financialScore": 8}
        down = {"spiritualScore": 7, "mentalScore": 7, "socialScore": 7, "physicalScore": 8, "financialScore": 8}

        assert overall_health_score(up) == 8
        assert overall_health_score(down) == 7

    @pytest.mark.parametrize(
        "overall,label",
        [(10, "Excellent"), (9, "Excellent"), (7, "Good"), (5, "Fair"), (3, "Poor"), (2, "Critical")],
    )
    def test_labels(self, overall, label) -> None:
        assert health_label(overall) == label

    def test_missing_score_is_zero(self) -> None:
        assert overall_health_score(None) == 0


class TestTodos:
    def test_open_todos_grouped_by_priority(self) -> None:
        todos = [
            {"title": "a", "priority": "low"},
            {"title": "b", "priority": "high"},
            {"title": "c", "priority": "high", "completed": True},
        ]

        groups = group_todos_by_priority(todos)

        assert list(groups) == ["high", "medium", "low"]
        assert [todo["title"] for todo in groups["high"]] == ["b"]
        assert groups["medium"] == []


class TestHabitCycling:
    def test_empty_cell_gets_first_legend(self) -> None:
        payload = cycle_habit_cell([], LEGENDS, 7, "2025-06-01")

        assert payload == {"habitId": 7, "date": "2025-06-01", "status": "completed", "iconKey": "completed"}

    def test_first_record_decides_next(self) -> None:
        tracking = [
            {"id": 1, "habitId": 7, "date": "2025-06-01", "iconKey": "completed"},
            {"id": 2, "habitId": 7, "date": "2025-06-01", "iconKey": "not_completed"},
        ]

        assert tracking_for_cell(tracking, 7, "2025-06-01")["id"] == 1
        assert cycle_habit_cell(tracking, LEGENDS, 7, "2025-06-01")["iconKey"] == "not_completed"

    def test_wraps_around(self) -> None:
        assert next_legend(LEGENDS, "partial")["iconKey"] == "completed"

    def test_unknown_key_restarts(self) -> None:
        assert next_legend(LEGENDS, "gone")["iconKey"] == "completed"

    def test_no_legends(self) -> None:
        assert cycle_habit_cell([], [], 7, "2025-06-01") is None
