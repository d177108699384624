"""Dashboard repository mutations against the in-process API."""
from __future__ import annotations

import pytest

from planner_dashboard.data import repositories
from planner_dashboard.data.api_client import ApiError
from planner_dashboard.data.query_client import QueryClient

READING_GOAL = {"title": "Read", "category": "learning", "startDate": "2025-06-01", "targetValue": 12}


@pytest.fixture
def query_client(api_transport):
    return QueryClient(api_transport)


class TestPlannerDeletes:
    def test_delete_meeting_refetches_day(self, query_client, meeting_payload) -> None:
        meeting = repositories.create_meeting(query_client, meeting_payload)
        assert [m["id"] for m in repositories.list_meetings(query_client, "2025-06-02")] == [meeting["id"]]

        repositories.delete_meeting(query_client, meeting["id"])

        assert repositories.list_meetings(query_client, "2025-06-02") == []

    def test_delete_project_refetches_projects(self, query_client) -> None:
        project = repositories.create_project(query_client, {"name": "Home"})
        assert len(repositories.list_projects(query_client)) == 1

        repositories.delete_project(query_client, project["id"])

        assert repositories.list_projects(query_client) == []


class TestGoalMutations:
    def test_update_goal_progress(self, query_client) -> None:
        goal = repositories.create_goal(query_client, READING_GOAL)
        repositories.list_goals(query_client)

        updated = repositories.update_goal(query_client, goal["id"], {"currentValue": 5})

        assert updated["currentValue"] == 5
        assert repositories.list_goals(query_client)[0]["currentValue"] == 5

    def test_delete_goal(self, query_client) -> None:
        goal = repositories.create_goal(query_client, READING_GOAL)
        repositories.list_goals(query_client)

        repositories.delete_goal(query_client, goal["id"])

        assert repositories.list_goals(query_client) == []

    def test_delete_habit_legend_leaves_the_others(self, query_client) -> None:
        legends = repositories.list_habit_legends(query_client)

        repositories.delete_habit_legend(query_client, legends[0]["id"])

        remaining = repositories.list_habit_legends(query_client)
        assert [legend["id"] for legend in remaining] == [legend["id"] for legend in legends[1:]]


class TestFinanceMutations:
    def test_delete_account_keeps_its_transactions(self, query_client) -> None:
        account = repositories.create_account(query_client, {"name": "Checking", "type": "checking"})
        repositories.create_transaction(
            query_client,
            {"accountId": account["id"], "amount": 20, "type": "expense", "category": "Food", "date": "2025-06-02"},
        )
        repositories.list_accounts(query_client)

        repositories.delete_account(query_client, account["id"])

        assert repositories.list_accounts(query_client) == []
        assert len(repositories.list_transactions(query_client)) == 1

    def test_delete_transaction(self, query_client) -> None:
        account = repositories.create_account(query_client, {"name": "Checking", "type": "checking"})
        tx = repositories.create_transaction(
            query_client,
            {"accountId": account["id"], "amount": 20, "type": "expense", "category": "Food", "date": "2025-06-02"},
        )
        repositories.list_transactions(query_client)

        repositories.delete_transaction(query_client, tx["id"])

        assert repositories.list_transactions(query_client) == []

    def test_update_financial_goal_saved_amount(self, query_client) -> None:
        goal = repositories.create_financial_goal(query_client, {"title": "Trip", "targetAmount": 500})
        repositories.list_financial_goals(query_client)

        updated = repositories.update_financial_goal(query_client, goal["id"], {"currentAmount": 125.5})

        listed = repositories.list_financial_goals(query_client)[0]
        assert listed["currentAmount"] == updated["currentAmount"]
        assert float(listed["currentAmount"]) == 125.5

    def test_delete_financial_goal_twice_is_404(self, query_client) -> None:
        goal = repositories.create_financial_goal(query_client, {"title": "Trip", "targetAmount": 500})
        repositories.delete_financial_goal(query_client, goal["id"])

        with pytest.raises(ApiError) as excinfo:
            repositories.delete_financial_goal(query_client, goal["id"])

        assert excinfo.value.status_code == 404
        assert repositories.list_financial_goals(query_client) == []
