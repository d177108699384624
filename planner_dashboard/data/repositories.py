"""Typed queries and mutations over the planner API.

Every function takes the session's ``QueryClient``. Queries are cached under
``(path, *filters)``; mutations invalidate the path prefixes whose lists they
change.
"""
from datetime import date

MEETINGS = "/api/meetings"
TODOS = "/api/todos"
PROJECTS = "/api/projects"
SCHEDULED_ITEMS = "/api/scheduled-items"
PASSWORDS = "/api/passwords"
GOALS = "/api/goals"
HABIT_TRACKING = "/api/habit-tracking"
HABIT_LEGENDS = "/api/habit-legends"
ACCOUNTS = "/api/accounts"
TRANSACTIONS = "/api/transactions"
FINANCIAL_GOALS = "/api/financial-goals"
HEALTH_SCORES = "/api/health-scores"


def _day_iso(day):
    if isinstance(day, date):
        return day.isoformat()
    return str(day)


def _create(client, path, payload):
    return client.mutate("POST", path, json=payload, invalidate=[(path,)])


def _update(client, path, record_id, patch):
    return client.mutate("PUT", f"{path}/{record_id}", json=patch, invalidate=[(path,)])


def _delete(client, path, record_id):
    return client.mutate("DELETE", f"{path}/{record_id}", invalidate=[(path,)])


# Meetings

def list_meetings(client, day):
    day_iso = _day_iso(day)
    return client.query((MEETINGS, day_iso), f"{MEETINGS}/{day_iso}")


def create_meeting(client, payload):
    return _create(client, MEETINGS, payload)


def delete_meeting(client, meeting_id):
    return _delete(client, MEETINGS, meeting_id)


# Todos and projects

def list_todos(client, project_id=None):
    if project_id is None:
        return client.query((TODOS,), TODOS)
    return client.query((TODOS, project_id), TODOS, params={"projectId": project_id})


def create_todo(client, payload):
    return _create(client, TODOS, payload)


def update_todo(client, todo_id, patch):
    return _update(client, TODOS, todo_id, patch)


def delete_todo(client, todo_id):
    return _delete(client, TODOS, todo_id)


def list_projects(client):
    return client.query((PROJECTS,), PROJECTS)


def create_project(client, payload):
    return _create(client, PROJECTS, payload)


def delete_project(client, project_id):
    return _delete(client, PROJECTS, project_id)


# Scheduled items

def list_scheduled_items(client, day):
    day_iso = _day_iso(day)
    return client.query((SCHEDULED_ITEMS, day_iso), f"{SCHEDULED_ITEMS}/{day_iso}")


def create_scheduled_item(client, payload):
    return _create(client, SCHEDULED_ITEMS, payload)


def update_scheduled_item(client, item_id, patch):
    return _update(client, SCHEDULED_ITEMS, item_id, patch)


def delete_scheduled_item(client, item_id):
    return _delete(client, SCHEDULED_ITEMS, item_id)


# Passwords

def list_passwords(client):
    return client.query((PASSWORDS,), PASSWORDS)


def create_password(client, payload):
    return _create(client, PASSWORDS, payload)


def update_password(client, password_id, patch):
    return _update(client, PASSWORDS, password_id, patch)


def delete_password(client, password_id):
    return _delete(client, PASSWORDS, password_id)


# Goals and habits

def list_goals(client):
    return client.query((GOALS,), GOALS)


def create_goal(client, payload):
    return _create(client, GOALS, payload)


def update_goal(client, goal_id, patch):
    return _update(client, GOALS, goal_id, patch)


def delete_goal(client, goal_id):
    return _delete(client, GOALS, goal_id)


def list_habit_tracking(client, month, year):
    return client.query((HABIT_TRACKING, int(month), int(year)), f"{HABIT_TRACKING}/{int(month)}/{int(year)}")


def create_habit_tracking(client, payload):
    return _create(client, HABIT_TRACKING, payload)


def list_habit_legends(client):
    return client.query((HABIT_LEGENDS,), HABIT_LEGENDS)


def create_habit_legend(client, payload):
    return _create(client, HABIT_LEGENDS, payload)


def delete_habit_legend(client, legend_id):
    return _delete(client, HABIT_LEGENDS, legend_id)


# Finance

def list_accounts(client):
    return client.query((ACCOUNTS,), ACCOUNTS)


def create_account(client, payload):
    return _create(client, ACCOUNTS, payload)


def delete_account(client, account_id):
    return _delete(client, ACCOUNTS, account_id)


def list_transactions(client, account_id=None):
    if account_id is None:
        return client.query((TRANSACTIONS,), TRANSACTIONS)
    return client.query((TRANSACTIONS, account_id), TRANSACTIONS, params={"accountId": account_id})


def create_transaction(client, payload):
    return _create(client, TRANSACTIONS, payload)


def delete_transaction(client, transaction_id):
    return _delete(client, TRANSACTIONS, transaction_id)


def list_financial_goals(client):
    return client.query((FINANCIAL_GOALS,), FINANCIAL_GOALS)


def create_financial_goal(client, payload):
    return _create(client, FINANCIAL_GOALS, payload)


def update_financial_goal(client, goal_id, patch):
    return _update(client, FINANCIAL_GOALS, goal_id, patch)


def delete_financial_goal(client, goal_id):
    return _delete(client, FINANCIAL_GOALS, goal_id)


# Health

def list_health_scores(client):
    return client.query((HEALTH_SCORES,), HEALTH_SCORES)


def get_health_score(client, month, year):
    return client.query((HEALTH_SCORES, int(month), int(year)), f"{HEALTH_SCORES}/{int(month)}/{int(year)}")


def create_health_score(client, payload):
    return _create(client, HEALTH_SCORES, payload)


def update_health_score(client, score_id, patch):
    return _update(client, HEALTH_SCORES, score_id, patch)
