from datetime import date

import pandas as pd
import streamlit as st

from planner_dashboard.constants import ACCOUNT_TYPES, EXPENSE_CATEGORIES, INCOME_CATEGORIES, TRANSACTION_TYPES
from planner_dashboard.data import repositories
from planner_dashboard.metrics import expenses_by_category, finance_totals, financial_goal_progress, monthly_trends
from planner_dashboard.tabs.common import call_api, money, section_title


def _render_forms(client, accounts):
    account_col, transaction_col, goal_col = st.columns(3)
    with account_col, st.form("finance.account", clear_on_submit=True):
        st.markdown("**New account**")
        name = st.text_input("Name")
        account_type = st.selectbox("Type", ACCOUNT_TYPES)
        balance = st.number_input("Balance", value=0.0, step=10.0, format="%.2f")
        currency = st.text_input("Currency", value="USD")
        if st.form_submit_button("Add account") and name:
            call_api(
                repositories.create_account,
                client,
                {"name": name, "type": account_type, "balance": round(balance, 2), "currency": currency or "USD"},
                success="Account added",
            )
    with transaction_col, st.form("finance.transaction", clear_on_submit=True):
        st.markdown("**New transaction**")
        account_id = st.selectbox(
            "Account",
            [account["id"] for account in accounts],
            format_func=lambda value: next((a["name"] for a in accounts if a["id"] == value), value),
        )
        tx_type = st.selectbox("Type", TRANSACTION_TYPES)
        category = st.selectbox("Category", EXPENSE_CATEGORIES + [c for c in INCOME_CATEGORIES if c not in EXPENSE_CATEGORIES])
        amount = st.number_input("Amount", min_value=0.0, step=1.0, format="%.2f")
        description = st.text_input("Description")
        tx_date = st.date_input("Date", value=date.today())
        if st.form_submit_button("Add transaction") and account_id is not None and amount > 0:
            payload = {
                "accountId": account_id,
                "amount": round(amount, 2),
                "type": tx_type,
                "category": category,
                "description": description or None,
                "date": tx_date.isoformat(),
            }
            call_api(repositories.create_transaction, client, payload, success="Transaction added")
    with goal_col, st.form("finance.goal", clear_on_submit=True):
        st.markdown("**New financial goal**")
        title = st.text_input("Title")
        target = st.number_input("Target", min_value=0.0, step=50.0, format="%.2f")
        current = st.number_input("Saved so far", min_value=0.0, step=10.0, format="%.2f")
        weekly = st.number_input("Weekly allocation", min_value=0.0, step=5.0, format="%.2f")
        if st.form_submit_button("Add goal") and title and target > 0:
            payload = {
                "title": title,
                "targetAmount": round(target, 2),
                "currentAmount": round(current, 2),
                "weeklyAllocation": round(weekly, 2) or None,
            }
            call_api(repositories.create_financial_goal, client, payload, success="Goal added")


def _render_goal_controls(client, goal):
    cols = st.columns([3, 1, 1])
    saved = cols[0].number_input(
        "Saved",
        min_value=0.0,
        value=float(goal["current"]),
        step=10.0,
        format="%.2f",
        key=f"finance.goal_saved.{goal['id']}",
        label_visibility="collapsed",
    )
    if cols[1].button("Save", key=f"finance.goal_save.{goal['id']}") and round(saved, 2) != round(goal["current"], 2):
        call_api(repositories.update_financial_goal, client, goal["id"], {"currentAmount": round(saved, 2)}, success="Goal updated")
        st.rerun()
    if cols[2].button("Delete", key=f"finance.goal_delete.{goal['id']}"):
        call_api(repositories.delete_financial_goal, client, goal["id"], success="Goal deleted")
        st.rerun()


def _render_deletions(client, accounts, transactions):
    with st.expander("Remove accounts or transactions"):
        for account in accounts:
            cols = st.columns([6, 1])
            cols[0].write(f"{account['name']} ({account['type']}) {money(account.get('balance'))}")
            # Transactions of a removed account stay in place.
            if cols[1].button("Delete", key=f"finance.account_delete.{account['id']}"):
                call_api(repositories.delete_account, client, account["id"], success="Account deleted")
                st.rerun()
        for transaction in transactions:
            cols = st.columns([6, 1])
            cols[0].write(
                f"{transaction['date']} {transaction['type']} {transaction['category']} {money(transaction.get('amount'))}"
            )
            if cols[1].button("Delete", key=f"finance.transaction_delete.{transaction['id']}"):
                call_api(repositories.delete_transaction, client, transaction["id"], success="Transaction deleted")
                st.rerun()


def render_finance_tab(ctx):
    client = ctx.client
    section_title("Finance")
    accounts = call_api(repositories.list_accounts, client, default=[])
    transactions = call_api(repositories.list_transactions, client, default=[])
    goals = call_api(repositories.list_financial_goals, client, default=[])

    totals = finance_totals(accounts, transactions)
    cols = st.columns(4)
    cols[0].metric("Total balance", money(totals["balance"]))
    cols[1].metric("Income", money(totals["income"]))
    cols[2].metric("Expenses", money(totals["expenses"]))
    cols[3].metric("Net", money(totals["net"]))

    _render_forms(client, accounts)

    left, right = st.columns(2)
    with left:
        st.markdown("**Accounts**")
        st.dataframe(
            pd.DataFrame(accounts, columns=["name", "type", "balance", "currency"]),
            hide_index=True,
            use_container_width=True,
        )
        st.markdown("**Expenses by category**")
        st.dataframe(expenses_by_category(transactions), hide_index=True, use_container_width=True)
    with right:
        st.markdown("**Last six months**")
        st.dataframe(monthly_trends(transactions, today=ctx.today), hide_index=True, use_container_width=True)
        st.markdown("**Goals**")
        for goal in financial_goal_progress(goals):
            st.progress(min(goal["percent"], 100) / 100, text=f"{goal['title']} · {goal['percent']}%")
            caption = f"{money(goal['current'])} / {money(goal['target'])}"
            if goal.get("weekly"):
                caption += f" · {money(goal['weekly'])}/week"
            st.caption(caption)
            _render_goal_controls(client, goal)

    st.markdown("**Transactions**")
    st.dataframe(
        pd.DataFrame(transactions, columns=["date", "type", "category", "amount", "description"]),
        hide_index=True,
        use_container_width=True,
    )
    _render_deletions(client, accounts, transactions)
