from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from planner_backend.auth import current_user_id, get_store
from planner_backend.routes.common import (
    SUCCESS,
    parse_create,
    parse_patch,
    require_found,
    store_errors,
    to_wire,
    to_wire_list,
)
from planner_backend.schemas import (
    AccountCreate,
    AccountPatch,
    FinancialGoalCreate,
    FinancialGoalPatch,
    TransactionCreate,
    TransactionPatch,
)
from planner_backend.storage import Storage

router = APIRouter(prefix="/api")

# Balances are stored as entered; transactions never adjust them.


@router.get("/accounts")
async def list_accounts(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch accounts"):
        items = await store.get_accounts_by_user(user_id)
    return to_wire_list(items)


@router.post("/accounts")
async def create_account(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(AccountCreate, body, "Invalid account data")
    with store_errors("Failed to create account"):
        record = await store.create_account({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/accounts/{account_id}")
async def update_account(account_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(AccountPatch, body, "Invalid account data")
    with store_errors("Failed to update account"):
        record = await store.update_account(account_id, patch)
    return to_wire(require_found(record, "Account not found"))


@router.delete("/accounts/{account_id}")
async def delete_account(account_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete account"):
        deleted = await store.delete_account(account_id)
    require_found(deleted, "Account not found")
    return SUCCESS


@router.get("/transactions")
async def list_transactions(
    account_id: Optional[int] = Query(None, alias="accountId"),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    with store_errors("Failed to fetch transactions"):
        if account_id is None:
            items = await store.get_transactions_by_user(user_id)
        else:
            items = [
                item
                for item in await store.get_transactions_by_account(account_id)
                if item.get("user_id") == user_id
            ]
    return to_wire_list(items)


@router.post("/transactions")
async def create_transaction(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(TransactionCreate, body, "Invalid transaction data")
    with store_errors("Failed to create transaction"):
        record = await store.create_transaction({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/transactions/{transaction_id}")
async def update_transaction(transaction_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(TransactionPatch, body, "Invalid transaction data")
    with store_errors("Failed to update transaction"):
        record = await store.update_transaction(transaction_id, patch)
    return to_wire(require_found(record, "Transaction not found"))


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(transaction_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete transaction"):
        deleted = await store.delete_transaction(transaction_id)
    require_found(deleted, "Transaction not found")
    return SUCCESS


@router.get("/financial-goals")
async def list_financial_goals(user_id: int = Depends(current_user_id), store: Storage = Depends(get_store)):
    with store_errors("Failed to fetch financial goals"):
        items = await store.get_financial_goals_by_user(user_id)
    return to_wire_list(items)


@router.post("/financial-goals")
async def create_financial_goal(
    body: Any = Body(None),
    user_id: int = Depends(current_user_id),
    store: Storage = Depends(get_store),
):
    fields = parse_create(FinancialGoalCreate, body, "Invalid financial goal data")
    with store_errors("Failed to create financial goal"):
        record = await store.create_financial_goal({**fields, "user_id": user_id})
    return to_wire(record)


@router.put("/financial-goals/{goal_id}")
async def update_financial_goal(goal_id: int, body: Any = Body(None), store: Storage = Depends(get_store)):
    patch = parse_patch(FinancialGoalPatch, body, "Invalid financial goal data")
    with store_errors("Failed to update financial goal"):
        record = await store.update_financial_goal(goal_id, patch)
    return to_wire(require_found(record, "Financial goal not found"))


@router.delete("/financial-goals/{goal_id}")
async def delete_financial_goal(goal_id: int, store: Storage = Depends(get_store)):
    with store_errors("Failed to delete financial goal"):
        deleted = await store.delete_financial_goal(goal_id)
    require_found(deleted, "Financial goal not found")
    return SUCCESS
