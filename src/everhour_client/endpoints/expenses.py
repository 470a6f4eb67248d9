"""Expense and expense category endpoints."""

from typing import Any, Optional

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import (
    AttachmentRequest,
    ExpenseCategoryDeleteRequest,
    ExpenseCategoryRequest,
    ExpenseRequest,
)
from everhour_client.models.resources import AttachmentDetails, Expense, ExpenseCategory


async def get_all_expenses(client: EverhourApiClient) -> list[Expense]:
    url = client.create_url("/expenses")
    return await client.api_request("GET", url)


async def create_expense(client: EverhourApiClient, payload: ExpenseRequest) -> Expense:
    url = client.create_url("/expenses")
    return await client.api_request("POST", url, payload)


async def update_expense(
    client: EverhourApiClient, expense_id: int, payload: ExpenseRequest
) -> Expense:
    url = client.create_url("/expenses/{expenseId}", {"expenseId": expense_id})
    return await client.api_request("PUT", url, payload)


async def delete_expense(client: EverhourApiClient, expense_id: int) -> Any:
    url = client.create_url("/expenses/{expenseId}", {"expenseId": expense_id})
    return await client.api_request("DELETE", url)


async def add_attachment_to_expense(
    client: EverhourApiClient, expense_id: int, payload: AttachmentRequest
) -> AttachmentDetails:
    url = client.create_url("/expenses/{expenseId}/attachments", {"expenseId": expense_id})
    return await client.api_request("POST", url, payload)


async def get_all_categories(client: EverhourApiClient) -> list[ExpenseCategory]:
    url = client.create_url("/expenses/categories")
    return await client.api_request("GET", url)


async def create_category(
    client: EverhourApiClient, payload: ExpenseCategoryRequest
) -> ExpenseCategory:
    url = client.create_url("/expenses/categories")
    return await client.api_request("POST", url, payload)


async def update_category(
    client: EverhourApiClient, category_id: int, payload: ExpenseCategoryRequest
) -> ExpenseCategory:
    url = client.create_url("/expenses/categories/{categoryId}", {"categoryId": category_id})
    return await client.api_request("PUT", url, payload)


async def delete_category(
    client: EverhourApiClient,
    category_id: int,
    payload: Optional[ExpenseCategoryDeleteRequest] = None,
) -> Any:
    """Delete an expense category.

    Args:
        client: API client
        category_id: Category to delete
        payload: Whether to remove the category's expenses or move them to
            another category

    Returns:
        Decoded response body, usually None
    """
    url = client.create_url("/expenses/categories/{categoryId}", {"categoryId": category_id})
    return await client.api_request("DELETE", url, payload)
