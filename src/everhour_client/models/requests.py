"""Pydantic models for API request bodies.

Attributes use snake_case and are sent with the camelCase names the service
expects. Fields left as None are not sent at all.

Example:
    >>> TimeRecordRequest(date="2024-03-01", time=3600).model_dump(by_alias=True, exclude_none=True)
    {'date': datetime.date(2024, 3, 1), 'time': 3600}
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from everhour_client.models.resources import (
    AssignmentType,
    BillingType,
    BudgetType,
    PeriodType,
    ProjectType,
    RateType,
    SectionStatusType,
    TaskEstimateType,
    TaskStatusType,
    WebhookEventType,
)


class RequestModel(BaseModel):
    """Base class for request bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Projects, sections and tasks
# ============================================================================


class ProjectRequest(RequestModel):
    """Request model for creating or updating a project."""

    name: str = Field(..., min_length=1, description="Project name")
    type: Optional[ProjectType] = Field(None, description="Project layout")
    users: Optional[list[int]] = Field(None, description="Ids of assigned users")


class ProjectBilling(RequestModel):
    type: BillingType
    fee: Optional[int] = Field(None, ge=0, description="Fixed fee in cents")


class BillingRate(RequestModel):
    type: RateType
    rate: Optional[int] = Field(None, ge=0, description="Rate in cents")
    user_cost_overrides: Optional[dict[str, int]] = None
    user_rate_overrides: Optional[dict[str, int]] = None


class BudgetRequest(RequestModel):
    """Request model for a client or project budget."""

    type: BudgetType
    budget: int = Field(..., ge=0, description="Cents for money budgets, seconds for time")
    period: Optional[PeriodType] = None
    applied_from: Optional[datetime.date] = None
    disallow_overbudget: Optional[bool] = None
    exclude_expenses: Optional[bool] = None
    exclude_unbillable_time: Optional[bool] = None
    threshold: Optional[int] = Field(None, ge=0, le=100, description="Notify at this percent")


class ProjectBillingBudgetRequest(RequestModel):
    """Request model for updating project billing, budget and rate together."""

    billing: Optional[ProjectBilling] = None
    budget: Optional[BudgetRequest] = None
    rate: Optional[BillingRate] = None


class SectionRequest(RequestModel):
    """Request model for creating or updating a section."""

    name: str = Field(..., min_length=1)
    position: Optional[int] = Field(None, ge=0)
    status: Optional[SectionStatusType] = None


class TaskRequest(RequestModel):
    """Request model for creating or updating a task."""

    name: str = Field(..., min_length=1)
    section: int = Field(..., description="Section id the task belongs to")
    description: Optional[str] = None
    due_on: Optional[datetime.date] = None
    labels: Optional[list[str]] = None
    position: Optional[int] = Field(None, ge=0)
    status: Optional[TaskStatusType] = None


class TaskEstimateRequest(RequestModel):
    """Request model for setting a task estimate (seconds)."""

    total: int = Field(..., ge=0)
    type: Optional[TaskEstimateType] = None
    users: Optional[dict[str, int]] = Field(None, description="Per-user estimate by user id")


# ============================================================================
# Time tracking
# ============================================================================


class TimeRecordRequest(RequestModel):
    """Request model for adding or updating time on a task."""

    date: datetime.date
    time: int = Field(..., ge=0, description="Time in seconds")
    user: Optional[int] = Field(None, description="Defaults to the current user")
    comment: Optional[str] = None


class RemoveTimeRecordRequest(RequestModel):
    """Request model for removing a user's time on a task for one day."""

    date: datetime.date
    user: Optional[int] = None


class TimerRequest(RequestModel):
    """Request model for starting a timer."""

    task: str = Field(..., min_length=1, description="Task id, e.g. 'ev:123'")
    user_date: Optional[datetime.date] = None
    comment: Optional[str] = None


class TimecardActionRequest(RequestModel):
    """Request model for clocking in or out."""

    user_date: Optional[datetime.date] = Field(
        None, description="Current user date, defaults to the profile timezone"
    )


class TimecardRequest(RequestModel):
    """Request model for updating a timecard."""

    clock_in: Optional[str] = Field(None, description="Clock in time in user timezone")
    clock_out: Optional[str] = Field(None, description="Clock out time in user timezone")
    break_time: Optional[int] = Field(None, ge=0, description="Breaks duration in seconds")


# ============================================================================
# Clients and invoices
# ============================================================================


class ClientRequest(RequestModel):
    """Request model for creating or updating a client."""

    name: str = Field(..., min_length=1)
    projects: Optional[list[str]] = None
    business_details: Optional[str] = None


class RateAdjustment(RequestModel):
    amount: Optional[int] = None
    rate: Optional[float] = None


class InvoiceRequestItem(RequestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    billed_time: Optional[int] = Field(None, ge=0)
    list_amount: Optional[int] = None
    position: Optional[int] = None
    taxable: Optional[bool] = None


class InvoiceCreateRequest(RequestModel):
    """Request model for creating an invoice for a client."""

    limit_date_from: Optional[datetime.date] = None
    limit_date_till: Optional[datetime.date] = None
    include_expenses: Optional[bool] = None
    include_time: Optional[bool] = None
    projects: Optional[list[str]] = None
    discount: Optional[RateAdjustment] = None
    tax: Optional[RateAdjustment] = None


class InvoiceRefreshRequest(RequestModel):
    """Request model for refreshing invoice line items."""

    limit_date_from: Optional[datetime.date] = None
    limit_date_till: Optional[datetime.date] = None
    include_expenses: Optional[bool] = None
    include_time: Optional[bool] = None
    projects: Optional[list[str]] = None
    expense_mask: Optional[str] = None
    time_mask: Optional[str] = None


class InvoiceUpdateRequest(RequestModel):
    """Request model for updating an invoice."""

    public_id: Optional[str] = None
    reference: Optional[str] = None
    public_notes: Optional[str] = None
    issue_date: Optional[datetime.date] = None
    due_date: Optional[datetime.date] = None
    invoice_items: Optional[list[InvoiceRequestItem]] = None
    discount: Optional[RateAdjustment] = None
    tax: Optional[RateAdjustment] = None


# ============================================================================
# Expenses and attachments
# ============================================================================


class AttachmentRequest(RequestModel):
    """Request model for uploading an attachment."""

    name: str = Field(..., min_length=1)
    content: str = Field(..., description="Base64 file content, jpg, png or pdf")


class AttachmentReference(RequestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    token: Optional[str] = None


class ExpenseRequest(RequestModel):
    """Request model for creating or updating an expense."""

    category: int
    amount: Optional[int] = Field(None, description="Amount in cents")
    date: Optional[datetime.date] = None
    details: Optional[str] = None
    project: Optional[str] = None
    user: Optional[int] = None
    quantity: Optional[float] = None
    billable: Optional[bool] = None
    attachments: Optional[list[AttachmentReference]] = None


class ExpenseCategoryRequest(RequestModel):
    """Request model for creating or updating an expense category."""

    name: str = Field(..., min_length=1)
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$", description="Hex color code")
    unit_based: Optional[bool] = None
    unit_name: Optional[str] = None
    unit_price: Optional[int] = None


class ExpenseCategoryDeleteRequest(RequestModel):
    """Request model for deleting an expense category."""

    remove_expenses: Optional[bool] = None
    target_category: Optional[int] = Field(None, description="Category receiving the expenses")


# ============================================================================
# Resource planner and webhooks
# ============================================================================


class AssignmentRequest(RequestModel):
    """Request model for creating or updating a resource planner assignment."""

    type: Optional[AssignmentType] = None
    project: Optional[str] = None
    user: Optional[str] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    time: Optional[str] = Field(None, description="Scheduled time in seconds")
    force_override: Optional[bool] = None


class WebhookRequest(RequestModel):
    """Request model for creating or updating a webhook."""

    target_url: str = Field(..., min_length=1)
    events: list[WebhookEventType] = Field(..., min_length=1)
    project: Optional[str] = Field(None, description="Only receive events for this project")
