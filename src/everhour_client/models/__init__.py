"""Request and resource models for the Everhour API."""

from everhour_client.models.requests import (
    AssignmentRequest,
    AttachmentReference,
    AttachmentRequest,
    BillingRate,
    BudgetRequest,
    ClientRequest,
    ExpenseCategoryDeleteRequest,
    ExpenseCategoryRequest,
    ExpenseRequest,
    InvoiceCreateRequest,
    InvoiceRefreshRequest,
    InvoiceRequestItem,
    InvoiceUpdateRequest,
    ProjectBilling,
    ProjectBillingBudgetRequest,
    ProjectRequest,
    RateAdjustment,
    RemoveTimeRecordRequest,
    RequestModel,
    SectionRequest,
    TaskEstimateRequest,
    TaskRequest,
    TimecardActionRequest,
    TimecardRequest,
    TimeRecordRequest,
    TimerRequest,
    WebhookRequest,
)

__all__ = [
    "AssignmentRequest",
    "AttachmentReference",
    "AttachmentRequest",
    "BillingRate",
    "BudgetRequest",
    "ClientRequest",
    "ExpenseCategoryDeleteRequest",
    "ExpenseCategoryRequest",
    "ExpenseRequest",
    "InvoiceCreateRequest",
    "InvoiceRefreshRequest",
    "InvoiceRequestItem",
    "InvoiceUpdateRequest",
    "ProjectBilling",
    "ProjectBillingBudgetRequest",
    "ProjectRequest",
    "RateAdjustment",
    "RemoveTimeRecordRequest",
    "RequestModel",
    "SectionRequest",
    "TaskEstimateRequest",
    "TaskRequest",
    "TimecardActionRequest",
    "TimecardRequest",
    "TimeRecordRequest",
    "TimerRequest",
    "WebhookRequest",
]
