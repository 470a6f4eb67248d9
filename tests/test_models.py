"""Tests for request models."""

import datetime
import json

import pytest  # type: ignore[import-not-found]
from pydantic import ValidationError

from everhour_client.models import (
    BudgetRequest,
    ExpenseCategoryRequest,
    InvoiceRequestItem,
    InvoiceUpdateRequest,
    ProjectBilling,
    ProjectBillingBudgetRequest,
    ProjectRequest,
    RequestModel,
    TaskEstimateRequest,
    TimecardRequest,
    TimeRecordRequest,
    TimerRequest,
    WebhookRequest,
)


def dump(model: RequestModel) -> dict:
    """Serialize a model the way the client sends it."""
    return json.loads(model.model_dump_json(by_alias=True, exclude_none=True))


class TestSerialization:
    """Test wire serialization of request models."""

    def test_none_fields_are_dropped(self) -> None:
        """Test that unset optional fields are not sent."""
        assert dump(TimeRecordRequest(date="2024-03-01", time=3600)) == {
            "date": "2024-03-01",
            "time": 3600,
        }

    def test_dates_accept_date_objects(self) -> None:
        """Test that date fields accept datetime.date values."""
        request = TimeRecordRequest(date=datetime.date(2024, 3, 1), time=60, user=42)

        assert dump(request) == {"date": "2024-03-01", "time": 60, "user": 42}

    def test_camel_case_aliases(self) -> None:
        """Test that snake_case attributes are sent in camelCase."""
        request = TimecardRequest(clock_in="09:00", clock_out="17:30", break_time=1800)

        assert dump(request) == {"clockIn": "09:00", "clockOut": "17:30", "breakTime": 1800}

    def test_populate_by_alias(self) -> None:
        """Test that models can be built from camelCase keys."""
        request = TimerRequest.model_validate({"task": "ev:1", "userDate": "2024-03-01"})

        assert request.user_date == datetime.date(2024, 3, 1)

    def test_enum_fields_have_no_implicit_value(self) -> None:
        """Test that unset enum fields are left for the service to keep."""
        assert dump(ProjectRequest(name="Website")) == {"name": "Website"}
        assert dump(BudgetRequest(type="money", budget=100)) == {"type": "money", "budget": 100}
        assert dump(TaskEstimateRequest(total=3600)) == {"total": 3600}

    def test_nested_models(self) -> None:
        """Test nested request models."""
        request = ProjectBillingBudgetRequest(
            billing=ProjectBilling(type="fixed_fee", fee=100000),
            budget=BudgetRequest(type="time", budget=36000, exclude_unbillable_time=True),
        )

        assert dump(request) == {
            "billing": {"type": "fixed_fee", "fee": 100000},
            "budget": {
                "type": "time",
                "budget": 36000,
                "excludeUnbillableTime": True,
            },
        }

    def test_invoice_items(self) -> None:
        """Test invoice line items inside an update."""
        request = InvoiceUpdateRequest(
            reference="INV-7",
            invoice_items=[InvoiceRequestItem(name="Design", billed_time=7200)],
        )

        assert dump(request) == {
            "reference": "INV-7",
            "invoiceItems": [{"name": "Design", "billedTime": 7200}],
        }


class TestValidation:
    """Test request model validation."""

    def test_negative_time_rejected(self) -> None:
        """Test that time must not be negative."""
        with pytest.raises(ValidationError):
            TimeRecordRequest(date="2024-03-01", time=-1)

    def test_invalid_date_rejected(self) -> None:
        """Test that dates must parse."""
        with pytest.raises(ValidationError):
            TimeRecordRequest(date="not-a-date", time=60)

    def test_empty_timer_task_rejected(self) -> None:
        """Test that a timer needs a task id."""
        with pytest.raises(ValidationError):
            TimerRequest(task="")

    def test_project_type_enum(self) -> None:
        """Test that project type is limited to board or list."""
        ProjectRequest(name="Board", type="board")

        with pytest.raises(ValidationError):
            ProjectRequest(name="Board", type="kanban")  # type: ignore[arg-type]

    def test_budget_threshold_range(self) -> None:
        """Test that the budget threshold is a percentage."""
        BudgetRequest(type="money", budget=100, threshold=100)

        with pytest.raises(ValidationError):
            BudgetRequest(type="money", budget=100, threshold=101)

    def test_category_color_pattern(self) -> None:
        """Test that category colors are hex codes."""
        ExpenseCategoryRequest(name="Travel", color="#1a2B3c")

        with pytest.raises(ValidationError):
            ExpenseCategoryRequest(name="Travel", color="blue")

    def test_webhook_needs_events(self) -> None:
        """Test that a webhook subscribes to at least one known event."""
        with pytest.raises(ValidationError):
            WebhookRequest(target_url="https://example.com/hook", events=[])

        with pytest.raises(ValidationError):
            WebhookRequest(
                target_url="https://example.com/hook",
                events=["api:unknown"],  # type: ignore[list-item]
            )
