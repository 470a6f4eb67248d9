"""Invoice endpoints."""

from typing import Any

from everhour_client.core.client import EverhourApiClient
from everhour_client.models.requests import (
    InvoiceCreateRequest,
    InvoiceRefreshRequest,
    InvoiceUpdateRequest,
)
from everhour_client.models.resources import Invoice, InvoiceStatusType


async def get_all_invoices(client: EverhourApiClient) -> list[Invoice]:
    url = client.create_url("/invoices")
    return await client.api_request("GET", url)


async def get_invoice(client: EverhourApiClient, invoice_id: int) -> Invoice:
    url = client.create_url("/invoices/{invoiceId}", {"invoiceId": invoice_id})
    return await client.api_request("GET", url)


async def create_invoice(
    client: EverhourApiClient, client_id: int, payload: InvoiceCreateRequest
) -> Invoice:
    """Create a draft invoice for a client from its uninvoiced time and expenses."""
    url = client.create_url("/clients/{clientId}/invoices", {"clientId": client_id})
    return await client.api_request("POST", url, payload)


async def update_invoice(
    client: EverhourApiClient, invoice_id: int, payload: InvoiceUpdateRequest
) -> Invoice:
    url = client.create_url("/invoices/{invoiceId}", {"invoiceId": invoice_id})
    return await client.api_request("PUT", url, payload)


async def delete_invoice(client: EverhourApiClient, invoice_id: int) -> Any:
    url = client.create_url("/invoices/{invoiceId}", {"invoiceId": invoice_id})
    return await client.api_request("DELETE", url)


async def refresh_invoice_line_items(
    client: EverhourApiClient, invoice_id: int, payload: InvoiceRefreshRequest
) -> Invoice:
    """Rebuild the line items of an invoice from current time and expenses."""
    url = client.create_url("/invoices/{invoiceId}/reset-time", {"invoiceId": invoice_id})
    return await client.api_request("POST", url, payload)


async def mark_invoice_as(
    client: EverhourApiClient, invoice_id: int, status: InvoiceStatusType
) -> Invoice:
    """Mark an invoice as draft, sent or paid."""
    url = client.create_url(
        "/invoices/{invoiceId}/{status}", {"invoiceId": invoice_id, "status": status}
    )
    return await client.api_request("POST", url)


async def export_invoice(client: EverhourApiClient, invoice_id: int) -> Invoice:
    """Export an invoice to the connected accounting integration (Xero, QuickBooks, FreshBooks)."""
    url = client.create_url("/invoices/{invoiceId}/export", {"invoiceId": invoice_id})
    return await client.api_request("POST", url)
