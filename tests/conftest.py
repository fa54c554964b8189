"""
Shared pytest fixtures for the payment client tests.

No test touches the network: resource clients run against ``FakeTransport``
(canned payloads) or ``FakeBillingService`` (in-memory service), and the
HTTP transport is exercised through ``httpx.MockTransport``.
"""

import pytest

from payclient.client import PayClient
from payclient.settings import ClientSettings
from tests.fakes import FakeBillingService, FakeTransport


@pytest.fixture
def client_settings() -> ClientSettings:
    """Settings with a test key and no .env influence on paging."""
    return ClientSettings(
        api_key="sk_test_123",
        api_base="https://api.example.test/",
        api_version="2018-02-28",
        page_size=None,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def fake_service() -> FakeBillingService:
    return FakeBillingService()


@pytest.fixture
def pay_client(client_settings, fake_transport) -> PayClient:
    """Client wired to canned responses."""
    return PayClient(settings=client_settings, transport=fake_transport)


@pytest.fixture
def service_client(client_settings, fake_service) -> PayClient:
    """Client wired to the in-memory service."""
    return PayClient(settings=client_settings, transport=fake_service)


@pytest.fixture
def sample_line_payload() -> dict:
    return {
        "id": "ii_1",
        "object": "line_item",
        "amount": 100,
        "currency": "usd",
        "description": "Test InvoiceItem",
        "discountable": True,
        "period": {"start": 1700000001, "end": 1700000001},
        "proration": False,
        "type": "invoiceitem",
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def sample_invoice_payload(sample_line_payload) -> dict:
    return {
        "id": "in_1",
        "object": "invoice",
        "customer": "cus_1",
        "subscription": None,
        "amount_due": 120,
        "total": 120,
        "subtotal": 100,
        "tax": 20,
        "tax_percent": 20.0,
        "currency": "usd",
        "billing": "send_invoice",
        "due_date": 1700100000,
        "closed": False,
        "paid": False,
        "forgiven": False,
        "attempted": False,
        "attempt_count": 0,
        "date": 1700000002,
        "period_start": 1700000001,
        "period_end": 1700000001,
        "description": "Test Invoice",
        "statement_descriptor": "Statement",
        "livemode": False,
        "metadata": {},
        "lines": {
            "object": "list",
            "data": [sample_line_payload],
            "has_more": False,
            "total_count": 1,
            "url": "/v1/invoices/in_1/lines",
        },
    }


@pytest.fixture
def sample_item_payload() -> dict:
    return {
        "id": "ii_1",
        "object": "invoiceitem",
        "customer": "cus_1",
        "amount": 100,
        "currency": "usd",
        "description": "Test InvoiceItem",
        "discountable": True,
        "date": 1700000001,
        "invoice": None,
        "period": {"start": 1700000001, "end": 1700000001},
        "livemode": False,
        "metadata": {},
    }
