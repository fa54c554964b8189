"""Tests for the invoice item client against canned responses."""

import pytest

from payclient.exceptions import NotFoundError, ValidationError
from payclient.filters import FilterSet
from payclient.models import DeletedResource, InvoiceItem

pytestmark = pytest.mark.unit


class TestInvoiceItemCreate:
    def test_create_posts_form_fields(self, pay_client, fake_transport, sample_item_payload):
        fake_transport.queue(sample_item_payload)

        item = pay_client.invoice_items.create(
            customer="cus_1",
            amount=100,
            currency="USD",
            description="Test InvoiceItem",
            metadata={"order": "42"},
        )

        assert isinstance(item, InvoiceItem)
        assert item.id == "ii_1"
        assert fake_transport.last_call == (
            "POST",
            "/v1/invoiceitems",
            [
                ("customer", "cus_1"),
                ("amount", "100"),
                ("currency", "usd"),
                ("description", "Test InvoiceItem"),
                ("metadata[order]", "42"),
            ],
        )

    @pytest.mark.parametrize("missing", ["customer", "amount", "currency"])
    def test_missing_required_field_fails_locally(self, pay_client, fake_transport, missing):
        fields = {"customer": "cus_1", "amount": 100, "currency": "usd"}
        del fields[missing]

        with pytest.raises(ValidationError) as exc_info:
            pay_client.invoice_items.create(**fields)

        assert exc_info.value.param == missing
        assert fake_transport.calls == []

    def test_unknown_keyword_is_rejected(self, pay_client, fake_transport):
        with pytest.raises(ValidationError):
            pay_client.invoice_items.create(customer="cus_1", amount=1, currency="usd", colour="red")
        assert fake_transport.calls == []

    def test_service_rejection_propagates(self, pay_client, fake_transport):
        fake_transport.queue(ValidationError("Invalid positive integer", param="amount", status_code=400))

        with pytest.raises(ValidationError) as exc_info:
            pay_client.invoice_items.create(customer="cus_1", amount=0, currency="usd")

        assert exc_info.value.status_code == 400
        assert len(fake_transport.calls) == 1


class TestInvoiceItemReadUpdateDelete:
    def test_get(self, pay_client, fake_transport, sample_item_payload):
        fake_transport.queue(sample_item_payload)

        item = pay_client.invoice_items.get("ii_1")

        assert item.amount == 100
        assert fake_transport.last_call == ("GET", "/v1/invoiceitems/ii_1", [])

    def test_get_unknown_id_carries_resource_id(self, pay_client, fake_transport):
        fake_transport.queue(NotFoundError("No such invoiceitem: 'ii_x'"))

        with pytest.raises(NotFoundError) as exc_info:
            pay_client.invoice_items.get("ii_x")

        assert exc_info.value.resource_id == "ii_x"

    @pytest.mark.parametrize(
        "call",
        [
            lambda items: items.update("ii_x", amount=5),
            lambda items: items.delete("ii_x"),
        ],
        ids=["update", "delete"],
    )
    def test_unknown_id_carries_resource_id(self, pay_client, fake_transport, call):
        fake_transport.queue(NotFoundError("No such invoiceitem: 'ii_x'"))

        with pytest.raises(NotFoundError) as exc_info:
            call(pay_client.invoice_items)

        assert exc_info.value.resource_id == "ii_x"

    def test_get_empty_id_fails_locally(self, pay_client, fake_transport):
        with pytest.raises(ValidationError):
            pay_client.invoice_items.get("")
        assert fake_transport.calls == []

    def test_update_sends_only_supplied_fields(self, pay_client, fake_transport, sample_item_payload):
        fake_transport.queue(
            {**sample_item_payload, "amount": 99, "description": "Updated Desc", "discountable": True}
        )

        item = pay_client.invoice_items.update(
            "ii_1", amount=99, description="Updated Desc", discountable=True
        )

        assert (item.amount, item.description, item.discountable) == (99, "Updated Desc", True)
        assert fake_transport.last_call == (
            "POST",
            "/v1/invoiceitems/ii_1",
            [("amount", "99"), ("description", "Updated Desc"), ("discountable", "true")],
        )

    def test_delete_returns_marker_every_time(self, pay_client, fake_transport):
        marker = {"id": "ii_1", "object": "invoiceitem", "deleted": True}
        fake_transport.queue(marker, marker)

        first = pay_client.invoice_items.delete("ii_1")
        second = pay_client.invoice_items.delete("ii_1")

        assert first == second == DeletedResource(id="ii_1", object="invoiceitem", deleted=True)
        assert [call[0] for call in fake_transport.calls] == ["DELETE", "DELETE"]


class TestInvoiceItemList:
    def test_list_scoped_by_customer(self, pay_client, fake_transport, sample_item_payload):
        fake_transport.queue(
            {"object": "list", "data": [sample_item_payload], "has_more": False, "url": "/v1/invoiceitems"}
        )

        items = pay_client.invoice_items.list(
            customer="cus_1", filters=FilterSet().gte("created", 1700000000)
        )
        result = list(items)

        assert [i.id for i in result] == ["ii_1"]
        assert items.err is None
        assert items.meta is not None
        assert fake_transport.last_call == (
            "GET",
            "/v1/invoiceitems",
            [("customer", "cus_1"), ("created[gte]", "1700000000")],
        )

    def test_invalid_limit_fails_locally(self, pay_client):
        with pytest.raises(ValidationError) as exc_info:
            pay_client.invoice_items.list(limit=500)
        assert exc_info.value.param == "limit"
