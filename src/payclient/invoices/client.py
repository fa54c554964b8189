"""
Invoice client.

Creating an invoice makes the service gather the customer's pending
invoice items into its lines and compute the amounts; this client only
passes parameters through and decodes the result.
"""

from typing import Any

import structlog

from payclient.exceptions import PaymentError
from payclient.iterator import ListIterator
from payclient.invoices.params import (
    CloseAction,
    InvoiceCreateParams,
    InvoiceLineListParams,
    InvoiceListParams,
    InvoicePayParams,
    InvoiceUpdateParams,
    UpcomingInvoiceParams,
)
from payclient.models import Invoice, InvoiceLine, ListMeta
from payclient.params import build_params
from payclient.resource import ResourceClient
from payclient.transport import GET, POST

logger = structlog.get_logger(__name__)


class InvoiceClient(ResourceClient):
    """CRUD, payment, preview and listing for ``/v1/invoices``."""

    path = "/v1/invoices"

    def create(self, **fields: Any) -> Invoice:
        """
        Create an invoice for a customer.

        Args:
            **fields: ``customer`` is required; see ``InvoiceCreateParams``

        Returns:
            The invoice with its lines, amounts and period as computed by
            the service
        """
        params = build_params(InvoiceCreateParams, fields)
        invoice = self._decode(Invoice, self._request(POST, self.path, params.to_pairs()))
        logger.info(
            "invoice created",
            invoice_id=invoice.id,
            customer_id=invoice.customer,
            amount=invoice.amount,
            line_count=invoice.lines.count,
        )
        return invoice

    def get(self, invoice_id: str) -> Invoice:
        """Retrieve an invoice; raises ``NotFoundError`` for unknown ids."""
        path = self._instance_path(invoice_id)
        return self._decode(Invoice, self._request(GET, path, resource_id=invoice_id))

    def update(self, invoice_id: str, **fields: Any) -> Invoice:
        """
        Update an invoice.

        Args:
            invoice_id: Invoice id
            **fields: ``close`` (a ``CloseAction``), ``description``,
                ``statement_descriptor``, ``tax_percent``, ``forgiven``,
                ``due_date``, ``metadata``...

        Returns:
            The full updated invoice
        """
        path = self._instance_path(invoice_id)
        params = build_params(InvoiceUpdateParams, fields)
        payload = self._request(POST, path, params.to_pairs(), resource_id=invoice_id)
        invoice = self._decode(Invoice, payload)
        if params.close is not CloseAction.NO_CHANGE:
            logger.info(
                "invoice close state changed",
                invoice_id=invoice.id,
                action=params.close.value,
                closed=invoice.closed,
            )
        return invoice

    def pay(self, invoice_id: str, source: str | None = None) -> Invoice:
        """
        Attempt to pay an invoice now.

        Exactly one request is sent; the call is never retried here since
        a retry could charge twice.

        Args:
            invoice_id: Invoice id
            source: Payment source to charge, defaults to the customer's

        Returns:
            The invoice, ``paid`` set on success

        Raises:
            PaymentError: If the payment was declined
        """
        path = f"{self._instance_path(invoice_id)}/pay"
        params = build_params(InvoicePayParams, {"source": source})
        logger.info("invoice payment attempt", invoice_id=invoice_id)
        try:
            payload = self._request(POST, path, params.to_pairs(), resource_id=invoice_id)
        except PaymentError as e:
            logger.warning(
                "invoice payment declined",
                invoice_id=invoice_id,
                decline_code=e.decline_code,
                request_id=e.request_id,
            )
            raise
        invoice = self._decode(Invoice, payload)
        logger.info("invoice payment completed", invoice_id=invoice.id, paid=invoice.paid)
        return invoice

    def preview_next(self, **fields: Any) -> Invoice:
        """
        Compute the next invoice for a customer without persisting it.

        Args:
            **fields: ``customer`` is required; optional hypothetical
                subscription change, see ``UpcomingInvoiceParams``

        Returns:
            The previewed invoice (it has no id)
        """
        params = build_params(UpcomingInvoiceParams, fields)
        payload = self._request(GET, f"{self.path}/upcoming", params.to_pairs())
        return self._decode(Invoice, payload)

    def list_lines(self, invoice_id: str, **fields: Any) -> ListIterator[InvoiceLine]:
        """
        List the lines of one invoice lazily.

        Args:
            invoice_id: Invoice id
            **fields: ``customer``, ``subscription``, ``filters``, ``limit``...

        Returns:
            Iterator over this invoice's lines only
        """
        path = f"{self._instance_path(invoice_id)}/lines"
        params = build_params(InvoiceLineListParams, fields)
        return self._list(path, params, InvoiceLine.model_validate)

    def iter_all_lines(self, invoice: Invoice, **fields: Any) -> ListIterator[InvoiceLine]:
        """
        Iterate every line of an invoice already fetched.

        The embedded line list may be truncated; when it is, iteration
        continues through the lines endpoint after the last embedded line.
        """
        # Previews have no id; the cursor stays unset so nothing more is fetched
        if invoice.id:
            path = f"{self._instance_path(invoice.id)}/lines"
        else:
            path = f"{self.path}/upcoming/lines"
        params = build_params(InvoiceLineListParams, fields)
        lines = self._list(path, params, InvoiceLine.model_validate)
        embedded = invoice.lines.data
        cursor = embedded[-1].id if embedded and invoice.id else None
        meta = ListMeta(
            has_more=invoice.lines.has_more,
            total_count=invoice.lines.total_count,
            url=invoice.lines.url,
        )
        lines.prime(embedded, meta, cursor)
        return lines

    def list(self, **fields: Any) -> ListIterator[Invoice]:
        """
        List invoices lazily.

        Args:
            **fields: ``customer``, ``subscription``, ``billing``,
                ``due_date``, ``date``, ``filters`` (a ``FilterSet``, e.g.
                ``FilterSet().gt("due_date", ts)``), ``limit``,
                ``starting_after``, ``ending_before``, ``single_page``

        Returns:
            Iterator over matching invoices; check ``err`` after the loop
        """
        params = build_params(InvoiceListParams, fields)
        return self._list(self.path, params, Invoice.model_validate)
