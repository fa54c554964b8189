"""
Invoice item client.

Invoice items are pending charges or credits attached to a customer. They
are swept into the next invoice created for that customer.
"""

from typing import Any

import structlog

from payclient.iterator import ListIterator
from payclient.invoice_items.params import (
    InvoiceItemCreateParams,
    InvoiceItemListParams,
    InvoiceItemUpdateParams,
)
from payclient.models import DeletedResource, InvoiceItem
from payclient.params import build_params
from payclient.resource import ResourceClient
from payclient.transport import DELETE, GET, POST

logger = structlog.get_logger(__name__)


class InvoiceItemClient(ResourceClient):
    """CRUD and listing for ``/v1/invoiceitems``."""

    path = "/v1/invoiceitems"

    def create(self, **fields: Any) -> InvoiceItem:
        """
        Create a pending invoice item.

        Args:
            **fields: ``customer``, ``amount`` and ``currency`` are required;
                see ``InvoiceItemCreateParams`` for the optional ones

        Returns:
            The created item

        Raises:
            ValidationError: If a required field is missing, or the service
                rejects the values (e.g. a zero amount)
        """
        params = build_params(InvoiceItemCreateParams, fields)
        payload = self._request(POST, self.path, params.to_pairs())
        item = self._decode(InvoiceItem, payload)
        logger.info(
            "invoice item created",
            invoice_item_id=item.id,
            customer_id=item.customer,
            amount=item.amount,
            currency=item.currency,
        )
        return item

    def get(self, item_id: str) -> InvoiceItem:
        """Retrieve an invoice item; raises ``NotFoundError`` for unknown ids."""
        path = self._instance_path(item_id)
        return self._decode(InvoiceItem, self._request(GET, path, resource_id=item_id))

    def update(self, item_id: str, **fields: Any) -> InvoiceItem:
        """
        Update the supplied fields of an invoice item.

        Args:
            item_id: Invoice item id
            **fields: Any of ``amount``, ``description``, ``discountable``, ``metadata``

        Returns:
            The full updated item
        """
        path = self._instance_path(item_id)
        params = build_params(InvoiceItemUpdateParams, fields)
        payload = self._request(POST, path, params.to_pairs(), resource_id=item_id)
        return self._decode(InvoiceItem, payload)

    def delete(self, item_id: str) -> DeletedResource:
        """
        Delete an invoice item that has not been invoiced yet.

        Deleting an already deleted id is reported by the service as a
        success carrying ``deleted=True``; that result is returned as is.
        """
        path = self._instance_path(item_id)
        result = self._decode(
            DeletedResource, self._request(DELETE, path, resource_id=item_id)
        )
        logger.info("invoice item deleted", invoice_item_id=result.id, deleted=result.deleted)
        return result

    def list(self, **fields: Any) -> ListIterator[InvoiceItem]:
        """
        List invoice items lazily.

        Args:
            **fields: ``customer``, ``invoice``, ``pending``, ``filters``
                (a ``FilterSet``), ``limit``, ``starting_after``,
                ``ending_before``, ``single_page``

        Returns:
            Iterator over the matching items; check ``err`` after the loop
        """
        params = build_params(InvoiceItemListParams, fields)
        return self._list(self.path, params, InvoiceItem.model_validate)
