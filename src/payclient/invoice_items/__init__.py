"""
Invoice items: pending charges and credits awaiting an invoice.
"""

__all__ = [
    "InvoiceItemClient",
    "InvoiceItemCreateParams",
    "InvoiceItemListParams",
    "InvoiceItemUpdateParams",
]

from payclient.invoice_items.client import InvoiceItemClient
from payclient.invoice_items.params import (
    InvoiceItemCreateParams,
    InvoiceItemListParams,
    InvoiceItemUpdateParams,
)
