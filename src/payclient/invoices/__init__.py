"""
Invoices: billable statements built from a customer's pending items.
"""

__all__ = [
    "CloseAction",
    "InvoiceClient",
    "InvoiceCreateParams",
    "InvoiceLineListParams",
    "InvoiceListParams",
    "InvoicePayParams",
    "InvoiceUpdateParams",
    "UpcomingInvoiceParams",
]

from payclient.invoices.client import InvoiceClient
from payclient.invoices.params import (
    CloseAction,
    InvoiceCreateParams,
    InvoiceLineListParams,
    InvoiceListParams,
    InvoicePayParams,
    InvoiceUpdateParams,
    UpcomingInvoiceParams,
)
