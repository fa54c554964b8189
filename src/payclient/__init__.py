"""
Typed client for the invoice resources of a payment-processing API.

Provides:
- Invoice CRUD, payment, next-invoice preview and line listing
- Invoice item CRUD and listing
- Lazy paginated listing with comparison filters
"""

from payclient.client import PayClient
from payclient.exceptions import (
    AuthenticationError,
    NotFoundError,
    PayClientError,
    PaymentError,
    RateLimitError,
    RemoteServiceError,
    TransportError,
    ValidationError,
)
from payclient.filters import Filter, FilterOperator, FilterSet
from payclient.invoices.params import CloseAction
from payclient.iterator import IteratorStateError, ListIterator
from payclient.logging import configure_logging
from payclient.models import (
    BillingMode,
    DeletedResource,
    Invoice,
    InvoiceItem,
    InvoiceLine,
    InvoiceLineList,
    LineType,
    ListMeta,
    Period,
)
from payclient.settings import ClientSettings, get_settings

__version__ = "1.0.0"

__all__ = [
    # Client
    "PayClient",
    "ClientSettings",
    "get_settings",
    "configure_logging",
    # Filters and iteration
    "Filter",
    "FilterOperator",
    "FilterSet",
    "ListIterator",
    "IteratorStateError",
    "ListMeta",
    # Resources
    "BillingMode",
    "CloseAction",
    "DeletedResource",
    "Invoice",
    "InvoiceItem",
    "InvoiceLine",
    "InvoiceLineList",
    "LineType",
    "Period",
    # Exceptions
    "PayClientError",
    "ValidationError",
    "NotFoundError",
    "PaymentError",
    "TransportError",
    "RemoteServiceError",
    "AuthenticationError",
    "RateLimitError",
]
