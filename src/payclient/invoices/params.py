"""
Invoice request parameters.

Only the presence of required fields is checked here; value rules such as
tax ranges or descriptor lengths are enforced by the service.
"""

from enum import Enum
from typing import ClassVar

from pydantic import Field

from payclient.encoding import encode_params
from payclient.models import BillingMode
from payclient.params import ListParams, RequestParams


class CloseAction(str, Enum):
    """Single intent for the invoice ``closed`` flag."""

    NO_CHANGE = "no_change"
    CLOSE = "close"
    REOPEN = "reopen"


class InvoiceCreateParams(RequestParams):
    """Parameters for creating an invoice from the customer's pending items."""

    customer: str = Field(..., min_length=1)
    billing: BillingMode | None = Field(
        None, description="Service default is charge_automatically"
    )
    due_date: int | None = Field(None, description="Epoch seconds; only with send_invoice")
    days_until_due: int | None = None
    tax_percent: float | None = None
    description: str | None = None
    statement_descriptor: str | None = None
    subscription: str | None = None
    application_fee: int | None = None
    metadata: dict[str, str] | None = None


class InvoiceUpdateParams(RequestParams):
    """Partial invoice update; only supplied fields are sent."""

    LOCAL_FIELDS: ClassVar[set[str]] = {"close"}

    close: CloseAction = CloseAction.NO_CHANGE
    description: str | None = None
    statement_descriptor: str | None = None
    tax_percent: float | None = None
    forgiven: bool | None = None
    due_date: int | None = None
    days_until_due: int | None = None
    application_fee: int | None = None
    metadata: dict[str, str] | None = None

    def to_pairs(self) -> list[tuple[str, str]]:
        pairs = super().to_pairs()
        if self.close is CloseAction.CLOSE:
            pairs += encode_params({"closed": True})
        elif self.close is CloseAction.REOPEN:
            pairs += encode_params({"closed": False})
        return pairs


class InvoicePayParams(RequestParams):
    """Payment attempt parameters."""

    source: str | None = Field(None, description="Payment source to charge")


class UpcomingInvoiceParams(RequestParams):
    """Hypothetical changes for the next-invoice preview."""

    LOCAL_FIELDS: ClassVar[set[str]] = {"skip_proration"}

    customer: str = Field(..., min_length=1)
    subscription: str | None = None
    subscription_plan: str | None = None
    subscription_quantity: int | None = None
    subscription_proration_date: int | None = None
    subscription_trial_end: int | None = None
    skip_proration: bool = Field(False, description="Preview without prorating the change")
    coupon: str | None = None

    def to_pairs(self) -> list[tuple[str, str]]:
        pairs = super().to_pairs()
        if self.skip_proration:
            pairs += encode_params({"subscription_prorate": False})
        return pairs


class InvoiceListParams(ListParams):
    """List filters for invoices."""

    customer: str | None = None
    subscription: str | None = None
    billing: BillingMode | None = None
    due_date: int | None = Field(None, description="Exact due date; use filters for ranges")
    date: int | None = None


class InvoiceLineListParams(ListParams):
    """Optional scoping for an invoice's lines."""

    customer: str | None = None
    subscription: str | None = None
