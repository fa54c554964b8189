"""
Resource models for invoices, invoice lines and invoice items.

Models decode the service's JSON payloads. Monetary amounts are integers in
the currency's minor unit; timestamps are epoch seconds. Derived amounts
(``subtotal``, ``tax``, ``total``) are service-computed and never
recalculated locally.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def _expandable_id(value: Any) -> Any:
    """Accept either an id string or an expanded object carrying an ``id``."""
    if isinstance(value, dict):
        return value.get("id")
    return value


def _lower(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


ExpandableId = Annotated[str | None, BeforeValidator(_expandable_id)]
Currency = Annotated[str | None, BeforeValidator(_lower)]


class BillingMode(str, Enum):
    """How an invoice gets collected."""

    SEND_INVOICE = "send_invoice"
    CHARGE_AUTOMATICALLY = "charge_automatically"


class LineType(str, Enum):
    """Origin of an invoice line."""

    INVOICE_ITEM = "invoiceitem"
    SUBSCRIPTION = "subscription"


class ResourceModel(BaseModel):
    """Base model for decoded service resources."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str | None = None
    object: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)


class Period(BaseModel):
    """Billing period, both bounds in epoch seconds."""

    model_config = ConfigDict(frozen=True)

    start: int = 0
    end: int = 0

    @model_validator(mode="after")
    def check_bounds(self) -> "Period":
        if self.end < self.start:
            raise ValueError(f"period end {self.end} is before start {self.start}")
        return self


class ListMeta(BaseModel):
    """Pagination signals of a list envelope."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    has_more: bool = False
    total_count: int | None = None
    url: str | None = None


class InvoiceLine(ResourceModel):
    """Read-only line of an invoice, projected from an item or a subscription."""

    amount: int = 0
    currency: Currency = None
    description: str | None = None
    discountable: bool = False
    period: Period | None = None
    proration: bool = False
    quantity: int | None = None
    subscription: str | None = None
    type: LineType | None = None


class InvoiceLineList(ListMeta):
    """Lines embedded in an invoice payload; may be truncated (``has_more``)."""

    object: str | None = "list"
    data: list[InvoiceLine] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of lines embedded in this payload."""
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> InvoiceLine:
        return self.data[index]


class Invoice(ResourceModel):
    """A billable statement aggregating a customer's pending charges."""

    customer: ExpandableId = None
    subscription: ExpandableId = None

    # Service-computed amounts; amount == subtotal + tax
    amount: int = Field(0, alias="amount_due")
    total: int = 0
    subtotal: int = 0
    tax: int | None = None
    tax_percent: float | None = None
    currency: Currency = None
    application_fee: int | None = None

    billing: BillingMode | None = None
    due_date: int | None = None

    closed: bool = False
    paid: bool = False
    forgiven: bool = False
    attempted: bool = False
    attempt_count: int = 0
    charge: ExpandableId = None
    next_payment_attempt: int | None = None

    period_start: int | None = None
    period_end: int | None = None
    lines: InvoiceLineList = Field(default_factory=InvoiceLineList)

    description: str | None = None
    statement_descriptor: str | None = None
    date: int | None = None


class InvoiceItem(ResourceModel):
    """A pending charge or credit for a customer."""

    customer: ExpandableId = None
    amount: int = 0
    currency: Currency = None
    description: str | None = None
    discountable: bool = False
    date: int | None = None
    invoice: ExpandableId = None
    subscription: ExpandableId = None
    proration: bool = False
    quantity: int | None = None
    period: Period | None = None


class DeletedResource(BaseModel):
    """Marker returned by delete calls."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    object: str | None = None
    deleted: bool = False
