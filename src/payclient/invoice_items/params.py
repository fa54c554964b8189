"""
Invoice item request parameters.
"""

from pydantic import Field, field_validator

from payclient.params import ListParams, RequestParams


class InvoiceItemCreateParams(RequestParams):
    """Parameters for creating a pending invoice item."""

    customer: str = Field(..., min_length=1, description="Customer the item is billed to")
    amount: int = Field(..., description="Amount in minor units")
    currency: str = Field(..., min_length=1, description="ISO currency code")
    description: str | None = None
    discountable: bool | None = None
    invoice: str | None = Field(None, description="Attach to an existing open invoice")
    subscription: str | None = None
    metadata: dict[str, str] | None = None

    @field_validator("currency")
    @classmethod
    def lower_currency(cls, v: str) -> str:
        return v.lower()


class InvoiceItemUpdateParams(RequestParams):
    """Partial update; only supplied fields are sent."""

    amount: int | None = None
    description: str | None = None
    discountable: bool | None = None
    metadata: dict[str, str] | None = None


class InvoiceItemListParams(ListParams):
    """List filters for invoice items."""

    customer: str | None = None
    invoice: str | None = None
    pending: bool | None = Field(None, description="Only items not yet on an invoice")
