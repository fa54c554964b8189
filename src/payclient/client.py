"""
Entry point wiring settings, transport and resource clients together.
"""

from types import TracebackType

import structlog

from payclient.invoice_items.client import InvoiceItemClient
from payclient.invoices.client import InvoiceClient
from payclient.settings import ClientSettings, get_settings
from payclient.transport import HttpxTransport, Transport

logger = structlog.get_logger(__name__)


class PayClient:
    """Client for the invoice and invoice item resources.

    Usage::

        with PayClient() as client:
            item = client.invoice_items.create(customer="cus_1", amount=100, currency="usd")
            invoice = client.invoices.create(customer="cus_1", tax_percent=20)
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: Transport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Client settings, defaults to values from the environment
            transport: Transport override, e.g. an in-memory fake in tests
        """
        self.settings = settings or get_settings()
        self.transport: Transport = transport or HttpxTransport(self.settings)

        self.invoices = InvoiceClient(self.transport, self.settings)
        self.invoice_items = InvoiceItemClient(self.transport, self.settings)

        logger.debug(
            "payment client initialized",
            api_base=self.settings.api_base,
            api_version=self.settings.api_version,
            configured=self.settings.is_configured,
        )

    def close(self) -> None:
        """Release the HTTP connection pool, if the transport holds one."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "PayClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
