"""
Lazy, page-at-a-time iteration over list endpoints.

``ListIterator`` owns its page buffer and cursor. The first page is fetched
on the first ``advance()``; later pages are fetched when the buffer runs
dry and the previous envelope reported ``has_more``. Failures are sticky:
once a fetch fails, ``advance()`` keeps returning ``False`` and ``err``
holds the exception. Typical use::

    invoices = client.invoices.list(customer="cus_123")
    for invoice in invoices:
        ...
    if invoices.err:
        raise invoices.err

An instance is single-pass and must not be advanced from several threads
at once; build a fresh iterator to scan again.
"""

from collections import deque
from collections.abc import Callable
from typing import Any, Generic, TypeVar

import structlog
from pydantic import ValidationError as PydanticValidationError

from payclient.exceptions import PayClientError, TransportError
from payclient.models import ListMeta
from payclient.params import ListParams
from payclient.transport import GET, Transport

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class IteratorStateError(RuntimeError):
    """``current`` read while the iterator is not positioned on an element."""


class ListIterator(Generic[T]):
    """Forward-only cursor over a paginated collection."""

    def __init__(
        self,
        transport: Transport,
        path: str,
        params: ListParams,
        decode: Callable[[dict[str, Any]], T],
        page_size: int | None = None,
    ) -> None:
        """
        Initialize the iterator; no request is made until ``advance()``.

        Args:
            transport: Transport used for every page fetch
            path: List endpoint, e.g. ``/v1/invoices``
            params: Scoping fields, filters and cursor
            decode: Turns one element payload into a model
            page_size: Default ``limit`` when ``params.limit`` is unset
        """
        self._transport = transport
        self._path = path
        self._params = params
        self._decode = decode
        self._limit = params.limit or page_size
        self._backward = params.ending_before is not None
        self._cursor = params.ending_before if self._backward else params.starting_after

        self._buffer: deque[T] = deque()
        self._current: T | None = None
        self._positioned = False
        self._meta: ListMeta | None = None
        self._err: PayClientError | None = None
        self._exhausted = False
        self._pages_fetched = 0

    @property
    def current(self) -> T:
        """Element the iterator is positioned on."""
        if not self._positioned:
            raise IteratorStateError(
                "current is only available after advance() returned True"
            )
        return self._current  # type: ignore[return-value]

    @property
    def meta(self) -> ListMeta | None:
        """Pagination metadata of the most recently fetched page."""
        return self._meta

    @property
    def err(self) -> PayClientError | None:
        """Sticky error of a failed fetch, if any."""
        return self._err

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def _page_query(self) -> list[tuple[str, str]]:
        query = self._params.to_pairs()
        if self._limit is not None:
            query.append(("limit", str(self._limit)))
        if self._cursor is not None:
            query.append(("ending_before" if self._backward else "starting_after", self._cursor))
        return query

    def _needs_page(self) -> bool:
        if self._meta is None:
            return True
        if self._params.single_page:
            return False
        return self._meta.has_more

    def _fetch_page(self) -> bool:
        """Fetch and decode the next page; return False on failure or empty page."""
        try:
            payload = self._transport.execute(GET, self._path, self._page_query())
            meta = ListMeta.model_validate(payload)
            raw = payload.get("data")
            if not isinstance(raw, list):
                raise TransportError(
                    f"List response of {self._path} has no data array",
                    context={"path": self._path},
                )
            items = [self._decode(item) for item in raw]
        except PydanticValidationError as e:
            self._fail(
                TransportError(
                    f"Could not decode list response of {self._path}: {e}",
                    context={"path": self._path},
                )
            )
            return False
        except PayClientError as e:
            self._fail(e)
            return False

        self._pages_fetched += 1
        self._meta = meta
        if not raw:
            return False

        # Ids are read from the raw payloads so decode can return any type
        cursor_item = raw[0] if self._backward else raw[-1]
        self._cursor = cursor_item.get("id") if isinstance(cursor_item, dict) else None
        if self._cursor is None:
            # Without an id there is no way to ask for the following page
            self._meta = meta.model_copy(update={"has_more": False})

        self._buffer.extend(items)
        logger.debug(
            "list page fetched",
            path=self._path,
            count=len(items),
            has_more=meta.has_more,
            page=self._pages_fetched,
        )
        return True

    def prime(self, items: list[T], meta: ListMeta, cursor: str | None) -> None:
        """
        Load an already-received page, e.g. lines embedded in an invoice.

        Args:
            items: Decoded elements of the page
            meta: Pagination signals that came with the page
            cursor: Id to continue from when ``meta.has_more`` is set
        """
        if self._meta is not None:
            raise IteratorStateError("prime() must be called before the first advance()")
        self._meta = meta if cursor is not None else meta.model_copy(update={"has_more": False})
        self._cursor = cursor
        self._buffer.extend(items)

    def _fail(self, error: PayClientError) -> None:
        logger.warning(
            "list iteration stopped by error",
            path=self._path,
            error_code=error.error_code,
            page=self._pages_fetched + 1,
        )
        self._err = error
        self._buffer.clear()

    def advance(self) -> bool:
        """
        Move to the next element, fetching a page when needed.

        Returns:
            True when positioned on an element; False once the collection
            is exhausted or a fetch failed (see ``err``)
        """
        if self._err is None and not self._exhausted and not self._buffer:
            if not self._needs_page() or not self._fetch_page():
                self._exhausted = True

        if self._err is not None or not self._buffer:
            self._positioned = False
            self._current = None
            return False

        self._current = self._buffer.popleft()
        self._positioned = True
        return True

    def __iter__(self) -> "ListIterator[T]":
        return self

    def __next__(self) -> T:
        if not self.advance():
            raise StopIteration
        return self._current  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"ListIterator(path={self._path!r}, pages_fetched={self._pages_fetched}, "
            f"err={self._err!r})"
        )
