"""
Shared plumbing for the resource clients.
"""

from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from payclient.exceptions import NotFoundError, TransportError, ValidationError
from payclient.iterator import ListIterator
from payclient.params import ListParams
from payclient.settings import ClientSettings, get_settings
from payclient.transport import Transport

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ResourceClient:
    """Base class binding a transport to one collection path."""

    path: str = ""

    def __init__(self, transport: Transport, settings: ClientSettings | None = None) -> None:
        self.transport = transport
        self.settings = settings or get_settings()

    def _instance_path(self, resource_id: str) -> str:
        if not resource_id or not str(resource_id).strip():
            raise ValidationError(f"A resource id is required for {self.path}", param="id")
        # The id is always a single path segment
        return f"{self.path}/{quote(str(resource_id), safe='')}"

    def _request(
        self,
        method: str,
        path: str,
        params: list[tuple[str, str]] | None = None,
        resource_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Execute a request, attaching ``resource_id`` to not-found errors.

        Raises:
            PayClientError: As mapped by the transport
        """
        try:
            return self.transport.execute(method, path, params)
        except NotFoundError as e:
            if resource_id is None or e.resource_id:
                raise
            raise NotFoundError(
                e.message, resource_id=resource_id, request_id=e.request_id
            ) from e

    def _list(
        self,
        path: str,
        params: ListParams,
        decode: Callable[[dict[str, Any]], T],
    ) -> ListIterator[T]:
        return ListIterator(
            self.transport,
            path,
            params,
            decode,
            page_size=self.settings.page_size,
        )

    def _decode(self, model: type[M], payload: dict[str, Any]) -> M:
        """Validate a response payload into ``model``; malformed bodies are transport faults."""
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise TransportError(
                f"Could not decode {model.__name__} from {self.path}: {e}",
                context={"path": self.path},
            ) from e
