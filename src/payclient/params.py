"""
Request parameter models shared by the resource clients.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from payclient.encoding import encode_params
from payclient.exceptions import ValidationError
from payclient.filters import FilterSet

P = TypeVar("P", bound=BaseModel)


class RequestParams(BaseModel):
    """Base for request parameters; unknown keywords are rejected."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    # Fields handled outside the form encoding
    LOCAL_FIELDS: ClassVar[set[str]] = set()

    def to_pairs(self) -> list[tuple[str, str]]:
        """Encode supplied, non-null fields as ordered form/query pairs."""
        data = self.model_dump(mode="json", exclude_none=True, exclude=self.LOCAL_FIELDS)
        return encode_params(data)


class ListParams(RequestParams):
    """Pagination and filter parameters common to every list call."""

    LOCAL_FIELDS: ClassVar[set[str]] = {
        "limit",
        "starting_after",
        "ending_before",
        "filters",
        "single_page",
    }

    limit: int | None = Field(None, ge=1, le=100, description="Page size")
    starting_after: str | None = Field(None, description="Cursor for forward paging")
    ending_before: str | None = Field(None, description="Cursor for backward paging")
    filters: FilterSet = Field(default_factory=FilterSet)
    single_page: bool = Field(False, description="Stop after the first page")

    def to_pairs(self) -> list[tuple[str, str]]:
        """Scoping fields first, then filters in insertion order."""
        return super().to_pairs() + self.filters.to_query()


def build_params(model: type[P], fields: dict[str, Any]) -> P:
    """
    Validate keyword arguments into a parameter model.

    Args:
        model: Parameter model class
        fields: Keyword arguments given by the caller

    Returns:
        The validated model

    Raises:
        ValidationError: If a required field is missing or a value has the wrong shape
    """
    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0]
        param = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            f"Invalid parameter {param}: {first['msg']}",
            param=param,
            context={"errors": [{"loc": err["loc"], "msg": err["msg"]} for err in errors]},
        ) from e
