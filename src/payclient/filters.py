"""
Comparison filters for list requests.

A ``FilterSet`` is an ordered list of ``Filter`` records. Each record
serialises as ``field[op]=value`` (``field=value`` for equality). Field
names are not checked against the API; the service rejects unknown ones.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from payclient.exceptions import ValidationError


class FilterOperator(str, Enum):
    """Operator suffix of a filter key."""

    EQ = ""
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


def encode_scalar(value: Any) -> str:
    """Render a scalar the way the service expects it in a query or form body."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class Filter:
    """One ``(field, operator, value)`` constraint."""

    field: str
    operator: FilterOperator
    value: Any

    @property
    def key(self) -> str:
        if self.operator is FilterOperator.EQ:
            return self.field
        return f"{self.field}[{self.operator.value}]"

    def to_pair(self) -> tuple[str, str]:
        return self.key, encode_scalar(self.value)


class FilterSet:
    """
    Ordered, conjunctive collection of filters.

    Adding the same field twice keeps both constraints, which is how
    ranges are expressed::

        FilterSet().gt("due_date", start).lt("due_date", end)
    """

    def __init__(self, filters: Iterable[Filter] | None = None) -> None:
        self._filters: list[Filter] = list(filters or [])

    def add(
        self,
        field: str,
        operator: FilterOperator | str = FilterOperator.EQ,
        value: Any = None,
    ) -> "FilterSet":
        """
        Append a filter.

        Args:
            field: Field name, e.g. ``due_date``
            operator: Operator suffix (``""``, ``gt``, ``gte``, ``lt``, ``lte``)
            value: Value to compare against

        Returns:
            The filter set, for chaining

        Raises:
            ValidationError: If the record is structurally malformed
        """
        if not isinstance(field, str) or not field.strip():
            raise ValidationError("Filter field name must be a non-empty string", param="field")
        if "[" in field or "]" in field:
            raise ValidationError(
                f"Filter field {field!r} must not contain an operator suffix", param=field
            )
        try:
            op = FilterOperator(operator)
        except ValueError:
            raise ValidationError(
                f"Unknown filter operator {operator!r}", param=field
            ) from None
        if value is None:
            raise ValidationError(f"Filter on {field!r} needs a value", param=field)

        self._filters.append(Filter(field=field, operator=op, value=value))
        return self

    def eq(self, field: str, value: Any) -> "FilterSet":
        return self.add(field, FilterOperator.EQ, value)

    def gt(self, field: str, value: Any) -> "FilterSet":
        return self.add(field, FilterOperator.GT, value)

    def gte(self, field: str, value: Any) -> "FilterSet":
        return self.add(field, FilterOperator.GTE, value)

    def lt(self, field: str, value: Any) -> "FilterSet":
        return self.add(field, FilterOperator.LT, value)

    def lte(self, field: str, value: Any) -> "FilterSet":
        return self.add(field, FilterOperator.LTE, value)

    def extend(self, other: "FilterSet") -> "FilterSet":
        self._filters.extend(other)
        return self

    def to_query(self) -> list[tuple[str, str]]:
        """Return the filters as ordered query pairs."""
        return [f.to_pair() for f in self._filters]

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterSet({self._filters!r})"
