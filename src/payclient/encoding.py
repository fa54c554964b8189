"""
Bracket-notation encoding of request parameters.

The service takes form-encoded bodies and query strings where nested
values are flattened, e.g. ``{"metadata": {"order": "42"}}`` becomes
``metadata[order]=42``.
"""

from typing import Any

from payclient.filters import encode_scalar

MAX_DEPTH = 3


def _flatten(pairs: list[tuple[str, str]], prefix: str, value: Any, depth: int) -> None:
    if value is None:
        return

    if isinstance(value, dict):
        if depth >= MAX_DEPTH:
            for key, item in value.items():
                pairs.append((f"{prefix}[{key}]", "" if item is None else str(item)))
            return
        # An empty dict clears the field server-side (e.g. metadata)
        if not value:
            pairs.append((prefix, ""))
            return
        for key, item in value.items():
            _flatten(pairs, f"{prefix}[{key}]", item, depth + 1)
        return

    if isinstance(value, (list, tuple)):
        for idx, item in enumerate(value):
            _flatten(pairs, f"{prefix}[{idx}]", item, depth + 1)
        return

    pairs.append((prefix, encode_scalar(value)))


def encode_params(params: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Flatten a parameter dict into ordered ``(key, value)`` pairs.

    ``None`` values are dropped so that only supplied fields are sent.

    Args:
        params: Parameters, possibly nested

    Returns:
        Pairs suitable for a query string or a form body
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(pairs, key, value, 0)
    return pairs
