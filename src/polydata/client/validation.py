"""Client-side parameter validation. Runs before any network I/O."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from polydata.client.endpoints import Endpoint, Param
from polydata.errors import (
    ConflictingParameters,
    IncompleteParameterPair,
    MissingRequiredField,
    OutOfRange,
    TooLong,
)


def is_unset(value: Any) -> bool:
    """None, empty string, empty list and integer 0 all mean "use the server default"."""
    if value is None or isinstance(value, bool):
        return value is None
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, int):
        return value == 0
    return False


def param_values(endpoint: Endpoint, params: BaseModel | None) -> dict[str, Any]:
    """Map wire key -> raw attribute value for every declared parameter."""
    if params is None:
        return {}
    if endpoint.params_type is not None and not isinstance(params, endpoint.params_type):
        raise TypeError(
            f"{endpoint.name} expects {endpoint.params_type.__name__}, got {type(params).__name__}"
        )
    return {p.key: getattr(params, p.attr) for p in endpoint.params}


def _check_range(p: Param, value: Any) -> None:
    # int 0 is the unset sentinel unless the field has a positive minimum
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        return
    if p.min_value is not None and value < p.min_value:
        raise OutOfRange(p.key, value, p.min_value, lower=True)
    if p.max_value is not None and value > p.max_value:
        raise OutOfRange(p.key, value, p.max_value)


def validate(endpoint: Endpoint, params: BaseModel | None) -> dict[str, Any]:
    """Check params against the endpoint's constraints.

    Order: required, mutually exclusive, paired, then per-field bounds and
    lengths in declaration order. Returns the wire-keyed values of all set
    parameters.
    """
    values = param_values(endpoint, params)

    for p in endpoint.params:
        if p.required and is_unset(values[p.key]):
            raise MissingRequiredField(p.key)

    for a, b in endpoint.exclusive:
        if not is_unset(values[a]) and not is_unset(values[b]):
            raise ConflictingParameters((a, b))

    for a, b in endpoint.paired:
        if is_unset(values[a]) != is_unset(values[b]):
            raise IncompleteParameterPair((a, b))

    for p in endpoint.params:
        value = values[p.key]
        if is_unset(value):
            if p.min_value is not None and p.min_value > 0 and value is not None:
                raise OutOfRange(p.key, value, p.min_value, lower=True)
            continue
        _check_range(p, value)
        if p.max_length is not None and isinstance(value, str) and len(value) > p.max_length:
            raise TooLong(p.key, len(value), p.max_length)

    return {k: v for k, v in values.items() if not is_unset(v)}
