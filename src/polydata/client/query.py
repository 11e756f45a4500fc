"""Query string encoding for validated parameter sets."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode

from pydantic import BaseModel

from polydata.client.endpoints import Endpoint
from polydata.client.validation import validate


def format_value(value: Any) -> str:
    """Render a single parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        # Fixed-point only: str(Decimal("1E+2")) would give "1E+2"
        return format(value, "f")
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def encode_values(values: Mapping[str, Any]) -> str:
    """Encode wire-keyed values in mapping order. Lists become one comma-joined entry."""
    return urlencode([(key, format_value(value)) for key, value in values.items()])


def encode_query(endpoint: Endpoint, params: BaseModel | None) -> str:
    """Validate params and encode them in the endpoint's declaration order."""
    return encode_values(validate(endpoint, params))


def decode_query(query: str) -> dict[str, str]:
    """Inverse of encode_values: key -> raw string value, in query order."""
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=True))


def split_list(value: str) -> list[str]:
    """Split a comma-joined list value back into its elements."""
    return value.split(",") if value else []


def build_url(base_url: str, path: str, query: str = "") -> str:
    url = base_url.rstrip("/") + path
    return f"{url}?{query}" if query else url
