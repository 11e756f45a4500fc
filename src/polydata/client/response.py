"""Classify an HTTP response as success or ApiError and decode the body."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import pydantic
import structlog

from polydata.client.endpoints import Endpoint
from polydata.client.transport import HttpResponse
from polydata.errors import ApiError, DecodeError
from polydata.models import ErrorResponse

log = structlog.get_logger(__name__)

SNIPPET_LENGTH = 200


def _load_json(body: bytes) -> Any:
    # parse_float=Decimal keeps numeric amounts exact
    return json.loads(body, parse_float=Decimal)


def error_message(resp: HttpResponse) -> str:
    """The API's error field when present and non-empty, else the raw body."""
    try:
        err = ErrorResponse.model_validate(_load_json(resp.body))
    except (ValueError, pydantic.ValidationError):
        return resp.text
    return err.error or resp.text


def classify(endpoint: Endpoint, resp: HttpResponse) -> Any:
    """Return the decoded response value or raise ApiError / DecodeError."""
    if resp.status_code != 200:
        message = error_message(resp)
        log.warning("data_api_error", endpoint=endpoint.name, status=resp.status_code, message=message)
        raise ApiError(resp.status_code, message)
    try:
        return endpoint.response.validate_python(_load_json(resp.body))
    except (ValueError, pydantic.ValidationError) as e:
        snippet = resp.text[:SNIPPET_LENGTH]
        log.warning("data_api_decode_failed", endpoint=endpoint.name, error=str(e))
        raise DecodeError(f"failed to decode {endpoint.name} response: {e}", snippet) from e
