"""polydata - typed client for the Polymarket Data API."""

from polydata.client import DEFAULT_BASE_URL, DataClient, HttpExecutor, HttpResponse, HttpxExecutor
from polydata.context import RequestContext
from polydata.errors import (
    ApiError,
    Cancelled,
    ConflictingParameters,
    DataAPIError,
    DeadlineExceeded,
    DecodeError,
    IncompleteParameterPair,
    MissingRequiredField,
    OutOfRange,
    ParameterError,
    TooLong,
    TransportError,
)
from polydata.models import *  # noqa: F401,F403
from polydata.models import __all__ as _models_all

__version__ = "0.1.0"

__all__ = [
    "DataClient",
    "DEFAULT_BASE_URL",
    "HttpExecutor",
    "HttpResponse",
    "HttpxExecutor",
    "RequestContext",
    "DataAPIError",
    "ParameterError",
    "MissingRequiredField",
    "ConflictingParameters",
    "IncompleteParameterPair",
    "OutOfRange",
    "TooLong",
    "TransportError",
    "Cancelled",
    "DeadlineExceeded",
    "ApiError",
    "DecodeError",
    *_models_all,
]
