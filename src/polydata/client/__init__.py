"""Data API client: endpoint descriptors, validation, query encoding, transport."""

from polydata.client.data import DataClient
from polydata.client.endpoints import DEFAULT_BASE_URL, ENDPOINTS, Endpoint, Param
from polydata.client.transport import HttpExecutor, HttpResponse, HttpxExecutor

__all__ = [
    "DataClient",
    "DEFAULT_BASE_URL",
    "ENDPOINTS",
    "Endpoint",
    "Param",
    "HttpExecutor",
    "HttpResponse",
    "HttpxExecutor",
]
