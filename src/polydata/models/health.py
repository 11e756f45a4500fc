"""HealthResponse, ErrorResponse."""

from __future__ import annotations

from polydata.models.base import DataModel


class HealthResponse(DataModel):
    data: str = ""  # "OK" when healthy


class ErrorResponse(DataModel):
    """Error body returned on non-200 responses. error may be absent."""

    error: str | None = None
