"""Typed errors raised by the Data API client."""

from __future__ import annotations

from typing import Any


class DataAPIError(Exception):
    """Base class for every error raised by polydata."""


# --- Parameter validation (raised before any I/O) ---
class ParameterError(DataAPIError):
    """Request parameters rejected by the client-side validator."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class MissingRequiredField(ParameterError):
    def __init__(self, field: str):
        super().__init__(f"{field} is required", field)


class ConflictingParameters(ParameterError):
    def __init__(self, fields: tuple[str, str]):
        super().__init__(f"{fields[0]} and {fields[1]} are mutually exclusive", fields[0])
        self.fields = fields


class IncompleteParameterPair(ParameterError):
    def __init__(self, fields: tuple[str, str]):
        super().__init__(f"{fields[0]} and {fields[1]} must be provided together", fields[0])
        self.fields = fields


class OutOfRange(ParameterError):
    def __init__(self, field: str, value: Any, bound: Any, *, lower: bool = False):
        if lower:
            message = f"{field} must be >= {bound}, got {value}"
        else:
            message = f"{field} must be <= {bound}, got {value}"
        super().__init__(message, field)
        self.value = value
        self.bound = bound
        self.lower = lower


class TooLong(ParameterError):
    def __init__(self, field: str, length: int, max_length: int):
        super().__init__(f"{field} must not exceed {max_length} characters (got {length})", field)
        self.length = length
        self.max_length = max_length


# --- Transport / context ---
class TransportError(DataAPIError):
    """Network-level failure (DNS, connect, TLS, read). The httpx error is the __cause__."""


class ContextError(DataAPIError):
    """The request context ended before the call completed."""


class Cancelled(ContextError):
    def __init__(self, message: str = "request cancelled"):
        super().__init__(message)


class DeadlineExceeded(ContextError):
    def __init__(self, message: str = "request deadline exceeded"):
        super().__init__(message)


# --- Response ---
class ApiError(DataAPIError):
    """Non-200 response. message is the API's error field, or the raw body."""

    def __init__(self, status: int, message: str):
        super().__init__(f"API error (status {status}): {message}")
        self.status = status
        self.message = message


class DecodeError(DataAPIError):
    """200 response whose body did not match the expected shape."""

    def __init__(self, message: str, snippet: str = ""):
        super().__init__(f"{message}: {snippet!r}" if snippet else message)
        self.snippet = snippet
