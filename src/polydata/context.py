"""Request context: cancellation flag plus optional deadline."""

from __future__ import annotations

import time
from threading import Event

from polydata.errors import Cancelled, DeadlineExceeded


class RequestContext:
    """Carries cancellation and deadline through a single call.

    Contexts are cheap; create one per call or share one across a batch of
    calls that should be cancelled together. cancel() is safe from any thread.
    """

    def __init__(self, deadline: float | None = None) -> None:
        self.deadline = deadline  # time.monotonic() value
        self._cancelled = Event()

    @classmethod
    def background(cls) -> RequestContext:
        """Context with no deadline that is only ended by cancel()."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        return cls(deadline=time.monotonic() + seconds)

    @classmethod
    def with_deadline(cls, deadline: float) -> RequestContext:
        return cls(deadline=deadline)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        """Raise Cancelled or DeadlineExceeded if the context has ended."""
        if self.cancelled:
            raise Cancelled()
        if self.expired:
            raise DeadlineExceeded()
