"""Status (liveness) service.

The process start is captured once, when the application is created, and
handed to the status route as an immutable value. Uptime is measured on
the monotonic clock so it never goes backwards when the wall clock is
adjusted.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import lru_cache

from app.schemas.status import StatusReport


@dataclass(frozen=True)
class ProcessStart:
    """Immutable record of when the service started."""

    monotonic: float
    started_at: datetime

    @classmethod
    def capture(cls) -> "ProcessStart":
        return cls(monotonic=time.monotonic(), started_at=datetime.now(UTC))


@lru_cache
def get_process_start() -> ProcessStart:
    """Get the process start, captured on first call."""
    return ProcessStart.capture()


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision, e.g. '2024-01-15T10:30:00.000Z'."""
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def get_status(
    process_start: ProcessStart,
    version: str,
    monotonic: Callable[[], float] = time.monotonic,
    now: Callable[[], datetime] = lambda: datetime.now(UTC),
) -> StatusReport:
    """
    Build a fresh status report.

    Args:
        process_start: Start of the current process
        version: API version to report
        monotonic: Monotonic clock (seconds)
        now: Wall clock used for the timestamp

    Returns:
        StatusReport with uptime in whole seconds
    """
    uptime = max(0, int(monotonic() - process_start.monotonic))
    return StatusReport(
        status="online",
        version=version,
        uptime=f"{uptime}s",
        timestamp=format_timestamp(now()),
    )
