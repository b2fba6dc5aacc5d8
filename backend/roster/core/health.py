"""Health Reporter — process status snapshot for liveness probes.

Invariants:
    - Status is always HEALTHY while the process can answer
    - Uptime is measured on a monotonic clock and never negative
    - Start instant captured once, when the reporter is constructed

Design Decisions:
    - Clocks injected: tests pin time without patching modules
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from roster.core.domain_types import HealthStatus, UptimeSeconds
from roster.core.user_record import format_timestamp


@dataclass(frozen=True)
class HealthSnapshot:
    status: HealthStatus
    timestamp: datetime
    uptime: UptimeSeconds

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "timestamp": format_timestamp(self.timestamp),
            "uptime": self.uptime,
        }


class HealthReporter:
    """Reports health relative to the moment it was created."""

    def __init__(
        self,
        monotonic: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._monotonic = monotonic
        self._now = now
        self._started = monotonic()

    @property
    def uptime(self) -> UptimeSeconds:
        return UptimeSeconds(max(0.0, self._monotonic() - self._started))

    def snapshot(self) -> HealthSnapshot:
        return HealthSnapshot(
            status=HealthStatus.HEALTHY, timestamp=self._now(), uptime=self.uptime,
        )
