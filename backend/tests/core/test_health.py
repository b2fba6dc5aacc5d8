"""Health Reporter — status, uptime and timestamp."""

from datetime import datetime, timezone

from roster.core.domain_types import HealthStatus
from roster.core.health import HealthReporter


class _FakeClock:
    def __init__(self, start: float):
        self.value = start

    def __call__(self) -> float:
        return self.value


def test_snapshot_is_always_healthy():
    assert HealthReporter().snapshot().status == HealthStatus.HEALTHY


def test_uptime_grows_with_monotonic_clock():
    clock = _FakeClock(100.0)
    reporter = HealthReporter(monotonic=clock)
    assert reporter.uptime == 0.0
    clock.value = 112.5
    assert reporter.snapshot().uptime == 12.5


def test_uptime_never_negative():
    clock = _FakeClock(100.0)
    reporter = HealthReporter(monotonic=clock)
    clock.value = 50.0
    assert reporter.uptime == 0.0


def test_snapshot_to_dict_formats_timestamp():
    fixed = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
    reporter = HealthReporter(monotonic=_FakeClock(1.0), now=lambda: fixed)
    assert reporter.snapshot().to_dict() == {
        "status": "healthy",
        "timestamp": "2026-10-19T12:00:00.000Z",
        "uptime": 0.0,
    }
