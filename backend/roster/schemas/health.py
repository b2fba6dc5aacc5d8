"""Health Schemas — liveness payload."""

from pydantic import BaseModel

from roster.core.health import HealthSnapshot


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    uptime: float

    @classmethod
    def from_snapshot(cls, snapshot: HealthSnapshot) -> "HealthResponse":
        return cls.model_validate(snapshot.to_dict())
