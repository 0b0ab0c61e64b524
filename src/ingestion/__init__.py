"""Acquisition of MotionWorks telemetry from The Blue Alliance."""

from .tba_client import (
    TBAClient,
    AcquisitionError,
    fetch_event_telemetry,
    team_key,
)

__all__ = [
    "TBAClient",
    "AcquisitionError",
    "fetch_event_telemetry",
    "team_key",
]
