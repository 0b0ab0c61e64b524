"""Data schemas and contracts for motion statistics."""

from .telemetry import (
    PositionSample,
    ZebraTeamTrack,
    ZebraAlliances,
    ZebraMotionworks,
    PresentTelemetry,
    AbsentTelemetry,
    Telemetry,
    MatchTelemetry,
)
from .summary import MatchSummary, GlobalSummary, StatsReport

__all__ = [
    # Telemetry
    "PositionSample",
    "ZebraTeamTrack",
    "ZebraAlliances",
    "ZebraMotionworks",
    "PresentTelemetry",
    "AbsentTelemetry",
    "Telemetry",
    "MatchTelemetry",
    # Summaries
    "MatchSummary",
    "GlobalSummary",
    "StatsReport",
]
