"""Per-match and event-wide motion summary schemas."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class MatchSummary(BaseModel):
    """Speed and acceleration extremes for one team in one match."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "match": "2020week0_qm1",
                "team": 254,
                "maxSpeed_fps": 14.21,
                "avgSpeed_fps": 4.87,
                "maxAccel_fpsps": 3.4,
                "maxBrake_fpsps": -4.1,
            }
        },
    )

    match_id: str = Field(..., alias="match", description="TBA match key")
    team_id: int = Field(..., alias="team", description="Team number")

    max_speed_fps: float = Field(..., alias="maxSpeed_fps", description="Maximum speed (ft/s)", ge=0)
    avg_speed_fps: float = Field(..., alias="avgSpeed_fps", description="Average speed (ft/s)", ge=0)

    max_accel_fpsps: float = Field(
        ..., alias="maxAccel_fpsps", description="Largest speed increase (ft/s^2)"
    )
    # Most negative acceleration, sign kept
    max_brake_fpsps: float = Field(
        ..., alias="maxBrake_fpsps", description="Largest speed decrease (ft/s^2)"
    )


class GlobalSummary(BaseModel):
    """Aggregates of MatchSummary fields across all matches."""

    model_config = ConfigDict(populate_by_name=True)

    max_speed_fps: float = Field(..., alias="maxSpeed_fps")
    avg_max_speed_fps: float = Field(..., alias="avgMaxSpeed_fps")
    avg_speed_fps: float = Field(..., alias="avgSpeed_fps")

    max_accel_fpsps: float = Field(..., alias="maxAccel_fpsps")
    avg_max_accel_fpsps: float = Field(..., alias="avgMaxAccel_fpsps")

    max_brake_fpsps: float = Field(..., alias="maxBrake_fpsps")
    avg_max_brake_fpsps: float = Field(..., alias="avgMaxBrake_fpsps")


class StatsReport(BaseModel):
    """Contents of the persisted stats artifact."""

    individual_matches: List[MatchSummary] = Field(default_factory=list)
    overall: GlobalSummary

    def to_artifact(self) -> dict:
        """Flatten to the artifact layout: match list plus global fields at top level."""
        return {
            "individual_matches": [
                m.model_dump(by_alias=True) for m in self.individual_matches
            ],
            **self.overall.model_dump(by_alias=True),
        }
