"""Robot position telemetry schemas."""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from pydantic import BaseModel, Field, model_validator


class PositionSample(BaseModel):
    """Single timestamped robot position reading.

    Either coordinate may be missing when the tracker lost the robot.
    """

    time: float = Field(..., description="Seconds since match start")
    x: Optional[float] = Field(None, description="Field x position in feet")
    y: Optional[float] = Field(None, description="Field y position in feet")

    @property
    def has_position(self) -> bool:
        """Check if both coordinates are available."""
        return self.x is not None and self.y is not None


class ZebraTeamTrack(BaseModel):
    """Per-robot coordinate arrays in a MotionWorks payload."""

    team_key: str = Field(..., description="TBA team key, e.g. frc254")
    xs: List[Optional[float]] = Field(default_factory=list, description="x positions (ft)")
    ys: List[Optional[float]] = Field(default_factory=list, description="y positions (ft)")


class ZebraAlliances(BaseModel):
    """Red and blue alliance tracks."""

    red: List[ZebraTeamTrack] = Field(default_factory=list)
    blue: List[ZebraTeamTrack] = Field(default_factory=list)


class ZebraMotionworks(BaseModel):
    """TBA `zebra_motionworks` response body.

    `times` is shared by every track; `xs[i]`/`ys[i]` belong to `times[i]`.
    """

    key: Optional[str] = Field(None, description="Match key")
    times: List[float] = Field(default_factory=list, description="Sample times (s)")
    alliances: ZebraAlliances = Field(default_factory=ZebraAlliances)

    @model_validator(mode="after")
    def check_track_lengths(self) -> "ZebraMotionworks":
        """Every track must have one x and one y per timestamp."""
        n = len(self.times)
        for track in self.alliances.red + self.alliances.blue:
            if len(track.xs) != n or len(track.ys) != n:
                raise ValueError(
                    f"Track {track.team_key} has {len(track.xs)} xs and {len(track.ys)} ys "
                    f"for {n} timestamps"
                )
        return self

    def track_for(self, team_key: str) -> Optional[ZebraTeamTrack]:
        """Find a team's track in either alliance."""
        for track in self.alliances.red + self.alliances.blue:
            if track.team_key == team_key:
                return track
        return None

    def positions_for(self, team_key: str) -> Optional[List[PositionSample]]:
        """Zip a team's coordinates with the shared timestamps.

        Returns:
            Samples in payload order, or None if the team is not in the match
        """
        track = self.track_for(team_key)
        if track is None:
            return None

        return [
            PositionSample(time=t, x=x, y=y)
            for t, x, y in zip(self.times, track.xs, track.ys)
        ]

    class Config:
        json_schema_extra = {
            "example": {
                "key": "2020week0_qm1",
                "times": [0.0, 0.1, 0.2],
                "alliances": {
                    "red": [{"team_key": "frc254", "xs": [10.2, 10.4, 10.7], "ys": [5.0, 5.1, 5.1]}],
                    "blue": [],
                },
            }
        }


@dataclass(frozen=True)
class PresentTelemetry:
    """Telemetry exists for the match."""

    points: List[PositionSample] = field(default_factory=list)


@dataclass(frozen=True)
class AbsentTelemetry:
    """No telemetry was recorded for the match."""

    reason: str = "not found"


Telemetry = Union[PresentTelemetry, AbsentTelemetry]


@dataclass(frozen=True)
class MatchTelemetry:
    """Acquisition result for one team in one match."""

    match_id: str
    team_id: int
    telemetry: Telemetry

    @property
    def has_telemetry(self) -> bool:
        return isinstance(self.telemetry, PresentTelemetry)
