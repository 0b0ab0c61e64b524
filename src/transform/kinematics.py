"""Finite-difference kinematics from timestamped robot positions.

Each stage pairs every row with its successor and emits one row per pair:

    positions -> distance segments -> speeds -> accelerations

so every stage is one row shorter than its input. Timestamps always come
from the earlier row of the pair, which keeps the three derived series
aligned on the same time axis.
"""

import pandas as pd
import numpy as np
from typing import Iterable, Union
from dataclasses import dataclass

from src.schemas.telemetry import PositionSample
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

SAMPLE_COLUMNS = ["time", "x", "y"]
DISTANCE_COLUMNS = ["timestamp", "duration", "distance"]
SPEED_COLUMNS = ["timestamp", "speed"]
ACCELERATION_COLUMNS = ["timestamp", "duration", "acceleration"]

DURATION_DECIMALS = 1
RATE_DECIMALS = 2

# Smallest positive duration at DURATION_DECIMALS
MIN_DURATION = 0.1


@dataclass
class MatchKinematics:
    """Derived series for one team in one match."""

    match_id: str
    team_id: int
    samples_total: int
    samples_used: int
    distances: pd.DataFrame
    speeds: pd.DataFrame
    accelerations: pd.DataFrame

    @property
    def is_summarizable(self) -> bool:
        """Both speed and acceleration series have at least one row."""
        return not self.speeds.empty and not self.accelerations.empty


def round_half_up(
    values: Union[pd.Series, np.ndarray, float], decimals: int
) -> Union[pd.Series, np.ndarray, float]:
    """Round to `decimals` places with halves rounded toward +inf.

    numpy/pandas `round` rounds halves to even; the published stats have
    always used half-up rounding, so results stay comparable.
    """
    factor = 10.0**decimals
    return np.floor(values * factor + 0.5) / factor


def _empty_frame(columns: list[str]) -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype="float64") for col in columns})


def samples_to_frame(points: Iterable[PositionSample]) -> pd.DataFrame:
    """Convert position samples to a [time, x, y] DataFrame (missing -> NaN)."""
    rows = [(p.time, p.x, p.y) for p in points]
    if not rows:
        return _empty_frame(SAMPLE_COLUMNS)

    return pd.DataFrame(rows, columns=SAMPLE_COLUMNS).astype("float64")


def filter_valid_samples(samples: pd.DataFrame) -> pd.DataFrame:
    """Drop samples where either coordinate is missing."""
    mask = samples["x"].notna() & samples["y"].notna()
    return samples.loc[mask, SAMPLE_COLUMNS].reset_index(drop=True)


def derive_distances(samples: pd.DataFrame) -> pd.DataFrame:
    """Distance travelled between each sample and the next.

    Args:
        samples: [time, x, y] rows ordered by time, no missing coordinates

    Returns:
        DataFrame [timestamp, duration, distance], one row per consecutive pair
    """
    if len(samples) < 2:
        return _empty_frame(DISTANCE_COLUMNS)

    samples = samples.reset_index(drop=True)
    nxt = samples.shift(-1)

    dx = nxt["x"] - samples["x"]
    dy = nxt["y"] - samples["y"]

    distances = pd.DataFrame(
        {
            "timestamp": samples["time"],
            "duration": round_half_up(nxt["time"] - samples["time"], DURATION_DECIMALS),
            "distance": np.sqrt(dx**2 + dy**2),
        }
    )

    # Last sample has no successor
    return distances.iloc[:-1].reset_index(drop=True)


def derive_speeds(distances: pd.DataFrame) -> pd.DataFrame:
    """Speed of each distance segment that has a following segment.

    Segments whose raw time delta is not positive carry no usable speed
    and are dropped, so the output can be shorter than `len(distances) - 1`.
    A positive delta that rounds to 0.0 s is divided by MIN_DURATION instead.

    Args:
        distances: Output of derive_distances

    Returns:
        DataFrame [timestamp, speed] in ft/s
    """
    if len(distances) < 2:
        return _empty_frame(SPEED_COLUMNS)

    distances = distances.reset_index(drop=True)

    # Next segment starts at this segment's end sample, so this is the unrounded delta
    raw_delta = (distances["timestamp"].shift(-1) - distances["timestamp"]).iloc[:-1]
    head = distances.iloc[:-1]
    valid = raw_delta > 0

    dropped = int((~valid).sum())
    if dropped > 0:
        logger.warning(f"    Dropped {dropped} segment(s) with zero time delta")

    head = head[valid]
    speeds = pd.DataFrame(
        {
            "timestamp": head["timestamp"],
            "speed": round_half_up(
                head["distance"] / head["duration"].clip(lower=MIN_DURATION), RATE_DECIMALS
            ),
        }
    )

    return speeds.reset_index(drop=True)


def derive_accelerations(speeds: pd.DataFrame) -> pd.DataFrame:
    """Change in speed between each speed sample and the next.

    Args:
        speeds: Output of derive_speeds

    Returns:
        DataFrame [timestamp, duration, acceleration]
    """
    if len(speeds) < 2:
        return _empty_frame(ACCELERATION_COLUMNS)

    speeds = speeds.reset_index(drop=True)
    nxt = speeds.shift(-1)

    accelerations = pd.DataFrame(
        {
            "timestamp": speeds["timestamp"],
            "duration": round_half_up(nxt["timestamp"] - speeds["timestamp"], DURATION_DECIMALS),
            "acceleration": round_half_up(nxt["speed"] - speeds["speed"], RATE_DECIMALS),
        }
    )

    return accelerations.iloc[:-1].reset_index(drop=True)


def derive_kinematics(samples: pd.DataFrame, match_id: str, team_id: int) -> MatchKinematics:
    """Run all derivation stages for one match.

    Args:
        samples: Raw [time, x, y] rows, possibly with missing coordinates
        match_id: Match key
        team_id: Team number

    Returns:
        MatchKinematics with the three derived series
    """
    valid = filter_valid_samples(samples)

    distances = derive_distances(valid)
    speeds = derive_speeds(distances)
    accelerations = derive_accelerations(speeds)

    logger.info(
        f"  {match_id}: {len(valid):,}/{len(samples):,} samples -> "
        f"{len(distances):,} segments, {len(speeds):,} speeds, "
        f"{len(accelerations):,} accelerations"
    )

    return MatchKinematics(
        match_id=match_id,
        team_id=team_id,
        samples_total=len(samples),
        samples_used=len(valid),
        distances=distances,
        speeds=speeds,
        accelerations=accelerations,
    )
