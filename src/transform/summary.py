"""Per-match and event-wide speed/acceleration aggregation."""

import pandas as pd
from typing import List, Sequence

from src.schemas.summary import MatchSummary, GlobalSummary
from src.transform.kinematics import MatchKinematics, round_half_up, RATE_DECIMALS
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


class InsufficientDataError(Exception):
    """Raised when there is nothing to aggregate."""
    pass


def summarize_match(
    speeds: pd.DataFrame,
    accelerations: pd.DataFrame,
    match_id: str,
    team_id: int,
) -> MatchSummary:
    """Summarize one match's speed and acceleration series.

    Args:
        speeds: [timestamp, speed] rows
        accelerations: [timestamp, duration, acceleration] rows
        match_id: Match key
        team_id: Team number

    Returns:
        MatchSummary

    Raises:
        InsufficientDataError: If either series is empty
    """
    if speeds.empty or accelerations.empty:
        raise InsufficientDataError(
            f"Match {match_id} has {len(speeds)} speed and "
            f"{len(accelerations)} acceleration samples; need at least one of each"
        )

    return MatchSummary(
        match_id=match_id,
        team_id=team_id,
        max_speed_fps=float(speeds["speed"].max()),
        avg_speed_fps=float(round_half_up(speeds["speed"].mean(), RATE_DECIMALS)),
        max_accel_fpsps=float(accelerations["acceleration"].max()),
        max_brake_fpsps=float(accelerations["acceleration"].min()),
    )


def summarize_matches(kinematics: Sequence[MatchKinematics]) -> List[MatchSummary]:
    """Summarize every match that has enough data, skipping the rest.

    Args:
        kinematics: Derived series per match

    Returns:
        MatchSummary list in input order
    """
    summaries = []
    for match in kinematics:
        try:
            summaries.append(
                summarize_match(match.speeds, match.accelerations, match.match_id, match.team_id)
            )
        except InsufficientDataError as e:
            logger.warning(f"  Skipping {match.match_id}: {e}")

    logger.info(f"  Summarized {len(summaries)}/{len(kinematics)} matches")

    return summaries


def summarize_global(match_summaries: Sequence[MatchSummary]) -> GlobalSummary:
    """Aggregate per-match summaries across the event.

    Args:
        match_summaries: At least one MatchSummary

    Returns:
        GlobalSummary

    Raises:
        InsufficientDataError: If no summaries are given
    """
    if len(match_summaries) == 0:
        raise InsufficientDataError("No match summaries to aggregate")

    df = pd.DataFrame([m.model_dump() for m in match_summaries])

    return GlobalSummary(
        max_speed_fps=float(df["max_speed_fps"].max()),
        avg_max_speed_fps=float(df["max_speed_fps"].mean()),
        avg_speed_fps=float(df["avg_speed_fps"].mean()),
        max_accel_fpsps=float(df["max_accel_fpsps"].max()),
        avg_max_accel_fpsps=float(df["max_accel_fpsps"].mean()),
        max_brake_fpsps=float(df["max_brake_fpsps"].min()),
        avg_max_brake_fpsps=float(df["max_brake_fpsps"].mean()),
    )
