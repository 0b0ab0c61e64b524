"""Run kinematics and aggregation over a fetched batch of matches."""

import pandas as pd
from typing import Dict, List, Sequence
from dataclasses import dataclass, field

from src.schemas.summary import MatchSummary, GlobalSummary
from src.schemas.telemetry import MatchTelemetry, PresentTelemetry, AbsentTelemetry
from src.transform.kinematics import MatchKinematics, samples_to_frame, derive_kinematics
from src.transform.series import project_series
from src.transform.summary import summarize_matches, summarize_global
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class MotionAnalysis:
    """Engine output for one team at one event."""

    kinematics: List[MatchKinematics] = field(default_factory=list)
    match_summaries: List[MatchSummary] = field(default_factory=list)
    overall: GlobalSummary | None = None
    # match_id -> [x, y, series] chart data
    series: Dict[str, pd.DataFrame] = field(default_factory=dict)
    absent_matches: List[str] = field(default_factory=list)


def select_present(records: Sequence[MatchTelemetry]) -> List[MatchTelemetry]:
    """Keep only matches that have telemetry."""
    present = []
    for record in records:
        if isinstance(record.telemetry, PresentTelemetry):
            present.append(record)
        elif isinstance(record.telemetry, AbsentTelemetry):
            logger.info(f"  {record.match_id}: no telemetry ({record.telemetry.reason})")
        else:
            raise TypeError(f"Unknown telemetry type: {type(record.telemetry)}")

    return present


def analyze_matches(records: Sequence[MatchTelemetry]) -> MotionAnalysis:
    """Derive kinematics, summaries and chart series for every match.

    Matches without telemetry, and matches too short to produce both a speed
    and an acceleration, are left out of the summaries and the chart series.

    Args:
        records: Acquisition results, one per match

    Returns:
        MotionAnalysis

    Raises:
        InsufficientDataError: If no match can be summarized
    """
    logger.info("=" * 60)
    logger.info(f"MOTION ANALYSIS: {len(records)} matches")
    logger.info("=" * 60)

    present = select_present(records)
    analysis = MotionAnalysis(
        absent_matches=[r.match_id for r in records if not r.has_telemetry],
    )

    logger.info(f"\n  [Step 1] Deriving kinematics for {len(present)} matches...")
    for record in present:
        samples = samples_to_frame(record.telemetry.points)
        analysis.kinematics.append(derive_kinematics(samples, record.match_id, record.team_id))

    logger.info("\n  [Step 2] Summarizing matches...")
    analysis.match_summaries = summarize_matches(analysis.kinematics)

    logger.info("\n  [Step 3] Aggregating event summary...")
    analysis.overall = summarize_global(analysis.match_summaries)
    logger.info(
        f"    Max speed: {analysis.overall.max_speed_fps:.2f} ft/s, "
        f"avg max speed: {analysis.overall.avg_max_speed_fps:.2f} ft/s"
    )

    logger.info("\n  [Step 4] Projecting chart series...")
    for match in analysis.kinematics:
        if match.is_summarizable:
            analysis.series[match.match_id] = project_series(match.speeds, match.accelerations)

    logger.info("=" * 60 + "\n")

    return analysis
