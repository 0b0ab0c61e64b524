"""Stats artifact: per-match summaries plus event-wide aggregates."""

from pathlib import Path
from typing import Optional, Sequence

from src.conf.settings import settings
from src.schemas.summary import MatchSummary, GlobalSummary, StatsReport
from src.utils.io_utils import save_json
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


def build_stats_report(
    match_summaries: Sequence[MatchSummary], overall: GlobalSummary
) -> StatsReport:
    return StatsReport(individual_matches=list(match_summaries), overall=overall)


def save_stats_report(
    report: StatsReport,
    output_dir: str | Path,
    filename: Optional[str] = None,
) -> Path:
    """Write the stats artifact as JSON.

    Args:
        report: StatsReport to persist
        output_dir: Output directory
        filename: File name (defaults to settings.stats_filename)

    Returns:
        Path to the written file
    """
    output_file = Path(output_dir) / (filename or settings.stats_filename)

    logger.info(f"Saving stats to {output_file}")
    save_json(report.to_artifact(), output_file)
    logger.info(f"  Saved {len(report.individual_matches)} match summaries")

    return output_file
