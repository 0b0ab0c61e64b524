"""End-to-end run: fetch telemetry -> derive kinematics -> charts + stats."""

from pathlib import Path
from typing import Dict, Optional
from dataclasses import dataclass, field

from src.conf.settings import settings
from src.ingestion.tba_client import TBAClient, fetch_event_telemetry
from src.reporting.charts import write_match_chart
from src.reporting.stats_report import build_stats_report, save_stats_report
from src.transform.engine import MotionAnalysis, analyze_matches
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """Artifacts produced by one run."""

    analysis: MotionAnalysis
    stats_path: Path
    chart_paths: Dict[str, Path] = field(default_factory=dict)


def run_pipeline(
    team: int,
    event: str,
    api_key: str,
    output_dir: Optional[str | Path] = None,
    chart_format: Optional[str] = None,
    client: Optional[TBAClient] = None,
) -> PipelineResult:
    """Produce charts and stats for one team at one event.

    Args:
        team: Team number
        event: Event key
        api_key: TBA read API key
        output_dir: Artifact directory (defaults to settings.output_dir)
        chart_format: 'html' or 'svg' (defaults to settings.chart_format)
        client: Pre-built TBA client (mainly for tests)

    Returns:
        PipelineResult

    Raises:
        AcquisitionError: If any fetch fails
        InsufficientDataError: If no match has enough telemetry to summarize
    """
    output_dir = Path(output_dir or settings.output_dir)

    records = fetch_event_telemetry(team, event, api_key, client=client)
    analysis = analyze_matches(records)

    logger.info(f"Writing {len(analysis.series)} charts to {output_dir}")
    chart_paths = {}
    for summary in analysis.match_summaries:
        chart_paths[summary.match_id] = write_match_chart(
            analysis.series[summary.match_id],
            summary.match_id,
            summary.team_id,
            output_dir,
            fmt=chart_format,
        )

    report = build_stats_report(analysis.match_summaries, analysis.overall)
    stats_path = save_stats_report(report, output_dir)

    return PipelineResult(analysis=analysis, stats_path=stats_path, chart_paths=chart_paths)
