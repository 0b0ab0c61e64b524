"""Demo: run the motion engine on synthetic MotionWorks-style telemetry.

Generates three fake matches (one without telemetry, one with tracking
dropouts) at 10 Hz, then writes charts and stats to demo_output/.

Usage:
    python examples/demo_kinematics.py
"""

import sys
from pathlib import Path

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.reporting.charts import write_match_chart
from src.reporting.stats_report import build_stats_report, save_stats_report
from src.schemas.telemetry import (
    PositionSample,
    PresentTelemetry,
    AbsentTelemetry,
    MatchTelemetry,
)
from src.transform.engine import analyze_matches
from src.utils.logging_utils import setup_logger

logger = setup_logger("", log_level="INFO")

TEAM = 254
SAMPLE_HZ = 10.0
MATCH_SEC = 150.0


def synthetic_points(seed: int, dropout_pct: float = 0.0) -> list[PositionSample]:
    """Robot driving laps of an ellipse with varying pace."""
    rng = np.random.default_rng(seed)
    times = np.round(np.arange(0.0, MATCH_SEC, 1.0 / SAMPLE_HZ), 1)

    pace = 0.3 + 0.2 * np.sin(times / 7.0) + rng.normal(0, 0.02, len(times))
    angle = np.cumsum(np.clip(pace, 0.0, None)) / SAMPLE_HZ
    xs = 27.0 + 20.0 * np.cos(angle) + rng.normal(0, 0.05, len(times))
    ys = 13.5 + 10.0 * np.sin(angle) + rng.normal(0, 0.05, len(times))

    dropped = rng.random(len(times)) < dropout_pct

    return [
        PositionSample(
            time=float(t),
            x=None if d else round(float(x), 2),
            y=None if d else round(float(y), 2),
        )
        for t, x, y, d in zip(times, xs, ys, dropped)
    ]


def main():
    output_dir = Path("demo_output")

    records = [
        MatchTelemetry("demo_qm1", TEAM, PresentTelemetry(synthetic_points(seed=1))),
        MatchTelemetry("demo_qm2", TEAM, AbsentTelemetry()),
        MatchTelemetry(
            "demo_qm3", TEAM, PresentTelemetry(synthetic_points(seed=3, dropout_pct=0.05))
        ),
    ]

    analysis = analyze_matches(records)

    for summary in analysis.match_summaries:
        write_match_chart(
            analysis.series[summary.match_id], summary.match_id, summary.team_id, output_dir
        )

    report = build_stats_report(analysis.match_summaries, analysis.overall)
    stats_path = save_stats_report(report, output_dir)

    logger.info("")
    logger.info("Key Statistics:")
    for summary in analysis.match_summaries:
        logger.info(
            f"  - {summary.match_id}: max {summary.max_speed_fps:.2f} ft/s, "
            f"avg {summary.avg_speed_fps:.2f} ft/s, "
            f"accel {summary.max_accel_fpsps:.2f} / brake {summary.max_brake_fpsps:.2f}"
        )
    logger.info(f"  - Stats: {stats_path}")


if __name__ == "__main__":
    main()
