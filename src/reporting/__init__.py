"""Chart and stats artifact output."""

from .charts import build_match_figure, write_match_chart, chart_filename
from .stats_report import build_stats_report, save_stats_report

__all__ = [
    "build_match_figure",
    "write_match_chart",
    "chart_filename",
    "build_stats_report",
    "save_stats_report",
]
