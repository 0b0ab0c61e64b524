"""Per-match speed/acceleration line charts."""

import plotly.graph_objects as go
import pandas as pd
from pathlib import Path
from typing import Optional

from src.conf.settings import settings
from src.transform.series import SeriesName
from src.utils.io_utils import ensure_dir
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

SERIES_COLORS = {
    SeriesName.SPEED.value: "#4c78a8",
    SeriesName.ACCELERATION.value: "#f58518",
}


def chart_filename(match_id: str, team_id: int, fmt: str) -> str:
    """File name for a match chart, e.g. '2020scmb_qm12_254.html'."""
    return f"{match_id}_{team_id}.{fmt}"


def build_match_figure(
    series: pd.DataFrame,
    match_id: str,
    team_id: int,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> go.Figure:
    """Build a two-line chart (speed, acceleration) against match time.

    Args:
        series: [x, y, series] rows from project_series
        match_id: Match key
        team_id: Team number
        width: Figure width in px (defaults to settings.chart_width)
        height: Figure height in px (defaults to settings.chart_height)

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    for name in SeriesName:
        rows = series[series["series"] == name.value]
        fig.add_trace(go.Scatter(
            x=rows["x"].tolist(),
            y=rows["y"].tolist(),
            mode="lines",
            name=name.value,
            line=dict(width=2, color=SERIES_COLORS[name.value]),
        ))

    fig.update_xaxes(title_text="Time (s)", showgrid=False)
    fig.update_yaxes(
        title_text="ft/s | ft/s²",
        showgrid=True,
        gridcolor="#ccc",
        zeroline=True,
    )

    fig.update_layout(
        title=f"{match_id} - Team {team_id}",
        width=width or settings.chart_width,
        height=height or settings.chart_height,
        margin=dict(l=5, r=5, t=40, b=5),
        plot_bgcolor="white",
        hovermode="x unified",
    )

    return fig


def write_match_chart(
    series: pd.DataFrame,
    match_id: str,
    team_id: int,
    output_dir: str | Path,
    fmt: Optional[str] = None,
) -> Path:
    """Render a match chart and write it to `output_dir`.

    Args:
        series: [x, y, series] rows from project_series
        match_id: Match key
        team_id: Team number
        output_dir: Directory for the chart file
        fmt: 'html' or 'svg' (defaults to settings.chart_format; svg needs kaleido)

    Returns:
        Path to the written file
    """
    fmt = fmt or settings.chart_format
    if fmt not in ("html", "svg"):
        raise ValueError(f"Unsupported chart format: {fmt}")

    output_file = ensure_dir(output_dir) / chart_filename(match_id, team_id, fmt)

    fig = build_match_figure(series, match_id, team_id)

    if fmt == "html":
        fig.write_html(str(output_file), include_plotlyjs="cdn")
    else:
        fig.write_image(str(output_file), format="svg")

    logger.info(f"  Chart: {output_file}")

    return output_file
