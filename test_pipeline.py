"""Tests for the engine, reporting outputs and the end-to-end run."""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pandas as pd
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.cli import main, parse_args
from src.ingestion.tba_client import TBAClient, AcquisitionError
from src.pipeline import run_pipeline
from src.reporting.charts import build_match_figure, write_match_chart, chart_filename
from src.reporting.stats_report import build_stats_report, save_stats_report
from src.schemas.telemetry import (
    PositionSample,
    PresentTelemetry,
    AbsentTelemetry,
    MatchTelemetry,
)
from src.transform.engine import analyze_matches, select_present
from src.transform.series import project_series, SeriesName
from src.transform.summary import InsufficientDataError, summarize_global
from src.utils.io_utils import load_json
from src.utils.logging_utils import get_logger, setup_logger

BASE_URL = "https://tba.test/api/v3"


def straight_line_points(speeds, dt=1.0):
    """Samples moving along x at the given per-step speeds."""
    points = [PositionSample(time=0.0, x=0.0, y=0.0)]
    x = 0.0
    for i, v in enumerate(speeds, start=1):
        x += v * dt
        points.append(PositionSample(time=i * dt, x=x, y=0.0))
    return points


def present(match_id, points, team_id=254):
    return MatchTelemetry(match_id, team_id, PresentTelemetry(points))


def absent(match_id, team_id=254):
    return MatchTelemetry(match_id, team_id, AbsentTelemetry())


class TestSeriesProjection:
    def test_field_mapping(self):
        speeds = pd.DataFrame({"timestamp": [0.0, 0.1], "speed": [1.5, 2.0]})
        accelerations = pd.DataFrame(
            {"timestamp": [0.0], "duration": [0.1], "acceleration": [0.5]}
        )

        series = project_series(speeds, accelerations)

        assert series.to_dict("records") == [
            {"x": 0.0, "y": 1.5, "series": "speed"},
            {"x": 0.1, "y": 2.0, "series": "speed"},
            {"x": 0.0, "y": 0.5, "series": "acceleration"},
        ]

    def test_series_names(self):
        assert [s.value for s in SeriesName] == ["speed", "acceleration"]


class TestEngine:
    def test_select_present(self):
        records = [present("qm1", straight_line_points([1, 2, 3])), absent("qm2")]

        assert [r.match_id for r in select_present(records)] == ["qm1"]

    def test_absent_and_short_matches_are_excluded(self):
        records = [
            present("2020scmb_qm1", straight_line_points([1, 2, 4, 4])),
            absent("2020scmb_qm2"),
            present("2020scmb_qm3", straight_line_points([3])),
            present("2020scmb_qm4", straight_line_points([2, 2, 2])),
        ]

        analysis = analyze_matches(records)

        assert analysis.absent_matches == ["2020scmb_qm2"]
        assert [k.match_id for k in analysis.kinematics] == [
            "2020scmb_qm1", "2020scmb_qm3", "2020scmb_qm4",
        ]
        assert [s.match_id for s in analysis.match_summaries] == ["2020scmb_qm1", "2020scmb_qm4"]
        assert set(analysis.series) == {"2020scmb_qm1", "2020scmb_qm4"}

        qm1 = analysis.match_summaries[0]
        assert qm1.max_speed_fps == 4.0
        assert qm1.max_accel_fpsps == 2.0
        assert qm1.max_brake_fpsps == 1.0

        assert analysis.overall == summarize_global(analysis.match_summaries)

    def test_nothing_to_summarize_raises(self):
        with pytest.raises(InsufficientDataError):
            analyze_matches([absent("qm1"), present("qm2", straight_line_points([1]))])


class TestReporting:
    @pytest.fixture
    def series(self):
        speeds = pd.DataFrame({"timestamp": [0.0, 0.1, 0.2], "speed": [1.0, 2.0, 1.5]})
        accelerations = pd.DataFrame(
            {"timestamp": [0.0, 0.1], "duration": [0.1, 0.1], "acceleration": [1.0, -0.5]}
        )
        return project_series(speeds, accelerations)

    def test_figure_has_one_trace_per_series(self, series):
        fig = build_match_figure(series, "2020scmb_qm1", 254, width=800, height=300)

        assert [trace.name for trace in fig.data] == ["speed", "acceleration"]
        assert list(fig.data[0].y) == [1.0, 2.0, 1.5]
        assert list(fig.data[1].x) == [0.0, 0.1]
        assert fig.layout.width == 800

    def test_chart_filename(self):
        assert chart_filename("2020scmb_qm1", 254, "svg") == "2020scmb_qm1_254.svg"

    def test_write_html_chart(self, series, tmp_path):
        path = write_match_chart(series, "2020scmb_qm1", 254, tmp_path, fmt="html")

        assert path == tmp_path / "2020scmb_qm1_254.html"
        assert path.exists()

    def test_unknown_format_rejected(self, series, tmp_path):
        with pytest.raises(ValueError):
            write_match_chart(series, "2020scmb_qm1", 254, tmp_path, fmt="png")

    def test_stats_artifact_layout(self, tmp_path):
        analysis = analyze_matches([
            present("2020scmb_qm1", straight_line_points([10, 10, 10])),
            present("2020scmb_qm2", straight_line_points([20, 20, 20])),
        ])
        report = build_stats_report(analysis.match_summaries, analysis.overall)

        path = save_stats_report(report, tmp_path, "stats.json")
        data = load_json(path)

        assert [m["match"] for m in data["individual_matches"]] == ["2020scmb_qm1", "2020scmb_qm2"]
        assert data["individual_matches"][0]["team"] == 254
        assert data["maxSpeed_fps"] == 20.0
        assert data["avgMaxSpeed_fps"] == 15.0
        assert data["avgSpeed_fps"] == 15.0
        assert data["maxAccel_fpsps"] == 0.0
        assert data["maxBrake_fpsps"] == 0.0


def motionworks_body(xs):
    return {
        "times": [float(i) for i in range(len(xs))],
        "alliances": {
            "red": [{"team_key": "frc254", "xs": xs, "ys": [0.0] * len(xs)}],
            "blue": [],
        },
    }


def fake_client(routes):
    session = Mock()
    session.headers = {}

    def get(url, timeout=None):
        response = Mock()
        status, body = routes[url[len(BASE_URL):]]
        response.status_code = status
        response.json.return_value = body
        return response

    session.get.side_effect = get
    return TBAClient("secret", base_url=BASE_URL, session=session)


class TestRunPipeline:
    def test_end_to_end(self, tmp_path):
        client = fake_client({
            "/team/frc254/event/2020scmb/matches/keys": (
                200, ["2020scmb_qm1", "2020scmb_qm2", "2020scmb_qm3"]
            ),
            "/match/2020scmb_qm1/zebra_motionworks": (200, motionworks_body([0.0, 1.0, 3.0, 6.0])),
            "/match/2020scmb_qm2/zebra_motionworks": (404, None),
            "/match/2020scmb_qm3/zebra_motionworks": (
                200, motionworks_body([0.0, None, 2.0, 4.0, 7.0])
            ),
        })

        result = run_pipeline(254, "2020scmb", "secret", output_dir=tmp_path,
                              chart_format="html", client=client)

        assert set(result.chart_paths) == {"2020scmb_qm1", "2020scmb_qm3"}
        assert (tmp_path / "2020scmb_qm1_254.html").exists()
        assert not (tmp_path / "2020scmb_qm2_254.html").exists()

        data = load_json(result.stats_path)
        assert [m["match"] for m in data["individual_matches"]] == ["2020scmb_qm1", "2020scmb_qm3"]
        assert data["maxSpeed_fps"] == 2.0

    def test_fetch_failure_writes_nothing(self, tmp_path):
        client = fake_client({
            "/team/frc254/event/2020scmb/matches/keys": (500, None),
        })

        with pytest.raises(AcquisitionError):
            run_pipeline(254, "2020scmb", "secret", output_dir=tmp_path, client=client)

        assert list(tmp_path.iterdir()) == []


class TestCli:
    def test_parse_args(self):
        args = parse_args(["-t", "254", "-e", "2020scmb", "-k", "secret"])

        assert args.team == 254
        assert args.event == "2020scmb"
        assert args.key == "secret"

    def test_all_arguments_required(self):
        with pytest.raises(SystemExit):
            parse_args(["-t", "254", "-e", "2020scmb"])

    @patch("src.cli.setup_logger")
    @patch("src.cli.run_pipeline")
    def test_success_exit_code(self, mock_run, mock_setup_logger):
        mock_run.return_value = Mock(stats_path=Path("stats.json"), chart_paths={})

        assert main(["--team", "254", "--event", "2020scmb", "--key", "secret"]) == 0
        mock_run.assert_called_once_with(254, "2020scmb", "secret")

    @patch("src.cli.setup_logger")
    @patch("src.cli.run_pipeline")
    def test_fetch_failure_exit_code(self, mock_run, mock_setup_logger):
        mock_run.side_effect = AcquisitionError("Status code: 500")

        assert main(["-t", "254", "-e", "2020scmb", "-k", "secret"]) == 1

    @patch("src.cli.setup_logger")
    @patch("src.cli.run_pipeline")
    def test_chart_write_failure_exit_code(self, mock_run, mock_setup_logger):
        mock_run.side_effect = ValueError("Image export using the \"kaleido\" engine requires kaleido")

        assert main(["-t", "254", "-e", "2020scmb", "-k", "secret"]) == 1

    @patch("src.cli.setup_logger")
    @patch("src.cli.run_pipeline")
    def test_output_dir_failure_exit_code(self, mock_run, mock_setup_logger):
        mock_run.side_effect = PermissionError("Permission denied: 'stats.json'")

        assert main(["-t", "254", "-e", "2020scmb", "-k", "secret"]) == 1

    @patch("src.cli.setup_logger")
    @patch("src.cli.run_pipeline")
    def test_no_data_exit_code(self, mock_run, mock_setup_logger):
        mock_run.side_effect = InsufficientDataError("No match summaries to aggregate")

        assert main(["-t", "254", "-e", "2020scmb", "-k", "secret"]) == 1


class TestLogging:
    def test_get_logger_leaves_root_handlers_alone(self):
        root = logging.getLogger()
        before = list(root.handlers)

        logger = get_logger("src.some_module")

        assert logger.name == "src.some_module"
        assert root.handlers == before

    def test_setup_logger_writes_file(self, tmp_path):
        logger = setup_logger("motion_test", log_level="DEBUG", log_file="run.log", log_dir=tmp_path)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in (tmp_path / "run.log").read_text()
