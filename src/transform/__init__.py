"""Transformation modules for motion statistics."""

from .kinematics import (
    samples_to_frame,
    filter_valid_samples,
    derive_distances,
    derive_speeds,
    derive_accelerations,
    derive_kinematics,
    round_half_up,
    MatchKinematics,
)
from .summary import (
    summarize_match,
    summarize_matches,
    summarize_global,
    InsufficientDataError,
)
from .series import project_series, SeriesName
from .engine import analyze_matches, select_present, MotionAnalysis

__all__ = [
    # Kinematics
    "samples_to_frame",
    "filter_valid_samples",
    "derive_distances",
    "derive_speeds",
    "derive_accelerations",
    "derive_kinematics",
    "round_half_up",
    "MatchKinematics",
    # Aggregation
    "summarize_match",
    "summarize_matches",
    "summarize_global",
    "InsufficientDataError",
    # Chart series
    "project_series",
    "SeriesName",
    # Engine
    "analyze_matches",
    "select_present",
    "MotionAnalysis",
]
