"""Long-format chart series for speed and acceleration."""

import pandas as pd
from enum import Enum

SERIES_COLUMNS = ["x", "y", "series"]


class SeriesName(str, Enum):
    """Line series drawn on each match chart."""

    SPEED = "speed"
    ACCELERATION = "acceleration"


def project_series(speeds: pd.DataFrame, accelerations: pd.DataFrame) -> pd.DataFrame:
    """Stack speed and acceleration rows into one [x, y, series] frame.

    Speed rows come first, then acceleration rows, each in time order.
    """
    speed_rows = pd.DataFrame(
        {
            "x": speeds["timestamp"].astype("float64"),
            "y": speeds["speed"].astype("float64"),
            "series": SeriesName.SPEED.value,
        }
    )
    accel_rows = pd.DataFrame(
        {
            "x": accelerations["timestamp"].astype("float64"),
            "y": accelerations["acceleration"].astype("float64"),
            "series": SeriesName.ACCELERATION.value,
        }
    )

    return pd.concat([speed_rows, accel_rows], ignore_index=True)[SERIES_COLUMNS]
