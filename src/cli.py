"""Command-line entry point.

Usage:
    frc-motion-calc --team 254 --event 2020scmb --key <TBA API key>
"""

import argparse
import sys
from datetime import datetime
from typing import List, Optional

from src.conf.settings import settings
from src.ingestion.tba_client import AcquisitionError
from src.pipeline import run_pipeline
from src.transform.summary import InsufficientDataError
from src.utils.logging_utils import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="frc-motion-calc",
        description="Speed/acceleration charts and stats from MotionWorks data",
    )
    parser.add_argument("-t", "--team", type=int, required=True, help="Team number")
    parser.add_argument("-e", "--event", type=str, required=True, help="Event key")
    parser.add_argument("-k", "--key", type=str, required=True, help="TBA API key")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # Root logger, so every module logger inherits the handlers
    log_file = None
    if settings.log_to_file:
        log_file = f"motion_{args.team}_{args.event}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    logger = setup_logger("", log_file=log_file)

    try:
        result = run_pipeline(args.team, args.event, args.key)
    except AcquisitionError as e:
        logger.error(f"Fetch failed: {e}")
        return 1
    except InsufficientDataError as e:
        logger.error(f"Nothing to summarize: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Writing artifacts failed: {e}")
        return 1

    logger.info(f"Stats: {result.stats_path}")
    logger.info(f"Charts: {len(result.chart_paths)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
