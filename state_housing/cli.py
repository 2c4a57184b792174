"""Command-line interface for the state housing price chart."""

import argparse
import sys
from typing import List, Optional

from .config import Settings, get_default_settings
from .config import constants
from .pipeline import run_pipeline
from .utils.exceptions import ConfigurationError
from .utils.logging import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot Zillow average sale prices for tracked states"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON settings file"
    )
    parser.add_argument(
        "--input",
        type=str,
        help=f"Path to the wide price CSV (default: {constants.DEFAULT_INPUT_PATH})"
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write the chart to this HTML file instead of opening it"
    )
    parser.add_argument(
        "--states",
        nargs="+",
        metavar="STATE",
        help="State codes to plot (default: the built-in list)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=constants.LOG_LEVELS,
        help="Logging level"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON"
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge the optional settings file with command-line overrides."""
    if args.config:
        try:
            settings = Settings.from_json(args.config)
        except (OSError, ValueError, TypeError) as exc:
            raise ConfigurationError(
                f"Cannot load settings from {args.config}: {exc}"
            ) from exc
    else:
        settings = get_default_settings()

    if args.input:
        settings.input_path = args.input
    if args.output:
        settings.output_path = args.output
    if args.states:
        settings.tracked_states = list(args.states)
    if args.log_level:
        settings.log_level = args.log_level
    if args.json_logs:
        settings.json_logs = True

    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``state-housing`` console script."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args)

    configure_logging(settings.log_level, settings.json_logs, settings.log_file)
    logger = get_logger(__name__)

    try:
        result = run_pipeline(settings)
    except Exception:
        logger.exception("pipeline_failed", input_path=settings.input_path)
        raise

    logger.info(
        "pipeline_finished",
        observations=len(result.observations),
        output_path=str(result.output_path) if result.output_path else None,
        seconds=round(result.execution_time_seconds, 2)
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
