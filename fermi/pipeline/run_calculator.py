"""Compute the number of coexisting civilizations for one configuration."""

import argparse
import sys

from omegaconf.errors import OmegaConfBaseException

from ..common.config import load_config, get_output_dir, save_config
from ..common.io import save_jsonl
from ..common.logging import setup_logging
from ..drake.report import estimate_record, print_estimate_report
from ..drake.runner import CalculatorRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate coexisting civilizations in the galaxy")
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--overrides",
        nargs="*",
        default=[],
        help="Configuration overrides in dotlist format, e.g. survival.model=exponential"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, args.overrides)
        output_dir = get_output_dir(config)
        logger = setup_logging(
            log_file=str(output_dir / "calculator.log"),
            level=config.get("logging", {}).get("level", "INFO")
        )
    except (OSError, ValueError, OmegaConfBaseException) as e:
        setup_logging().error(f"Could not load configuration: {e}")
        return 1

    logger.info(f"Starting calculation: {config.experiment_name}")
    logger.info(f"Output directory: {output_dir}")

    save_config(config, str(output_dir / "config.yaml"))

    runner = CalculatorRunner(config=config, logger=logger)
    try:
        estimate = runner.run_estimate()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print_estimate_report(estimate)

    records_file = output_dir / "estimates.jsonl"
    save_jsonl([estimate_record(estimate)], records_file, append=True)
    logger.info(f"Appended estimate to {records_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
