"""Sweep civilization lifetimes across all distribution models."""

import argparse
import sys

import matplotlib.pyplot as plt
from omegaconf.errors import OmegaConfBaseException

from ..common.config import load_config, get_output_dir, save_config
from ..common.io import save_csv
from ..common.logging import setup_logging
from ..drake.report import print_sweep_summary
from ..drake.runner import CalculatorRunner
from ..survival.plots import plot_civilization_count, plot_lifetime_curves, plot_sweep


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sweep civilization lifetimes per distribution model")
    parser.add_argument('--config', type=str, required=True, help='Path to config file')
    parser.add_argument(
        '--overrides',
        nargs='*',
        default=[],
        help='Configuration overrides in dotlist format'
    )
    parser.add_argument('--no-plots', action='store_true', help='Skip writing figures')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, args.overrides)
        output_dir = get_output_dir(config)
        logger = setup_logging(
            log_file=str(output_dir / "sweep.log"),
            level=config.get("logging", {}).get("level", "INFO")
        )
    except (OSError, ValueError, OmegaConfBaseException) as e:
        setup_logging().error(f"Could not load configuration: {e}")
        return 1

    logger.info(f"Starting lifetime sweep: {config.experiment_name}")
    logger.info(f"Output directory: {output_dir}")

    save_config(config, str(output_dir / "config.yaml"))

    runner = CalculatorRunner(config=config, logger=logger)
    try:
        table = runner.run_sweep()
        estimate = runner.run_estimate()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    sweep_file = output_dir / "sweep.csv"
    save_csv(table, sweep_file)
    logger.info(f"Saved {len(table)} rows to {sweep_file}")

    print_sweep_summary(table)

    make_plots = config.get("sweep", {}).get("plots", True) and not args.no_plots
    if make_plots:
        figures = {
            "lifetime_curves.png": plot_lifetime_curves(estimate.lifetime),
            "civilization_count.png": plot_civilization_count(
                estimate.expected_n, estimate.confidence_level
            ),
            "sweep.png": plot_sweep(table),
        }
        for filename, fig in figures.items():
            fig.savefig(output_dir / filename, dpi=300, bbox_inches='tight')
            plt.close(fig)
            logger.info(f"Saved figure {output_dir / filename}")

    logger.info("Sweep completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
