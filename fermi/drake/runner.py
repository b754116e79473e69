"""Runs configured calculator estimates and lifetime sweeps."""

from typing import Any, Dict, List

import pandas as pd

from .equation import (
    CoexistenceEstimate,
    DrakeInputs,
    drake_inputs_from_config,
    estimate_coexistence,
    model_from_name,
)
from .report import generate_sweep_table
from ..common.config import require_keys, section_to_dict
from ..common.logging import setup_logging
from ..survival.lifetimes import DistributionModel

REQUIRED_SURVIVAL_KEYS = ("model", "lifetime_years")


class CalculatorRunner:
    """Turns a calculator config into estimates."""

    def __init__(
        self,
        config: Dict[str, Any],
        logger = None
    ):
        self.config = config
        self.logger = logger or setup_logging()

    def build_inputs(self) -> DrakeInputs:
        """Validated Drake factors from the galaxy section."""
        inputs = drake_inputs_from_config(section_to_dict(self.config, "galaxy"))
        for name in inputs.out_of_range_factors():
            self.logger.warning(f"{name}={getattr(inputs, name)} is outside published estimates")
        return inputs

    def run_estimate(self) -> CoexistenceEstimate:
        """Single estimate for the configured model and lifetime."""
        require_keys(self.config, "survival", REQUIRED_SURVIVAL_KEYS)
        survival_config = self.config["survival"]
        inputs = self.build_inputs()

        estimate = estimate_coexistence(
            inputs,
            model=model_from_name(survival_config["model"]),
            lifetime=float(survival_config["lifetime_years"]),
            confidence_level=float(survival_config.get("confidence_level", 0.90))
        )

        self.logger.info(
            f"{estimate.stats.model_label} lifetime {estimate.lifetime:g} years: "
            f"R={estimate.arrival_rate:.4g}/year, E[T]={estimate.effective_mean:.4g} years"
        )
        self.logger.info(
            f"Expected coexisting civilizations {estimate.expected_n:.4g}, "
            f"interval [{estimate.interval.lower}, {estimate.interval.upper}], "
            f"P(alone)={estimate.prob_alone:.4g}"
        )
        return estimate

    def sweep_models(self) -> List[DistributionModel]:
        names = self.config.get("sweep", {}).get("models") or [m.value for m in DistributionModel]
        return [model_from_name(name) for name in names]

    def sweep_lifetimes(self) -> List[float]:
        lifetimes = self.config.get("sweep", {}).get("lifetimes")
        if not lifetimes:
            raise ValueError("sweep.lifetimes must list at least one lifetime")
        lifetimes = [float(value) for value in lifetimes]
        bad = [value for value in lifetimes if not value > 0]
        if bad:
            raise ValueError(f"sweep.lifetimes must be positive, got {bad}")
        return lifetimes

    def run_sweep(self, progress: bool = True) -> pd.DataFrame:
        """Every configured (model, lifetime) pair as a table."""
        inputs = self.build_inputs()
        models = self.sweep_models()
        lifetimes = self.sweep_lifetimes()
        level = float(self.config["survival"].get("confidence_level", 0.90))

        self.logger.info(
            f"Sweeping {len(models)} models x {len(lifetimes)} lifetimes "
            f"at {level * 100:g}% confidence"
        )
        table = generate_sweep_table(inputs, models, lifetimes, level, progress=progress)
        self.logger.info(f"Completed sweep with {len(table)} rows")
        return table
