"""
Civilization lifetime distributions.

When civilizations arise as a Poisson process at rate R and have
independent lifetimes drawn from a distribution f(t), the steady-state
count of simultaneously alive civilizations is Poisson(R * E[T]).

The lifetime value L is read differently per model:
    - gaussian:    L = mean,   E[T] = L
    - lognormal:   L = median, E[T] = L * exp(sigma^2 / 2)
    - exponential: L = mean,   E[T] = L
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from scipy import stats

from ..common.format import to_fixed


class DistributionModel(str, Enum):
    """Lifetime distribution families."""
    GAUSSIAN = "gaussian"
    LOGNORMAL = "lognormal"
    EXPONENTIAL = "exponential"


# Lognormal shape parameter
SIGMA_LOG = 1.0

# exp(sigma^2 / 2), converts a lognormal median into its mean
LOGNORMAL_MEAN_FACTOR = math.exp(SIGMA_LOG * SIGMA_LOG / 2)


@dataclass(frozen=True)
class DistributionStats:
    """Summary statistics of a lifetime distribution."""
    mean: float
    median: float
    std_dev: float
    cv: float           # std_dev / mean
    model_label: str


def get_effective_mean(model: DistributionModel, lifetime: float) -> float:
    """
    Effective mean lifetime E[T] for the chosen distribution model.

    This is what replaces the raw lifetime value in the civilization
    count formula.
    """
    if model == DistributionModel.LOGNORMAL:
        return lifetime * LOGNORMAL_MEAN_FACTOR
    return lifetime


def get_distribution_stats(model: DistributionModel, lifetime: float) -> DistributionStats:
    """Summary statistics for the lifetime distribution."""
    L = lifetime

    if model == DistributionModel.GAUSSIAN:
        # Support treated as mean +/- 3 sigma
        return DistributionStats(
            mean=L,
            median=L,
            std_dev=L / 3,
            cv=1 / 3,
            model_label="Gaussian",
        )

    if model == DistributionModel.LOGNORMAL:
        mean = L * LOGNORMAL_MEAN_FACTOR
        variance = mean * mean * (math.exp(SIGMA_LOG * SIGMA_LOG) - 1)
        return DistributionStats(
            mean=mean,
            median=L,
            std_dev=math.sqrt(variance),
            cv=math.sqrt(math.exp(SIGMA_LOG * SIGMA_LOG) - 1),
            model_label="Lognormal",
        )

    return DistributionStats(
        mean=L,
        median=L * math.log(2),
        std_dev=L,
        cv=1.0,
        model_label="Exponential",
    )


def survival_function(model: DistributionModel, lifetime: float, t):
    """
    Probability S(t) = P(T > t) that a civilization is still alive at age t.

    Accepts a scalar or array of ages and returns the same shape.
    """
    t = np.asarray(t, dtype=float)

    if model == DistributionModel.GAUSSIAN:
        dist = stats.norm(loc=lifetime, scale=lifetime / 3)
    elif model == DistributionModel.LOGNORMAL:
        dist = stats.lognorm(s=SIGMA_LOG, scale=lifetime)
    else:
        dist = stats.expon(scale=lifetime)

    sf = dist.sf(t)
    return sf if sf.ndim else float(sf)


def get_model_insight(model: DistributionModel, lifetime: float, expected_n: float) -> str:
    """Model-specific text explaining what the distribution implies."""
    L = lifetime

    if model == DistributionModel.GAUSSIAN:
        return (
            "Under the Gaussian model, civilizations cluster around the mean lifespan. "
            "The population is homogeneous — few die very young or survive far beyond the average."
        )

    if model == DistributionModel.LOGNORMAL:
        pct_more = to_fixed((LOGNORMAL_MEAN_FACTOR - 1) * 100, 0)
        return (
            "Under the lognormal model (Maccone 2010), the median survival is the slider value "
            f"but the mean is ~{pct_more}% higher due to the heavy right tail. "
            "A few extremely long-lived civilizations pull the average up, "
            "yielding more civilizations alive at any moment than symmetric models."
        )

    return (
        "Under the exponential (Doomsday) model, civilizations face a constant risk of "
        f"extinction regardless of age. Half die before {to_fixed(L * math.log(2), 0)} years. "
        "Most currently alive civilizations are relatively young."
    )
