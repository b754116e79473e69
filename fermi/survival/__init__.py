"""Survival model for coexisting civilizations."""

from .lifetimes import (
    DistributionModel,
    DistributionStats,
    LOGNORMAL_MEAN_FACTOR,
    SIGMA_LOG,
    get_distribution_stats,
    get_effective_mean,
    get_model_insight,
    survival_function
)
from .poisson import (
    ConfidenceInterval,
    get_confidence_interval,
    normal_quantile,
    poisson_pmf,
    poisson_quantile,
    prob_zero
)

__all__ = [
    'DistributionModel',
    'DistributionStats',
    'LOGNORMAL_MEAN_FACTOR',
    'SIGMA_LOG',
    'get_distribution_stats',
    'get_effective_mean',
    'get_model_insight',
    'survival_function',
    'ConfidenceInterval',
    'get_confidence_interval',
    'normal_quantile',
    'poisson_pmf',
    'poisson_quantile',
    'prob_zero'
]
