"""
Poisson count of coexisting civilizations.

The steady-state number of civilizations alive at once is X ~ Poisson(lambda)
with lambda = R * E[T]. Everything here is plain float arithmetic: no input
is rejected, and NaN or infinite inputs come back out as NaN or infinite
results for the display layer to render.
"""

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

# Below this k, ln(k!) is summed exactly; at or above it Stirling is used
STIRLING_THRESHOLD = 20

# Above this lambda the quantile switches to the normal approximation
NORMAL_APPROX_THRESHOLD = 200

# Abramowitz & Stegun 26.2.23 coefficients
_C0, _C1, _C2 = 2.515517, 0.802853, 0.010328
_D1, _D2, _D3 = 1.432788, 0.189269, 0.001308


@dataclass(frozen=True)
class ConfidenceInterval:
    """Equal-tailed interval on the number of coexisting civilizations."""
    lower: int
    upper: int


def log_factorial(k: int) -> float:
    """ln(k!), exact for small k and Stirling with a 1/(12k) term for large k."""
    if k <= 1:
        return 0.0
    if k < STIRLING_THRESHOLD:
        return sum(math.log(i) for i in range(2, k + 1))
    return k * math.log(k) - k + 0.5 * math.log(2 * math.pi * k) + 1 / (12 * k)


def poisson_pmf(k: int, lam: float) -> float:
    """
    P(X = k) for X ~ Poisson(lam), computed in log-space.

    A non-positive lam is a point mass at zero.
    """
    if lam <= 0:
        return 1.0 if k == 0 else 0.0
    if k < 0:
        return 0.0

    # log(P) = k ln(lam) - lam - ln(k!)
    log_p = k * math.log(lam) - lam - log_factorial(k)
    return math.exp(log_p)


def normal_quantile(p: float) -> float:
    """
    Standard normal inverse CDF.

    Rational approximation from Abramowitz & Stegun 26.2.23, accurate to
    about 4.5e-4.
    """
    if p <= 0:
        return -math.inf
    if p >= 1:
        return math.inf
    if p == 0.5:
        return 0.0

    sign = -1 if p < 0.5 else 1
    t = math.sqrt(-2 * math.log(min(p, 1 - p)))

    numerator = _C0 + _C1 * t + _C2 * t * t
    denominator = 1 + _D1 * t + _D2 * t * t + _D3 * t * t * t
    return sign * (t - numerator / denominator)


def poisson_quantile(p: float, lam: float) -> Union[int, float]:
    """
    Smallest k such that P(X <= k) >= p, for X ~ Poisson(lam).

    Large lam uses a normal approximation. Otherwise the CDF is summed term
    by term up to a cap of ceil(lam + 20 sqrt(lam + 1)), and the cap is
    returned if p is never reached. Only a NaN or infinite input can make
    the result a float.
    """
    if lam <= 0:
        return 0

    if lam > NORMAL_APPROX_THRESHOLD:
        z = normal_quantile(p)
        estimate = lam + z * math.sqrt(lam)
        if not math.isfinite(estimate):
            return 0 if estimate == -math.inf else estimate
        # Half-up rounding
        return max(0, math.floor(estimate + 0.5))

    cap = np.ceil(lam + 20 * np.sqrt(lam + 1))
    if np.isnan(cap):
        return math.nan
    cap = int(cap)

    cumulative = 0.0
    for k in range(cap + 1):
        cumulative += poisson_pmf(k, lam)
        if cumulative >= p:
            return k
    return cap


def get_confidence_interval(lam: float, level: float) -> ConfidenceInterval:
    """
    Confidence interval for the number of civilizations.

    The probability left outside the interval is split evenly between the
    two tails, e.g. 5% each for level 0.90.
    """
    if lam <= 0:
        return ConfidenceInterval(lower=0, upper=0)

    alpha = (1 - level) / 2
    return ConfidenceInterval(
        lower=poisson_quantile(alpha, lam),
        upper=poisson_quantile(1 - alpha, lam),
    )


def prob_zero(lam: float) -> float:
    """Probability that there are no civilizations: P(X = 0) = e^(-lam)."""
    if lam <= 0:
        return 1.0
    return math.exp(-lam)
