"""
Drake factor chain feeding the coexistence estimate.

The multiplicative factors give the number of intelligent civilizations
that have ever arisen in the galaxy. Spread over the galaxy's age this is
the arrival rate R, which the survival model turns into the count of
civilizations alive at the same time.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Union

from ..survival.lifetimes import (
    DistributionModel,
    DistributionStats,
    get_distribution_stats,
    get_effective_mean,
    get_model_insight,
)
from ..survival.poisson import ConfidenceInterval, get_confidence_interval, prob_zero

STARS_PER_BILLION = 1_000_000_000

# Published estimates for the Milky Way, in billions of stars
STARS_BILLIONS_RANGE = (100, 500)

FRACTION_FIELDS = (
    "fraction_with_planets",
    "fraction_third_generation",
    "fraction_life",
    "fraction_intelligence",
    "fraction_communicating",
)


@dataclass(frozen=True)
class DrakeInputs:
    """User-chosen factors of the Drake equation."""
    stars_billions: float = 250.0
    fraction_with_planets: float = 0.5
    fraction_third_generation: float = 0.5
    habitable_per_system: float = 0.4
    fraction_life: float = 0.1
    fraction_intelligence: float = 0.01
    fraction_communicating: float = 0.1
    galaxy_age_years: float = 1.0e10

    def validate(self) -> None:
        """Raise ValueError if any factor is outside its meaningful domain."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")

        for name in FRACTION_FIELDS:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")

        if self.stars_billions <= 0:
            raise ValueError(f"stars_billions must be positive, got {self.stars_billions}")
        if self.habitable_per_system < 0:
            raise ValueError(
                f"habitable_per_system must be non-negative, got {self.habitable_per_system}"
            )
        if self.galaxy_age_years <= 0:
            raise ValueError(f"galaxy_age_years must be positive, got {self.galaxy_age_years}")

    def out_of_range_factors(self) -> List[str]:
        """Names of factors that are valid but outside published estimates."""
        low, high = STARS_BILLIONS_RANGE
        if not low <= self.stars_billions <= high:
            return ["stars_billions"]
        return []


@dataclass(frozen=True)
class CoexistenceEstimate:
    """Everything the calculator displays for one set of inputs."""
    inputs: DrakeInputs
    model: DistributionModel
    lifetime: float
    confidence_level: float
    planets_in_galaxy: float
    habitable_planets: float
    intelligent_civilizations: float
    arrival_rate: float
    effective_mean: float
    expected_n: float       # lambda
    interval: ConfidenceInterval
    prob_alone: float
    stats: DistributionStats
    insight: str


def planets_in_galaxy(inputs: DrakeInputs) -> float:
    return (
        inputs.stars_billions * STARS_PER_BILLION
        * inputs.fraction_with_planets
        * inputs.fraction_third_generation
    )


def habitable_planets(inputs: DrakeInputs) -> float:
    return planets_in_galaxy(inputs) * inputs.habitable_per_system


def intelligent_civilizations(inputs: DrakeInputs) -> float:
    """Civilizations that have ever arisen over the galaxy's history."""
    return (
        habitable_planets(inputs)
        * inputs.fraction_life
        * inputs.fraction_intelligence
        * inputs.fraction_communicating
    )


def arrival_rate(inputs: DrakeInputs) -> float:
    """New civilizations per year, R."""
    return intelligent_civilizations(inputs) / inputs.galaxy_age_years


def model_from_name(name: Union[str, DistributionModel]) -> DistributionModel:
    """Parse a distribution model name from configuration."""
    if isinstance(name, DistributionModel):
        return name
    try:
        return DistributionModel(str(name).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in DistributionModel)
        raise ValueError(f"Unknown distribution model: {name} (expected one of {choices})")


def drake_inputs_from_config(galaxy: Mapping[str, Any]) -> DrakeInputs:
    """Build validated DrakeInputs from the galaxy config section."""
    known = {f.name for f in fields(DrakeInputs)}
    unknown = sorted(set(galaxy) - known)
    if unknown:
        raise ValueError(f"Unknown galaxy factors: {', '.join(unknown)}")

    inputs = DrakeInputs(**{key: float(value) for key, value in galaxy.items()})
    inputs.validate()
    return inputs


def estimate_coexistence(
    inputs: DrakeInputs,
    model: Union[str, DistributionModel],
    lifetime: float,
    confidence_level: float = 0.90
) -> CoexistenceEstimate:
    """
    Estimate how many civilizations exist at the same time.

    Args:
        inputs: Drake factors giving the arrival rate R
        model: Lifetime distribution family
        lifetime: Mean (gaussian, exponential) or median (lognormal) lifetime in years
        confidence_level: Coverage of the interval on the count, in (0, 1)

    Returns:
        CoexistenceEstimate with lambda = R * E[T], the interval and P(alone)
    """
    if not (math.isfinite(lifetime) and lifetime > 0):
        raise ValueError(f"lifetime must be a positive number of years, got {lifetime}")
    if not 0.0 < confidence_level < 1.0:
        raise ValueError(f"confidence_level must be in (0, 1), got {confidence_level}")

    model = model_from_name(model)
    rate = arrival_rate(inputs)
    effective_mean = get_effective_mean(model, lifetime)
    lam = rate * effective_mean

    return CoexistenceEstimate(
        inputs=inputs,
        model=model,
        lifetime=lifetime,
        confidence_level=confidence_level,
        planets_in_galaxy=planets_in_galaxy(inputs),
        habitable_planets=habitable_planets(inputs),
        intelligent_civilizations=intelligent_civilizations(inputs),
        arrival_rate=rate,
        effective_mean=effective_mean,
        expected_n=lam,
        interval=get_confidence_interval(lam, confidence_level),
        prob_alone=prob_zero(lam),
        stats=get_distribution_stats(model, lifetime),
        insight=get_model_insight(model, lifetime, lam),
    )
