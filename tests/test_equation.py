import math

import pytest

from fermi.drake import (
    DrakeInputs,
    arrival_rate,
    drake_inputs_from_config,
    estimate_coexistence,
    habitable_planets,
    intelligent_civilizations,
    model_from_name,
    planets_in_galaxy,
)
from fermi.survival import ConfidenceInterval, DistributionModel


def test_planets_in_galaxy_multiplies_star_factors():
    inputs = DrakeInputs(stars_billions=100, fraction_with_planets=0.2, fraction_third_generation=0.1)
    assert planets_in_galaxy(inputs) == pytest.approx(2e9)


def test_default_factor_chain():
    inputs = DrakeInputs()
    assert planets_in_galaxy(inputs) == pytest.approx(62.5e9)
    assert habitable_planets(inputs) == pytest.approx(25e9)
    assert intelligent_civilizations(inputs) == pytest.approx(2.5e6)
    assert arrival_rate(inputs) == pytest.approx(2.5e-4)


def test_lognormal_estimate_uses_effective_mean():
    estimate = estimate_coexistence(DrakeInputs(), DistributionModel.LOGNORMAL, 10_000, 0.90)
    assert estimate.effective_mean == pytest.approx(16_487.2127, rel=1e-6)
    assert estimate.expected_n == pytest.approx(2.5e-4 * 16_487.2127, rel=1e-6)
    assert estimate.prob_alone == pytest.approx(math.exp(-estimate.expected_n))
    assert estimate.interval.lower <= 4 <= estimate.interval.upper
    assert estimate.stats.median == 10_000
    assert "lognormal" in estimate.insight


def test_lognormal_gives_more_civilizations_than_gaussian():
    gaussian = estimate_coexistence(DrakeInputs(), "gaussian", 10_000)
    lognormal = estimate_coexistence(DrakeInputs(), "lognormal", 10_000)
    assert lognormal.expected_n > gaussian.expected_n
    assert gaussian.model is DistributionModel.GAUSSIAN


def test_no_life_means_certainly_alone():
    estimate = estimate_coexistence(DrakeInputs(fraction_life=0.0), "exponential", 1e6)
    assert estimate.expected_n == 0
    assert estimate.interval == ConfidenceInterval(0, 0)
    assert estimate.prob_alone == 1


@pytest.mark.parametrize("lifetime", [0, -5, math.nan, math.inf])
def test_estimate_rejects_bad_lifetime(lifetime):
    with pytest.raises(ValueError, match="lifetime"):
        estimate_coexistence(DrakeInputs(), "gaussian", lifetime)


@pytest.mark.parametrize("level", [0.0, 1.0, 1.5, -0.1])
def test_estimate_rejects_bad_confidence_level(level):
    with pytest.raises(ValueError, match="confidence_level"):
        estimate_coexistence(DrakeInputs(), "gaussian", 1000, level)


@pytest.mark.parametrize("factors, field", [
    ({"fraction_life": 1.5}, "fraction_life"),
    ({"fraction_with_planets": -0.1}, "fraction_with_planets"),
    ({"stars_billions": 0}, "stars_billions"),
    ({"galaxy_age_years": 0}, "galaxy_age_years"),
    ({"habitable_per_system": -1}, "habitable_per_system"),
    ({"fraction_intelligence": math.nan}, "fraction_intelligence"),
])
def test_validate_rejects_bad_factors(factors, field):
    with pytest.raises(ValueError, match=field):
        DrakeInputs(**factors).validate()


def test_habitable_per_system_may_exceed_one():
    DrakeInputs(habitable_per_system=2.0).validate()


def test_out_of_range_star_count_is_flagged_not_rejected():
    inputs = DrakeInputs(stars_billions=600)
    inputs.validate()
    assert inputs.out_of_range_factors() == ["stars_billions"]
    assert DrakeInputs().out_of_range_factors() == []


def test_model_from_name():
    assert model_from_name("Exponential") is DistributionModel.EXPONENTIAL
    assert model_from_name(" lognormal ") is DistributionModel.LOGNORMAL
    assert model_from_name(DistributionModel.GAUSSIAN) is DistributionModel.GAUSSIAN
    with pytest.raises(ValueError, match="weibull"):
        model_from_name("weibull")


def test_drake_inputs_from_config_fills_defaults():
    inputs = drake_inputs_from_config({"stars_billions": 300, "fraction_life": "0.2"})
    assert inputs.stars_billions == 300.0
    assert inputs.fraction_life == 0.2
    assert inputs.galaxy_age_years == DrakeInputs().galaxy_age_years


def test_drake_inputs_from_config_rejects_unknown_factor():
    with pytest.raises(ValueError, match="fraction_cats"):
        drake_inputs_from_config({"fraction_cats": 0.5})


def test_drake_inputs_from_config_validates():
    with pytest.raises(ValueError):
        drake_inputs_from_config({"fraction_life": 2})
