import math

import numpy as np
import pytest

from fermi.survival import (
    DistributionModel,
    LOGNORMAL_MEAN_FACTOR,
    get_distribution_stats,
    get_effective_mean,
    get_model_insight,
    survival_function,
)


@pytest.mark.parametrize("lifetime", [1.0, 100.0, 1e4, 1e9])
def test_lognormal_effective_mean_ratio_is_constant(lifetime):
    ratio = get_effective_mean(DistributionModel.LOGNORMAL, lifetime) / lifetime
    assert ratio == pytest.approx(1.64872, abs=1e-5)


def test_lognormal_effective_mean_at_100():
    assert get_effective_mean(DistributionModel.LOGNORMAL, 100) == pytest.approx(164.87, abs=0.01)


@pytest.mark.parametrize("model", [DistributionModel.GAUSSIAN, DistributionModel.EXPONENTIAL])
@pytest.mark.parametrize("lifetime", [0.0, 3.5, 1e6])
def test_symmetric_and_exponential_effective_mean_is_lifetime(model, lifetime):
    assert get_effective_mean(model, lifetime) == lifetime


def test_effective_mean_never_below_lifetime():
    for model in DistributionModel:
        for lifetime in [1.0, 50.0, 2e5]:
            assert get_effective_mean(model, lifetime) >= lifetime


def test_plain_strings_select_models():
    assert get_effective_mean("lognormal", 10) == get_effective_mean(DistributionModel.LOGNORMAL, 10)
    assert get_distribution_stats("gaussian", 9).model_label == "Gaussian"


def test_unknown_model_falls_through_to_exponential():
    stats = get_distribution_stats("weibull", 100)
    assert stats.model_label == "Exponential"


def test_no_validation_of_lifetime():
    assert get_effective_mean(DistributionModel.LOGNORMAL, -10) == pytest.approx(-10 * LOGNORMAL_MEAN_FACTOR)
    assert math.isnan(get_effective_mean(DistributionModel.LOGNORMAL, math.nan))
    assert math.isnan(get_distribution_stats(DistributionModel.LOGNORMAL, math.nan).std_dev)


def test_gaussian_stats():
    stats = get_distribution_stats(DistributionModel.GAUSSIAN, 300)
    assert stats.mean == 300
    assert stats.median == 300
    assert stats.std_dev == pytest.approx(100)
    assert stats.cv == pytest.approx(1 / 3)
    assert stats.model_label == "Gaussian"


def test_lognormal_stats():
    stats = get_distribution_stats(DistributionModel.LOGNORMAL, 100)
    assert stats.median == 100
    assert stats.mean == pytest.approx(100 * math.exp(0.5))
    assert stats.std_dev == pytest.approx(stats.mean * math.sqrt(math.e - 1))
    assert stats.model_label == "Lognormal"


def test_exponential_stats():
    stats = get_distribution_stats(DistributionModel.EXPONENTIAL, 100)
    assert stats.mean == 100
    assert stats.median == pytest.approx(69.31, abs=0.01)
    assert stats.std_dev == 100
    assert stats.cv == 1
    assert stats.model_label == "Exponential"


@pytest.mark.parametrize("model, cv", [
    (DistributionModel.GAUSSIAN, 1 / 3),
    (DistributionModel.LOGNORMAL, math.sqrt(math.e - 1)),
    (DistributionModel.EXPONENTIAL, 1.0),
])
def test_cv_is_independent_of_lifetime(model, cv):
    for lifetime in [10.0, 1e3, 1e6]:
        stats = get_distribution_stats(model, lifetime)
        assert stats.cv == pytest.approx(cv)
        assert stats.std_dev / stats.mean == pytest.approx(cv)


def test_survival_function_is_half_at_median():
    for model in DistributionModel:
        median = get_distribution_stats(model, 1000).median
        assert survival_function(model, 1000, median) == pytest.approx(0.5)


def test_survival_function_shape_and_bounds():
    ages = np.linspace(0, 5000, 11)
    for model in DistributionModel:
        sf = survival_function(model, 1000, ages)
        assert sf.shape == ages.shape
        assert np.all(np.diff(sf) <= 0)
        assert np.all((sf >= 0) & (sf <= 1))
    assert survival_function(DistributionModel.EXPONENTIAL, 1000, 0) == 1.0
    assert isinstance(survival_function(DistributionModel.GAUSSIAN, 1000, 10), float)


def test_gaussian_insight():
    text = get_model_insight(DistributionModel.GAUSSIAN, 1000, 3.0)
    assert text.startswith("Under the Gaussian model, civilizations cluster around the mean lifespan.")


def test_lognormal_insight_reports_mean_uplift():
    text = get_model_insight(DistributionModel.LOGNORMAL, 1000, 3.0)
    assert "(Maccone 2010)" in text
    assert "the mean is ~65% higher due to the heavy right tail." in text


@pytest.mark.parametrize("lifetime, half_life", [(100, "69"), (1000, "693"), (10000, "6931")])
def test_exponential_insight_reports_median(lifetime, half_life):
    text = get_model_insight(DistributionModel.EXPONENTIAL, lifetime, 3.0)
    assert f"Half die before {half_life} years." in text
