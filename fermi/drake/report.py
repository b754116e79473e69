"""Tables and console reports of coexistence estimates."""

from dataclasses import asdict
from typing import Any, Dict, Iterable

import pandas as pd
from tqdm import tqdm

from .equation import CoexistenceEstimate, DrakeInputs, estimate_coexistence
from ..common.format import format_integer, format_number
from ..survival.lifetimes import DistributionModel

SWEEP_COLUMNS = [
    "model", "lifetime", "effective_mean", "lambda", "ci_lower", "ci_upper",
    "prob_alone", "mean", "median", "std_dev", "cv",
]


def estimate_record(estimate: CoexistenceEstimate) -> Dict[str, Any]:
    """Flat JSON-serializable record of an estimate."""
    record = asdict(estimate.inputs)
    record.update({
        "model": estimate.model.value,
        "lifetime": estimate.lifetime,
        "confidence_level": estimate.confidence_level,
        "planets_in_galaxy": estimate.planets_in_galaxy,
        "habitable_planets": estimate.habitable_planets,
        "intelligent_civilizations": estimate.intelligent_civilizations,
        "arrival_rate": estimate.arrival_rate,
        "effective_mean": estimate.effective_mean,
        "expected_n": estimate.expected_n,
        "ci_lower": estimate.interval.lower,
        "ci_upper": estimate.interval.upper,
        "prob_alone": estimate.prob_alone,
        "mean": estimate.stats.mean,
        "median": estimate.stats.median,
        "std_dev": estimate.stats.std_dev,
        "cv": estimate.stats.cv,
        "model_label": estimate.stats.model_label,
        "insight": estimate.insight,
    })
    return record


def generate_sweep_table(
    inputs: DrakeInputs,
    models: Iterable[DistributionModel],
    lifetimes: Iterable[float],
    confidence_level: float = 0.90,
    progress: bool = False
) -> pd.DataFrame:
    """
    Evaluate every (model, lifetime) pair for one set of Drake factors.

    Args:
        inputs: Drake factors
        models: Distribution models to compare
        lifetimes: Lifetime values in years
        confidence_level: Coverage of the interval on the count
        progress: Show a tqdm progress bar

    Returns:
        DataFrame with one row per pair, columns as in SWEEP_COLUMNS
    """
    pairs = [(model, lifetime) for model in models for lifetime in lifetimes]
    results = []

    for model, lifetime in tqdm(pairs, desc="Sweep", disable=not progress):
        estimate = estimate_coexistence(inputs, model, lifetime, confidence_level)
        results.append({
            "model": estimate.model.value,
            "lifetime": estimate.lifetime,
            "effective_mean": estimate.effective_mean,
            "lambda": estimate.expected_n,
            "ci_lower": estimate.interval.lower,
            "ci_upper": estimate.interval.upper,
            "prob_alone": estimate.prob_alone,
            "mean": estimate.stats.mean,
            "median": estimate.stats.median,
            "std_dev": estimate.stats.std_dev,
            "cv": estimate.stats.cv,
        })

    return pd.DataFrame(results, columns=SWEEP_COLUMNS)


def print_estimate_report(estimate: CoexistenceEstimate):
    """Print the calculator output for one estimate."""
    level_pct = f"{estimate.confidence_level * 100:g}"

    print("=" * 70)
    print("CIVILIZATIONS IN THE GALAXY")
    print("=" * 70)
    print(f"  Planets in galaxy:           {format_number(estimate.planets_in_galaxy)}")
    print(f"  Habitable planets:           {format_number(estimate.habitable_planets)}")
    print(f"  Intelligent civilizations:   {format_number(estimate.intelligent_civilizations)}")
    print(f"  New civilizations per year:  {format_number(estimate.arrival_rate)}")

    stats = estimate.stats
    print(f"\n{stats.model_label.upper()} LIFETIME ({format_number(estimate.lifetime)} years):")
    print(f"  Mean:       {format_number(stats.mean)} years")
    print(f"  Median:     {format_number(stats.median)} years")
    print(f"  Std. dev.:  {format_number(stats.std_dev)} years")
    print(f"  CV:         {format_number(stats.cv)}")

    print("\n" + "=" * 70)
    print("COEXISTING CIVILIZATIONS")
    print("=" * 70)
    print(f"  Expected now:       {format_number(estimate.expected_n)}")
    print(
        f"  {level_pct}% interval:     "
        f"{format_integer(estimate.interval.lower)} - {format_integer(estimate.interval.upper)}"
    )
    print(f"  P(alone):           {format_number(estimate.prob_alone * 100)}%")
    print(f"\n  {estimate.insight}")

    flagged = estimate.inputs.out_of_range_factors()
    if flagged:
        print(f"\n  Outside published estimates: {', '.join(flagged)}")


def print_sweep_summary(table: pd.DataFrame):
    """Print expected counts per model and lifetime."""
    print("=" * 70)
    print("LIFETIME SWEEP")
    print("=" * 70)

    for model, rows in table.groupby("model", sort=False):
        print(f"\n{model.upper()}:")
        for _, row in rows.iterrows():
            print(
                f"  L = {format_number(row['lifetime']):>12} years -> "
                f"{format_number(row['lambda']):>14} civilizations "
                f"[{format_integer(row['ci_lower'])} - {format_integer(row['ci_upper'])}], "
                f"P(alone) {format_number(row['prob_alone'] * 100)}%"
            )
