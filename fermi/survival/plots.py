"""Plotting utilities for lifetime distributions and civilization counts."""

import math

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from typing import Iterable, Optional, Tuple

from .lifetimes import DistributionModel, get_distribution_stats, survival_function
from .poisson import get_confidence_interval, poisson_pmf, poisson_quantile

plt.style.use('default')
sns.set_palette("husl")

# Upper bound on bars or sampled points in a count plot
MAX_COUNT_POINTS = 500


def plot_lifetime_curves(
    lifetime: float,
    models: Iterable[DistributionModel] = tuple(DistributionModel),
    title: str = "Civilization Survival Curves",
    xlabel: str = "Age (years)",
    ylabel: str = "Probability Still Alive",
    figsize: Tuple[int, int] = (10, 6),
    save_path: Optional[str] = None
) -> plt.Figure:
    """Plot S(t) for each lifetime model at the same lifetime value."""
    fig, ax = plt.subplots(figsize=figsize)

    ages = np.linspace(0.0, 4.0 * lifetime, 400)
    for model in models:
        label = get_distribution_stats(model, lifetime).model_label
        ax.plot(ages, survival_function(model, lifetime, ages), label=label)

    ax.axvline(lifetime, color="grey", linestyle="--", alpha=0.6)
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_ylim(0.0, 1.05)
    ax.legend()
    ax.grid(True, alpha=0.3)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def plot_civilization_count(
    lam: float,
    confidence_level: float = 0.90,
    title: str = "Coexisting Civilizations",
    figsize: Tuple[int, int] = (10, 6),
    max_points: int = MAX_COUNT_POINTS,
    save_path: Optional[str] = None
) -> plt.Figure:
    """Plot P(X = k) with the confidence interval highlighted.

    Narrow ranges are drawn as one bar per k. Wider ranges are sampled at
    most ``max_points`` times and drawn as a filled curve.
    """
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_xlabel("Civilizations alive now")
    ax.set_ylabel("Probability")
    ax.grid(True, alpha=0.3)

    if not (math.isfinite(lam) and lam >= 0):
        ax.set_title(f"{title} (expected {lam})")
        ax.text(0.5, 0.5, "No finite expected count", ha="center", va="center",
                transform=ax.transAxes)
        if save_path:
            fig.savefig(save_path, dpi=300, bbox_inches='tight')
        return fig

    interval = get_confidence_interval(lam, confidence_level)
    # Central 99.98% of the mass
    k_min = min(int(poisson_quantile(0.0001, lam)), interval.lower)
    k_max = max(int(poisson_quantile(0.9999, lam)), interval.upper, 1)
    dense = k_max - k_min + 1 <= max_points
    if dense:
        ks = np.arange(k_min, k_max + 1)
    else:
        ks = np.unique(np.linspace(k_min, k_max, max_points).round().astype(np.int64))
    probs = np.array([poisson_pmf(int(k), lam) for k in ks])
    inside = (ks >= interval.lower) & (ks <= interval.upper)
    interval_label = f"{confidence_level * 100:g}% interval [{interval.lower}, {interval.upper}]"

    if dense:
        ax.bar(ks[~inside], probs[~inside], color="lightgrey", label="Outside interval")
        ax.bar(ks[inside], probs[inside], label=interval_label)
    else:
        ax.plot(ks, probs, color="grey", linewidth=1, label="P(X = k)")
        ax.fill_between(ks, 0.0, probs, where=inside, alpha=0.5, label=interval_label)

    ax.set_title(f"{title} (expected {lam:.3g})")
    ax.legend()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def plot_sweep(
    table: pd.DataFrame,
    title: str = "Coexisting Civilizations by Lifetime",
    figsize: Tuple[int, int] = (10, 6),
    save_path: Optional[str] = None
) -> plt.Figure:
    """Plot expected count and interval against lifetime, one line per model."""
    fig, ax = plt.subplots(figsize=figsize)

    for model in table['model'].unique():
        rows = table[table['model'] == model].sort_values('lifetime')
        ax.plot(rows['lifetime'], rows['lambda'], label=model, marker='o', markersize=3)
        ax.fill_between(rows['lifetime'], rows['ci_lower'], rows['ci_upper'], alpha=0.2)

    ax.set_xscale('log')
    ax.set_yscale('symlog', linthresh=1.0)
    ax.set_title(title)
    ax.set_xlabel("Lifetime (years)")
    ax.set_ylabel("Civilizations alive now")
    ax.legend()
    ax.grid(True, alpha=0.3)

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
