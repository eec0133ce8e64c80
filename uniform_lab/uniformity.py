"""Uniformity checks for generated samples: moments, Kolmogorov-Smirnov, chi-square."""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
from scipy.stats import chisquare, kstest

from .collector import SampleCollector
from .moments import UNIFORM_MOMENTS, compare, compute_moments, moment_deviations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MomentTestResult:
    name: str
    size: int
    observed: tuple
    deviations: tuple
    tolerance: float
    passed: bool


@dataclass(frozen=True)
class HypothesisTestResult:
    name: str
    statistic: float
    pvalue: float
    alpha: float

    @property
    def passed(self):
        # H0 (the sample is uniform) is not rejected
        return self.pvalue > self.alpha


def collect_sample(generator, size):
    """Draw ``size`` values through a SampleCollector and return them."""
    collector = SampleCollector(generator)
    return collector.extend(size)


def moment_test(generator, size, tolerance, name="sample"):
    """Collect ``size`` draws and check their moments against U(0,1).

    Each call tests its own sample; nothing is shared between calls.
    """
    sample = collect_sample(generator, size)
    return moment_test_sample(sample, tolerance, name=name)


def moment_test_sample(sample, tolerance, name="sample"):
    observed = compute_moments(sample)
    passed = compare(observed, UNIFORM_MOMENTS, tolerance)
    logger.debug("Moment test %s: %s passed=%s", name, observed, passed)
    return MomentTestResult(
        name=name,
        size=len(sample),
        observed=observed,
        deviations=moment_deviations(observed, UNIFORM_MOMENTS),
        tolerance=tolerance,
        passed=passed,
    )


# ======== PRUEBA DE HIPÓTESIS (Kolmogorov–Smirnov) ========
def ks_uniform_test(sample, alpha=0.05, name="sample"):
    """One-sample K-S test against U(0,1)."""
    if len(sample) == 0:
        raise ValueError("K-S test needs a non-empty sample")
    ks = kstest(np.asarray(sample), "uniform")
    return HypothesisTestResult(name, float(ks.statistic), float(ks.pvalue), alpha)


# ======== PRUEBA CHI-CUADRADO ========
def chi_square_uniform_test(sample, bins=20, alpha=0.05, name="sample"):
    """Frequency test over ``bins`` equal-width bins of [0, 1)."""
    if bins < 2:
        raise ValueError(f"chi-square test needs at least 2 bins, got {bins}")
    x = np.asarray(sample)
    if x.size == 0:
        raise ValueError("chi-square test needs a non-empty sample")
    observed, _ = np.histogram(x, bins=bins, range=(0.0, 1.0))
    expected = np.full(bins, x.size / bins)
    stat, pvalue = chisquare(observed, expected)
    return HypothesisTestResult(name, float(stat), float(pvalue), alpha)


def results_frame(results):
    """One row per moment test, with observed values and deviations."""
    rows = []
    for r in results:
        row = {"Sample": r.name, "N": r.size}
        for field, value in r.observed._asdict().items():
            row[field] = value
        for field, value in r.deviations._asdict().items():
            row[f"|Δ {field}|"] = value
        row["Tolerance"] = r.tolerance
        row["Status"] = "PASS" if r.passed else "FAIL"
        rows.append(row)
    return pd.DataFrame(rows)
