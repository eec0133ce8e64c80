"""Sample moments and their comparison with the U(0,1) reference values."""

from typing import NamedTuple

import numpy as np


class DegenerateSampleError(ValueError):
    """Raised when a sample has no spread, so skewness and kurtosis are undefined."""


class MomentStatistics(NamedTuple):
    mean: float
    variance: float
    skewness: float
    kurtosis: float

    def as_dict(self):
        return self._asdict()


# ======== MOMENTOS TEÓRICOS U(0,1) ========
UNIFORM_MOMENTS = MomentStatistics(mean=0.5, variance=1 / 12, skewness=0.0, kurtosis=-1.2)


def compute_moments(sample):
    """Mean, population variance, skewness and excess kurtosis of ``sample``.

    Raises DegenerateSampleError for an empty sample, one with zero
    variance (a single value, or all values equal), or one whose spread is
    too small to give finite skewness and kurtosis.
    """
    x = np.asarray(sample, dtype=np.float64).ravel()
    n = x.size
    if n == 0:
        raise DegenerateSampleError("cannot compute moments of an empty sample")

    mean = np.sum(x) / n
    d = x - mean
    d2 = d * d
    variance = np.sum(d2) / n
    # rounding in the mean can leave a tiny non-zero variance for a constant sample
    if variance == 0 or np.ptp(x) == 0:
        raise DegenerateSampleError(
            f"sample of size {n} has zero variance; skewness and kurtosis are undefined"
        )

    skew_denominator = n * variance**1.5
    kurt_denominator = n * variance**2
    # a subnormal variance underflows once raised to a power
    if skew_denominator == 0 or kurt_denominator == 0:
        raise DegenerateSampleError(
            f"sample of size {n} has variance {variance!r}, too small for skewness and kurtosis"
        )

    skewness = np.sum(d2 * d) / skew_denominator
    kurtosis = np.sum(d2 * d2) / kurt_denominator - 3.0
    if not (np.isfinite(skewness) and np.isfinite(kurtosis)):
        raise DegenerateSampleError(f"sample of size {n} gives non-finite skewness or kurtosis")
    return MomentStatistics(float(mean), float(variance), float(skewness), float(kurtosis))


def moment_deviations(observed, theoretical=UNIFORM_MOMENTS):
    """Absolute difference per moment."""
    return MomentStatistics(*(abs(o - t) for o, t in zip(observed, theoretical)))


def compare(observed, theoretical=UNIFORM_MOMENTS, tolerance=0.02):
    """True iff every moment is within ``tolerance`` of its reference value."""
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    return all(d <= tolerance for d in moment_deviations(observed, theoretical))
