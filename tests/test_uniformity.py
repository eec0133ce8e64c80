import numpy as np
import pytest

from uniform_lab import LinearCongruentialGenerator, TableShuffleCombiner, UniformGenerator
from uniform_lab.config import A1, A2, C1, C2
from uniform_lab.uniformity import (
    chi_square_uniform_test,
    collect_sample,
    ks_uniform_test,
    moment_test,
    moment_test_sample,
    results_frame,
)


class HalfGenerator(UniformGenerator):
    """Values squeezed into [0, 0.5): clearly not uniform on [0, 1)."""

    def __init__(self):
        self._inner = LinearCongruentialGenerator(A1, C1)

    def draw(self):
        return 0.5 * self._inner.draw()


def _combiner():
    return TableShuffleCombiner(LinearCongruentialGenerator(A1, C1), LinearCongruentialGenerator(A2, C2), 64)


def test_collect_sample_matches_direct_draws():
    sample = collect_sample(LinearCongruentialGenerator(A1, C1), 100)
    assert np.array_equal(sample, LinearCongruentialGenerator(A1, C1).sample(100))


@pytest.mark.parametrize("factory", [lambda: LinearCongruentialGenerator(A1, C1), _combiner])
def test_reference_generators_pass_moment_test(factory):
    result = moment_test(factory(), 10000, 0.02, name="ref")
    assert result.passed
    assert result.size == 10000
    assert max(result.deviations) <= 0.02


def test_skewed_generator_fails_moment_test():
    result = moment_test(HalfGenerator(), 10000, 0.02, name="half")
    assert not result.passed
    assert result.deviations.mean > 0.2


def test_each_sample_is_tested_on_its_own():
    good = moment_test(LinearCongruentialGenerator(A1, C1), 5000, 0.02, name="good")
    bad = moment_test(HalfGenerator(), 5000, 0.02, name="bad")
    assert good.passed
    assert not bad.passed
    assert good.observed != bad.observed


@pytest.mark.parametrize("factory", [lambda: LinearCongruentialGenerator(A1, C1), _combiner])
def test_reference_generators_pass_hypothesis_tests(factory):
    sample = factory().sample(10000)
    assert ks_uniform_test(sample, alpha=0.05).passed
    assert chi_square_uniform_test(sample, bins=20, alpha=0.05).passed


def test_hypothesis_tests_reject_half_interval():
    sample = HalfGenerator().sample(2000)
    ks = ks_uniform_test(sample, alpha=0.05)
    chi = chi_square_uniform_test(sample, bins=10, alpha=0.05)
    assert not ks.passed
    assert ks.statistic == pytest.approx(0.5, abs=0.05)
    assert not chi.passed


def test_hypothesis_tests_validate_input():
    with pytest.raises(ValueError):
        ks_uniform_test([])
    with pytest.raises(ValueError):
        chi_square_uniform_test([0.1, 0.2], bins=1)
    with pytest.raises(ValueError):
        chi_square_uniform_test([], bins=10)


def test_results_frame_rows():
    sample = LinearCongruentialGenerator(A1, C1).sample(2000)
    results = [
        moment_test_sample(sample, 0.02, name="lcg"),
        moment_test_sample(HalfGenerator().sample(2000), 0.02, name="half"),
    ]
    df = results_frame(results)
    assert list(df["Sample"]) == ["lcg", "half"]
    assert list(df["Status"]) == ["PASS", "FAIL"]
    assert {"mean", "variance", "skewness", "kurtosis", "Tolerance"} <= set(df.columns)
