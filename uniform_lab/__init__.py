"""Uniform pseudo-random generators with moment-based self-validation."""

from .collector import SampleCollector
from .generators import LinearCongruentialGenerator, TableShuffleCombiner, UniformGenerator
from .moments import (
    UNIFORM_MOMENTS,
    DegenerateSampleError,
    MomentStatistics,
    compare,
    compute_moments,
)

__all__ = [
    "DegenerateSampleError",
    "LinearCongruentialGenerator",
    "MomentStatistics",
    "SampleCollector",
    "TableShuffleCombiner",
    "UNIFORM_MOMENTS",
    "UniformGenerator",
    "compare",
    "compute_moments",
]
