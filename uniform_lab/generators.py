"""Uniform [0, 1) generators: multiplicative congruential and MacLaren-Marsaglia."""

import logging
import numbers
from abc import ABC, abstractmethod

import numpy as np

from .config import MODULUS

logger = logging.getLogger(__name__)


class UniformGenerator(ABC):
    """Anything that can draw the next value in [0, 1)."""

    @abstractmethod
    def draw(self):
        """Advance one step and return the next value in [0, 1)."""

    def sample(self, n):
        """Next n draws as a float64 array, in draw order."""
        if n < 0:
            raise ValueError(f"sample size must be non-negative, got {n}")
        x = np.empty(n, dtype=np.float64)
        for i in range(n):
            x[i] = self.draw()
        return x


# ======== GENERADOR CONGRUENCIAL MULTIPLICATIVO ========
class LinearCongruentialGenerator(UniformGenerator):
    """state <- state * b mod 2^31, with b = max(c, 2^31 - c)."""

    def __init__(self, seed, constant):
        self._state = int(seed)
        self._multiplier = max(int(constant), MODULUS - int(constant))
        logger.debug("LCG seed=%d multiplier=%d", self._state, self._multiplier)

    @property
    def state(self):
        return self._state

    @property
    def multiplier(self):
        return self._multiplier

    def draw(self):
        # Python ints are unbounded, so the product never wraps before the modulus.
        self._state = (self._state * self._multiplier) % MODULUS
        return self._state / MODULUS

    def __repr__(self):
        return f"LinearCongruentialGenerator(state={self._state}, multiplier={self._multiplier})"


# ======== GENERADOR MACLAREN-MARSAGLIA ========
class TableShuffleCombiner(UniformGenerator):
    """MacLaren-Marsaglia shuffle of ``primary`` indexed by ``secondary``.

    The table is filled with ``table_size`` draws of ``primary``. Each draw
    picks a slot with ``secondary``, returns what is stored there and refills
    the slot from ``primary``.
    """

    def __init__(self, primary, secondary, table_size):
        if isinstance(table_size, bool) or not isinstance(table_size, numbers.Integral) or table_size < 1:
            raise ValueError(f"table_size must be a positive integer, got {table_size!r}")
        self._primary = primary
        self._secondary = secondary
        self._table = [primary.draw() for _ in range(int(table_size))]
        logger.debug("Shuffle table filled with %d values", len(self._table))

    @property
    def table_size(self):
        return len(self._table)

    @property
    def table(self):
        return tuple(self._table)

    def draw(self):
        k = len(self._table)
        u = self._secondary.draw()
        index = min(int(u * k), k - 1)
        result = self._table[index]
        # read before refilling the slot
        self._table[index] = self._primary.draw()
        return result

    def __repr__(self):
        return (
            f"TableShuffleCombiner(primary={self._primary!r}, "
            f"secondary={self._secondary!r}, table_size={len(self._table)})"
        )
