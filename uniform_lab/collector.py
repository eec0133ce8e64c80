import logging

import numpy as np

logger = logging.getLogger(__name__)


class SampleCollector:
    """Owns a generator and the ordered sequence of values drawn from it."""

    def __init__(self, generator, capacity=16):
        self._generator = generator
        self._buffer = np.empty(max(1, int(capacity)), dtype=np.float64)
        self._size = 0

    def __len__(self):
        return self._size

    @property
    def values(self):
        """Read-only view of the draws so far."""
        view = self._buffer[:self._size]
        view.flags.writeable = False
        return view

    def reserve(self, n):
        """Make room for n values in total; drawn values are unaffected."""
        if n < 0:
            raise ValueError(f"reserve size must be non-negative, got {n}")
        if n > len(self._buffer):
            self._grow(n)

    def push(self):
        if self._size == len(self._buffer):
            self._grow(2 * len(self._buffer))
        value = self._generator.draw()
        self._buffer[self._size] = value
        self._size += 1
        return value

    def extend(self, n):
        if n < 0:
            raise ValueError(f"number of draws must be non-negative, got {n}")
        self.reserve(self._size + n)
        for _ in range(n):
            self.push()
        logger.debug("Collected %d draws (total %d)", n, self._size)
        return self.values

    def _grow(self, capacity):
        buffer = np.empty(capacity, dtype=np.float64)
        buffer[:self._size] = self._buffer[:self._size]
        self._buffer = buffer
