# random_source.py

import numpy as np


class RandomSource:
    """
    Uniform integer and float draws for the painters.

    Data Contract:
    - Inputs: generator (np.random.Generator or None). None creates an
      unseeded generator, so every run differs; pass a seeded generator to
      make a paint reproducible.
    - Outputs: Python ints and floats.
    - Invariants: Degenerate ranges are fixed points rather than errors.
      uniform_int(max) with max <= 0 returns 0, and uniform_range(min, max)
      with max <= min returns min.
    """
    def __init__(self, generator: np.random.Generator = None):
        self.generator = generator if generator is not None else np.random.default_rng()

    @classmethod
    def from_seed(cls, seed=None):
        """Builds a source from an integer seed, or an unseeded one for None."""
        return cls(np.random.default_rng(seed))

    def uniform_int(self, max_value: int) -> int:
        """Integer in [0, max_value)."""
        if max_value <= 0:
            return 0
        return int(self.generator.integers(0, max_value))

    def uniform_range(self, min_value: int, max_value: int) -> int:
        """Integer in [min_value, max_value)."""
        if max_value <= min_value:
            return int(min_value)
        return int(self.generator.integers(min_value, max_value))

    def uniform(self) -> float:
        """Float in [0, 1)."""
        return float(self.generator.random())

    def choice_index(self, length: int) -> int:
        return self.uniform_int(length)
