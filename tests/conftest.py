"""Shared fixtures for montepi tests."""
from typing import Iterable, Sequence

import numpy as np
import pytest

from montepi.tools.sampler import Sampler
from montepi.utils.schema import SamplerConfig

CENTER = (0.5, 0.5)
CORNER = (0.0, 0.0)


class ScriptedRng:
    """Stands in for numpy's Generator, replaying fixed unit draws row by row."""

    def __init__(self, rows: Iterable[Sequence[float]]):
        self._rows = [tuple(r) for r in rows]
        self.calls = 0

    def random(self, size):
        n, k = size
        if len(self._rows) < n:
            raise AssertionError(f"script exhausted: wanted {n}, have {len(self._rows)}")
        taken, self._rows = self._rows[:n], self._rows[n:]
        self.calls += 1
        return np.array(taken, dtype=float).reshape(n, k)


@pytest.fixture
def scripted():
    return ScriptedRng


@pytest.fixture
def make_sampler():
    def _make(target_count=50, rate_level=3, seed=1234, rng=None, **kwargs):
        config = SamplerConfig(target_count=target_count, rate_level=rate_level, seed=seed, **kwargs)
        return Sampler(config, rng=rng)

    return _make
