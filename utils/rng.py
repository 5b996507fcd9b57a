"""Deterministic RNG helpers."""

from __future__ import annotations

import hashlib
from typing import Any, Optional

import numpy as np


def stable_hash_str(s: str) -> int:
    digest = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def rng_from(*parts: Any) -> np.random.Generator:
    key = "::".join(map(str, parts))
    seed = stable_hash_str(key)
    return np.random.default_rng(seed)


def sampler_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Generator for one sampler session; unseeded when ``seed`` is None."""
    if seed is None:
        return np.random.default_rng()
    return rng_from("montepi_sampler", seed)
