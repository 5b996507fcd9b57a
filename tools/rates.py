"""Discrete sampling rates: samples drawn per tick."""

from __future__ import annotations

from typing import Dict, List, Tuple

from montepi.tools.errors import InvalidConfiguration, require_int

BATCH_SIZES: Dict[int, int] = {
    1: 1,
    2: 5,
    3: 10,
    4: 50,
    5: 200,
}

RATE_LABELS: Dict[int, str] = {
    1: "Very Slow",
    2: "Slow",
    3: "Medium",
    4: "Fast",
    5: "Very Fast",
}

MIN_RATE = min(BATCH_SIZES)
MAX_RATE = max(BATCH_SIZES)


def validate_rate(level) -> int:
    level = require_int(level, "Rate level")
    if level not in BATCH_SIZES:
        raise InvalidConfiguration(f"Rate level must be in {MIN_RATE}..{MAX_RATE}, got {level}")
    return level


def batch_size(level: int) -> int:
    return BATCH_SIZES[validate_rate(level)]


def rate_label(level: int) -> str:
    return RATE_LABELS[validate_rate(level)]


def rate_table() -> List[Tuple[int, str, int]]:
    return [(level, RATE_LABELS[level], BATCH_SIZES[level]) for level in sorted(BATCH_SIZES)]
