"""Error types raised by the sampler."""

from __future__ import annotations

import numpy as np


class InvalidConfiguration(ValueError):
    """A rate level or target count outside the accepted range."""


def require_int(value, what: str) -> int:
    """Return ``value`` as a plain int; Python and numpy integers pass, bools do not."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(f"{what} must be an integer, got {value!r}")
    return int(value)
