"""Incremental Monte Carlo sampler for estimating pi.

The sampler draws uniform points in ``[0, width) x [0, height)``, classifies
each against the circle inscribed in the domain and keeps running counts.
Work is bounded per call: ``advance()`` draws at most one batch, sized by the
current rate level and capped by the samples still missing from the target.

State combines two flags:

* running  - not paused, not complete; ``advance()`` draws samples
* paused   - ``advance()`` is inert until ``resume()``
* complete - latched once ``generated_count == target_count``; only
  ``reset()`` leaves it

All calls are expected from a single tick loop; there is no locking.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any, Callable, List, Literal, Optional, Tuple

import numpy as np
from pydantic import ValidationError

from montepi.tools.errors import InvalidConfiguration, require_int
from montepi.tools.rates import batch_size, validate_rate
from montepi.utils.rng import sampler_rng
from montepi.utils.schema import SampleRecord, SamplerConfig, StatisticsSnapshot

logger = logging.getLogger(__name__)

SamplerStatus = Literal["running", "paused", "complete"]
CompletionCallback = Callable[[StatisticsSnapshot], Any]


def make_config(**options: Any) -> SamplerConfig:
    """Build a validated ``SamplerConfig``; bad values raise ``InvalidConfiguration``."""
    try:
        return SamplerConfig(**options)
    except ValidationError as exc:
        raise InvalidConfiguration(str(exc)) from exc


class HistoryView(Sequence):
    """Read-only view over the sampler's point history."""

    def __init__(self, records: List[SampleRecord]):
        self._records = records

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"HistoryView(len={len(self._records)})"


class Sampler:
    def __init__(self, config: Optional[SamplerConfig] = None, rng: Any = None):
        """Create a sampler in the running state with zero counts.

        ``rng`` is anything with numpy's ``Generator.random(size)`` interface;
        by default a generator is derived from ``config.seed``.
        """
        self.config = config or SamplerConfig()
        self._rng = rng if rng is not None else sampler_rng(self.config.seed)
        self._target_count = self.config.target_count
        self._rate_level = validate_rate(self.config.rate_level)
        self._listeners: List[CompletionCallback] = []

        self._center_x = self.config.width / 2
        self._center_y = self.config.height / 2
        self._radius_sq = (self.config.radius / 2) ** 2
        # largest floats strictly below the domain bounds
        self._x_max = float(np.nextafter(self.config.width, 0.0))
        self._y_max = float(np.nextafter(self.config.height, 0.0))

        self._history: List[SampleRecord] = []
        self._generated = 0
        self._inside = 0
        self._paused = False
        self._complete = False

    # -- read access -----------------------------------------------------

    @property
    def target_count(self) -> int:
        return self._target_count

    @property
    def rate_level(self) -> int:
        return self._rate_level

    @property
    def generated_count(self) -> int:
        return self._generated

    @property
    def inside_count(self) -> int:
        return self._inside

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def complete(self) -> bool:
        return self._complete

    @property
    def status(self) -> SamplerStatus:
        if self._complete:
            return "complete"
        return "paused" if self._paused else "running"

    @property
    def history(self) -> HistoryView:
        return HistoryView(self._history)

    def history_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(xs, ys, inside)`` arrays in insertion order."""
        n = len(self._history)
        xs = np.fromiter((r.x for r in self._history), dtype=float, count=n)
        ys = np.fromiter((r.y for r in self._history), dtype=float, count=n)
        inside = np.fromiter((r.inside for r in self._history), dtype=bool, count=n)
        return xs, ys, inside

    def is_inside(self, x: float, y: float) -> bool:
        dx = x - self._center_x
        dy = y - self._center_y
        return dx * dx + dy * dy <= self._radius_sq

    # -- control ---------------------------------------------------------

    def subscribe(self, callback: CompletionCallback) -> CompletionCallback:
        """Register ``callback`` to receive the final snapshot on completion."""
        self._listeners.append(callback)
        return callback

    def unsubscribe(self, callback: CompletionCallback) -> None:
        self._listeners.remove(callback)

    def set_target(self, n: int) -> None:
        """Set the total sample count for the current run.

        Takes effect on the next ``advance()``. A completed run stays
        complete; ``reset()`` starts a new run with the new target. Any
        non-negative target is stored after completion, so a target below
        the drawn samples reports ``progress_fraction`` above 1 until reset.
        """
        n = require_int(n, "Target")
        if n < 0:
            raise InvalidConfiguration(f"Target must be non-negative, got {n}")
        if not self._complete and n < self._generated:
            raise InvalidConfiguration(
                f"Target {n} is below the {self._generated} samples already drawn in this run"
            )
        self._target_count = n
        logger.info("target set to %d", n)

    def set_rate(self, level: int) -> None:
        self._rate_level = validate_rate(level)
        logger.info("rate level set to %d (batch=%d)", self._rate_level, batch_size(self._rate_level))

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def reset(self) -> None:
        """Drop all samples and return to running; target and rate are kept."""
        self._history.clear()
        self._generated = 0
        self._inside = 0
        self._paused = False
        self._complete = False
        logger.info("sampler reset (target=%d, rate=%d)", self._target_count, self._rate_level)

    # -- sampling --------------------------------------------------------

    def advance(self) -> StatisticsSnapshot:
        """Draw one batch unless paused or complete; return the new snapshot."""
        if self._paused or self._complete:
            return self.statistics_snapshot()

        n = min(batch_size(self._rate_level), self._target_count - self._generated)
        if n > 0:
            self._draw(n)

        if self._generated == self._target_count:
            self._complete = True
            snapshot = self.statistics_snapshot()
            logger.info(
                "sampling complete: %d samples, pi ~ %.6f (error %.6f)",
                snapshot.generated_count,
                snapshot.pi_estimate,
                snapshot.absolute_error,
            )
            for callback in list(self._listeners):
                callback(snapshot)
            return snapshot
        return self.statistics_snapshot()

    def _draw(self, n: int) -> None:
        # one row per sample: x draw then y draw
        u = np.asarray(self._rng.random((n, 2)), dtype=float)
        xs = np.minimum(u[:, 0] * self.config.width, self._x_max)
        ys = np.minimum(u[:, 1] * self.config.height, self._y_max)
        dx = xs - self._center_x
        dy = ys - self._center_y
        inside = dx * dx + dy * dy <= self._radius_sq

        for x, y, flag in zip(xs.tolist(), ys.tolist(), inside.tolist()):
            self._history.append(SampleRecord(x=x, y=y, inside=flag))
        self._generated += n
        self._inside += int(inside.sum())
        logger.debug("drew %d samples (%d/%d)", n, self._generated, self._target_count)

    def statistics_snapshot(self) -> StatisticsSnapshot:
        generated = self._generated
        inside = self._inside
        pi_estimate = 4 * inside / generated if generated > 0 else 0.0
        return StatisticsSnapshot(
            generated_count=generated,
            inside_count=inside,
            pi_estimate=pi_estimate,
            absolute_error=abs(math.pi - pi_estimate),
            inside_percent=100 * inside / generated if generated > 0 else 0.0,
            progress_fraction=generated / self._target_count if self._target_count > 0 else 1.0,
            complete=self._complete,
        )
