"""Core data schemas for montepi."""

from __future__ import annotations

import json
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_WIDTH = 500.0
DEFAULT_HEIGHT = 500.0
DEFAULT_TARGET = 10000
DEFAULT_RATE_LEVEL = 3


class _JsonMixin(BaseModel):
    """Adds stable JSON serialization."""

    def to_json(self) -> str:
        return json.dumps(self.model_dump(), sort_keys=True)


class SampleRecord(_JsonMixin):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    inside: bool


class StatisticsSnapshot(_JsonMixin):
    model_config = ConfigDict(frozen=True)

    generated_count: int
    inside_count: int
    pi_estimate: float
    absolute_error: float
    inside_percent: float
    progress_fraction: float
    complete: bool


class SamplerConfig(_JsonMixin):
    """Sampling domain and run configuration.

    ``radius`` is the diameter of the inscribed circle; a point is inside
    when its distance to the domain center is at most ``radius / 2``.
    Constructing it directly raises pydantic's ``ValidationError``;
    ``montepi.tools.sampler.make_config`` wraps that as ``InvalidConfiguration``.
    """

    width: float = Field(DEFAULT_WIDTH, gt=0)
    height: float = Field(DEFAULT_HEIGHT, gt=0)
    radius: Optional[float] = Field(None, gt=0)
    target_count: int = Field(DEFAULT_TARGET, ge=0)
    rate_level: int = Field(DEFAULT_RATE_LEVEL, ge=1, le=5)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _default_radius(self) -> "SamplerConfig":
        if self.radius is None:
            self.radius = self.width
        return self


class TickRecord(_JsonMixin):
    tick: int
    batch: int
    snapshot: StatisticsSnapshot
