"""Controller translating user input into sampler control calls."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from montepi.presenter.display import StatsDisplay, completion_banner, format_stats
from montepi.tools.errors import InvalidConfiguration, require_int
from montepi.tools.rates import MAX_RATE, MIN_RATE, rate_label
from montepi.tools.sampler import Sampler
from montepi.utils.schema import StatisticsSnapshot

logger = logging.getLogger(__name__)

# slider bounds for the target sample count
POINTS_MIN = 100
POINTS_MAX = 100_000

PAUSE_KEY = " "
RESET_KEYS = ("r", "R")


class Controller:
    """Owns one sampler and the display state derived from it.

    ``tick()`` is the redraw hook; the other methods are the handlers for the
    points slider, speed slider, pause button, restart button and keys.
    """

    def __init__(self, sampler: Sampler, on_complete: Optional[Callable[[List[str]], None]] = None):
        self.sampler = sampler
        self.stats: StatsDisplay = format_stats(sampler.statistics_snapshot())
        self.banner: Optional[List[str]] = None
        self._on_complete = on_complete
        sampler.subscribe(self._handle_complete)

    def tick(self) -> StatisticsSnapshot:
        active = self.sampler.status == "running"
        snapshot = self.sampler.advance()
        if active:
            self.stats = format_stats(snapshot)
        return snapshot

    def _handle_complete(self, snapshot: StatisticsSnapshot) -> None:
        self.banner = completion_banner(snapshot)
        if self._on_complete is not None:
            self._on_complete(self.banner)

    def toggle_pause(self) -> bool:
        if self.sampler.paused:
            self.sampler.resume()
        else:
            self.sampler.pause()
        return self.sampler.paused

    def restart(self) -> None:
        self.sampler.reset()
        self.banner = None
        self.stats = format_stats(self.sampler.statistics_snapshot())

    def handle_key(self, key: str) -> bool:
        if key == PAUSE_KEY:
            self.toggle_pause()
            return True
        if key in RESET_KEYS:
            self.restart()
            return True
        return False

    def set_points(self, value: int) -> None:
        try:
            value = require_int(value, "Points")
            if not POINTS_MIN <= value <= POINTS_MAX:
                raise InvalidConfiguration(f"Points must be in {POINTS_MIN}..{POINTS_MAX}, got {value}")
            self.sampler.set_target(value)
        except InvalidConfiguration as exc:
            logger.warning("rejected points slider input: %s", exc)
            raise

    def set_speed(self, level: int) -> None:
        try:
            self.sampler.set_rate(level)
        except InvalidConfiguration as exc:
            logger.warning("rejected speed slider input (%d..%d): %s", MIN_RATE, MAX_RATE, exc)
            raise

    def points_label(self) -> str:
        return f"{self.sampler.target_count:,}"

    def speed_label(self) -> str:
        return rate_label(self.sampler.rate_level)

    def pause_button(self) -> Tuple[str, str]:
        if self.sampler.paused:
            return "▶", "Resume"
        return "⏸", "Pause"
