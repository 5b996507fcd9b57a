"""Formatting of sampler statistics into display strings."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from montepi.utils.schema import StatisticsSnapshot

COMPLETE_TITLE = ">>> SIMULATION COMPLETE <<<"


class StatsDisplay(BaseModel):
    pi_value: str
    points_generated: str
    points_inside: str
    error_value: str
    progress_percent: float


def _format_percent(snapshot: StatisticsSnapshot) -> str:
    if snapshot.generated_count == 0:
        return "0"
    return f"{snapshot.inside_percent:.2f}"


def format_stats(snapshot: StatisticsSnapshot) -> StatsDisplay:
    return StatsDisplay(
        pi_value=f"{snapshot.pi_estimate:.6f}",
        points_generated=f"{snapshot.generated_count:,}",
        points_inside=f"{snapshot.inside_count:,} ({_format_percent(snapshot)}%)",
        error_value=f"{snapshot.absolute_error:.6f}",
        progress_percent=100 * snapshot.progress_fraction,
    )


def completion_banner(snapshot: StatisticsSnapshot) -> List[str]:
    return [
        COMPLETE_TITLE,
        f"π ≈ {snapshot.pi_estimate:.6f}",
        f"Error: {snapshot.absolute_error:.6f}",
    ]
