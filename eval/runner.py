"""Tick-driven session driver."""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from montepi.presenter.controller import Controller
from montepi.tools.errors import InvalidConfiguration
from montepi.utils.schema import TickRecord

DEFAULT_FPS = 60.0


def run_session(
    controller: Controller,
    max_ticks: int | None = None,
    fps: float = DEFAULT_FPS,
    realtime: bool = False,
    on_tick: Optional[Callable[[TickRecord], None]] = None,
    verbose: bool = False,
    progress_every: int = 60,
) -> List[TickRecord]:
    """Call ``controller.tick()`` until the sampler completes.

    Stops early after ``max_ticks`` ticks, or when the sampler is paused
    (nothing would change until someone resumes it). With ``realtime`` the
    loop sleeps to hold ``fps``.
    """
    if fps <= 0:
        raise InvalidConfiguration(f"fps must be positive, got {fps}")
    if progress_every < 1:
        raise InvalidConfiguration(f"progress_every must be at least 1, got {progress_every}")
    sampler = controller.sampler
    interval = 1.0 / fps
    records: List[TickRecord] = []
    tick = 0

    while not sampler.complete:
        if max_ticks is not None and tick >= max_ticks:
            if verbose:
                print(f"[run_session] stopping after {tick} ticks", flush=True)
            break
        if sampler.paused:
            if verbose:
                print(f"[run_session] sampler paused at tick {tick}; stopping", flush=True)
            break

        started = time.perf_counter()
        before = sampler.generated_count
        snapshot = controller.tick()
        record = TickRecord(tick=tick, batch=snapshot.generated_count - before, snapshot=snapshot)
        records.append(record)
        if on_tick is not None:
            on_tick(record)

        if verbose and (snapshot.complete or tick % progress_every == 0):
            print(
                f"[run_session] tick {tick} samples={snapshot.generated_count} "
                f"pi={snapshot.pi_estimate:.6f} progress={100 * snapshot.progress_fraction:.1f}%",
                flush=True,
            )
        tick += 1

        if realtime:
            remaining = interval - (time.perf_counter() - started)
            if remaining > 0:
                time.sleep(remaining)

    return records
