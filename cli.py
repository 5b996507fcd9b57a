"""montepi CLI."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from montepi.eval.report import generate_report
from montepi.eval.runner import DEFAULT_FPS, run_session
from montepi.presenter.controller import Controller
from montepi.tools.errors import InvalidConfiguration
from montepi.tools.rates import rate_table
from montepi.tools.sampler import Sampler, make_config
from montepi.utils.io import write_models
from montepi.utils.schema import DEFAULT_RATE_LEVEL, DEFAULT_TARGET, TickRecord

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    points: int = typer.Option(DEFAULT_TARGET, help="Total samples to draw"),
    speed: int = typer.Option(DEFAULT_RATE_LEVEL, help="Rate level 1 (Very Slow) .. 5 (Very Fast)"),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible run"),
    fps: float = typer.Option(DEFAULT_FPS, help="Tick rate when --realtime is set"),
    realtime: bool = typer.Option(False, help="Sleep between ticks to hold --fps"),
    max_ticks: Optional[int] = typer.Option(None, help="Stop after this many ticks"),
    history: Optional[str] = typer.Option(None, help="Write sampled points to this jsonl path"),
    trace: Optional[str] = typer.Option(None, help="Write per-tick statistics to this jsonl path"),
    report_dir: Optional[str] = typer.Option(None, "--report", help="Render a report into this directory"),
    verbose: bool = typer.Option(False, help="Print progress logging"),
):
    _configure_logging(verbose)
    if report_dir and not history:
        raise typer.BadParameter("--report needs --history")
    try:
        config = make_config(target_count=points, rate_level=speed, seed=seed)
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc))

    sampler = Sampler(config)
    controller = Controller(sampler, on_complete=lambda lines: typer.echo("\n".join(lines)))
    try:
        records: List[TickRecord] = run_session(
            controller, max_ticks=max_ticks, fps=fps, realtime=realtime, verbose=verbose
        )
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc))

    stats = controller.stats
    typer.echo(
        f"ticks={len(records)} points={stats.points_generated} inside={stats.points_inside} "
        f"pi={stats.pi_value} error={stats.error_value}"
    )
    if history:
        write_models(history, sampler.history)
        typer.echo(f"Wrote {len(sampler.history)} samples to {history}")
    if trace:
        write_models(trace, records)
        typer.echo(f"Wrote {len(records)} ticks to {trace}")
    if report_dir:
        generate_report(history, report_dir, config=config)
        typer.echo(f"Report written to {report_dir}")


@app.command()
def report(
    history: str,
    out: str = typer.Option(..., help="Output directory for report"),
    width: float = typer.Option(500.0, help="Sampling domain width"),
    height: float = typer.Option(500.0, help="Sampling domain height"),
    radius: Optional[float] = typer.Option(None, help="Circle diameter (defaults to width)"),
):
    try:
        config = make_config(width=width, height=height, radius=radius)
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc))
    summary = generate_report(history, out, config=config)
    typer.echo(f"pi={summary['pi_estimate']:.6f} error={summary['absolute_error']:.6f}")
    typer.echo(f"Report written to {out}")


@app.command()
def rates():
    for level, label, size in rate_table():
        typer.echo(f"{level}  {label:<10} {size:>4} samples/tick")


def main():
    app()


if __name__ == "__main__":
    main()
