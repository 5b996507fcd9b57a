"""Reporting utilities for finished sampling runs."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from montepi.utils.io import JsonLikePath, read_jsonl
from montepi.utils.schema import SampleRecord, SamplerConfig

INSIDE_COLOR = (0.0, 1.0, 65 / 255)
OUTSIDE_COLOR = (1.0, 0.0, 85 / 255)


def history_frame(records: Iterable[SampleRecord | dict]) -> pd.DataFrame:
    """Tabulate samples with the running estimate after each one."""
    rows = [r.model_dump() if isinstance(r, SampleRecord) else r for r in records]
    df = pd.DataFrame(rows, columns=["x", "y", "inside"])
    df["inside"] = df["inside"].astype(bool)
    n = np.arange(1, len(df) + 1)
    df["running_pi"] = 4 * df["inside"].cumsum().to_numpy() / n
    return df


def summarize(df: pd.DataFrame) -> Dict[str, Any]:
    generated = len(df)
    inside = int(df["inside"].sum()) if generated else 0
    pi_estimate = 4 * inside / generated if generated else 0.0
    return {
        "generated_count": generated,
        "inside_count": inside,
        "pi_estimate": pi_estimate,
        "absolute_error": abs(math.pi - pi_estimate),
    }


def _plot_points(df: pd.DataFrame, config: SamplerConfig, path: Path) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_facecolor("black")
    inside = df[df["inside"]]
    outside = df[~df["inside"]]
    ax.scatter(inside["x"], inside["y"], s=4, color=INSIDE_COLOR, alpha=0.8, label="inside")
    ax.scatter(outside["x"], outside["y"], s=4, color=OUTSIDE_COLOR, alpha=0.8, label="outside")
    ax.add_patch(
        plt.Circle(
            (config.width / 2, config.height / 2),
            config.radius / 2,
            fill=False,
            color=INSIDE_COLOR,
            alpha=0.3,
        )
    )
    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)
    ax.set_aspect("equal")
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def _plot_convergence(df: pd.DataFrame, path: Path) -> None:
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(np.arange(1, len(df) + 1), df["running_pi"], linewidth=1, label="estimate")
    ax.axhline(math.pi, color="grey", linestyle="--", label="π")
    ax.set_xlabel("Samples")
    ax.set_ylabel("π estimate")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def generate_report(
    history_path: JsonLikePath,
    out_dir: JsonLikePath,
    config: Optional[SamplerConfig] = None,
) -> Dict[str, Any]:
    config = config or SamplerConfig()
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    df = history_frame(read_jsonl(history_path))
    summary = summarize(df)

    if len(df):
        _plot_points(df, config, out / "points.png")
        _plot_convergence(df, out / "convergence.png")

    summary_lines = [
        "# Run Summary",
        f"- samples: {summary['generated_count']:,}",
        f"- inside: {summary['inside_count']:,}",
        f"- pi estimate: {summary['pi_estimate']:.6f}",
        f"- absolute error: {summary['absolute_error']:.6f}",
    ]
    (out / "summary.md").write_text("\n".join(summary_lines) + "\n", encoding="utf-8")
    return summary
