from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    saved: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")

        path = _finish(fig, outdir, f"hist_{c}.png", show)
        if path is not None:
            saved.append(path)
    return saved


def plot_time_by_depth(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """
    Mean and p95 decision time per search depth, from ``per_depth_table``.
    """
    if table.empty or "depth" not in table.columns:
        return None

    fig = plt.figure()
    plt.plot(table["depth"], table["mean_ms"], marker="o", label="mean")
    if "p95_ms" in table.columns:
        plt.plot(table["depth"], table["p95_ms"], marker="x", linestyle="--", label="p95")
    plt.yscale("log")
    plt.title("Decision time by search depth")
    plt.xlabel("depth")
    plt.ylabel("ms per move")
    plt.legend()

    return _finish(fig, outdir, "time_by_depth.png", show)
