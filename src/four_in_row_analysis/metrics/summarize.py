from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    # Only count moves decided by a full search (skip immediate wins/blocks)
    searched_only: bool = False
    min_moves: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.searched_only:
        _require_cols(out, ["reason"])
        out = out[out["reason"] == "search"].copy()
    return out


def per_depth_table(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    """
    One row per search depth: move count, decision time statistics and mean nodes.
    """
    _require_cols(df, ["depth", "time_ms", "nodes"])

    out = filter_rows(df, cfg)
    grouped = out.groupby("depth")
    table = pd.DataFrame({
        "moves": grouped.size(),
        "mean_ms": grouped["time_ms"].mean(),
        "median_ms": grouped["time_ms"].median(),
        "p95_ms": grouped["time_ms"].quantile(0.95),
        "mean_nodes": grouped["nodes"].mean(),
    })
    table = table[table["moves"] >= cfg.min_moves]
    return table.sort_index().reset_index()


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
