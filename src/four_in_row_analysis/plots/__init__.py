from .chart import (
    plot_histograms,
    plot_time_by_depth,
)

__all__ = [
    "plot_histograms",
    "plot_time_by_depth",
]
