"""Visualization tools for PoissonGen."""

from poissongen.visualization.point_set import (
    PointSetVisualizer,
    plot_point_set,
    compare_sampling_methods,
)

__all__ = [
    "PointSetVisualizer",
    "plot_point_set",
    "compare_sampling_methods",
]
