"""Point set visualization tools."""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

from poissongen.sampling.geometry import Shape


class PointSetVisualizer:
    """Visualizer for 2-D point sets in the unit domain."""

    def __init__(self, figsize: Tuple[int, int] = (8, 8), style: str = "seaborn-v0_8"):
        """Initialize visualizer.

        Args:
            figsize: Figure size for matplotlib
            style: Matplotlib style
        """
        self.figsize = figsize
        if style in plt.style.available:
            plt.style.use(style)

    def plot_points(
        self,
        points: np.ndarray,
        title: str = "Point Set",
        shape: Optional[Union[Shape, str]] = None,
        color_by_order: bool = False,
        size: float = 2.0,
    ) -> Figure:
        """Scatter plot of a point set.

        Args:
            points: Point array (N, 2)
            title: Plot title
            shape: Domain outline to draw, if any
            color_by_order: Color points by their index in the sequence
            size: Marker size

        Returns:
            Matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        self._draw(ax, points, shape, color_by_order, size)
        ax.set_title(f"{title}\n({len(points)} points)")

        if color_by_order and len(points) > 0:
            fig.colorbar(ax.collections[0], ax=ax, label="Discovery order")

        plt.tight_layout()
        return fig

    def compare_point_sets(
        self,
        point_sets: Dict[str, np.ndarray],
        title: str = "Point Set Comparison",
        shape: Optional[Union[Shape, str]] = None,
    ) -> Figure:
        """Compare several point sets side by side.

        Args:
            point_sets: Dictionary mapping names to point arrays
            title: Overall figure title
            shape: Domain outline to draw, if any

        Returns:
            Matplotlib figure
        """
        n_sets = len(point_sets)
        cols = min(3, n_sets)
        rows = (n_sets + cols - 1) // cols

        fig, axes = plt.subplots(
            rows,
            cols,
            figsize=(self.figsize[0] * cols / 2, self.figsize[1] * rows / 2),
            squeeze=False,
        )
        fig.suptitle(title, fontsize=16)

        for ax, (name, points) in zip(axes.flat, point_sets.items()):
            self._draw(ax, points, shape, False, 1.0)
            ax.set_title(f"{name}\n({len(points)} points)")

        for ax in list(axes.flat)[n_sets:]:
            ax.set_visible(False)

        plt.tight_layout()
        return fig

    def save_figure(self, fig: Figure, path: Union[str, Path], dpi: int = 150) -> None:
        """Save figure to file.

        Args:
            fig: Matplotlib figure
            path: Output file path
            dpi: Resolution in dots per inch
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=dpi, bbox_inches='tight')
        plt.close(fig)

    def _draw(
        self,
        ax: Axes,
        points: np.ndarray,
        shape: Optional[Union[Shape, str]],
        color_by_order: bool,
        size: float,
    ) -> None:
        color = np.arange(len(points)) if color_by_order else 'black'
        ax.scatter(points[:, 0], points[:, 1], c=color, s=size, cmap='viridis' if color_by_order else None)

        if shape is not None:
            if Shape(shape) is Shape.CIRCLE:
                outline = Circle((0.5, 0.5), 0.5, fill=False, color='gray', linestyle='--')
            else:
                outline = Rectangle((0, 0), 1, 1, fill=False, color='gray', linestyle='--')
            ax.add_patch(outline)

        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        ax.set_aspect('equal')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')


def plot_point_set(
    points: np.ndarray,
    title: str = "Point Set",
    save_path: Optional[Union[str, Path]] = None,
    **kwargs,
) -> Figure:
    """Quick function to plot a point set.

    Args:
        points: Point array (N, 2)
        title: Plot title
        save_path: Optional path to save figure
        **kwargs: Additional arguments for plot_points

    Returns:
        Figure object
    """
    viz = PointSetVisualizer()
    fig = viz.plot_points(points, title, **kwargs)
    if save_path:
        viz.save_figure(fig, save_path)
    return fig


def compare_sampling_methods(
    results: Dict[str, np.ndarray],
    output_path: Optional[Union[str, Path]] = None,
    title: str = "Sampling Method Comparison",
) -> Figure:
    """Compare different sampling methods visually.

    Args:
        results: Dictionary mapping method names to point sets
        output_path: Optional path to save comparison
        title: Figure title

    Returns:
        Comparison figure
    """
    viz = PointSetVisualizer(figsize=(15, 10))
    fig = viz.compare_point_sets(results, title)

    if output_path:
        viz.save_figure(fig, output_path)

    return fig
