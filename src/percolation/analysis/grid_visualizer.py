"""Image output for grids and sweep results."""

from pathlib import Path

from matplotlib.colors import ListedColormap
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from percolation.core.config import RenderConfig
from percolation.core.grid import PercolationGrid


def grid_states(grid: PercolationGrid) -> np.ndarray:
    """Site states as an integer array: 0 closed, 1 open, 2 connected to top."""
    states = grid.to_array().astype(int)
    states[grid.full_sites()] = 2
    return states


def plot_grid(
    grid: PercolationGrid,
    output_path: Path | str,
    title: str | None = None,
    render: RenderConfig | None = None,
) -> None:
    """Save an image of the grid.

    Args:
        grid: Grid to draw
        output_path: Path to save the image
        title: Plot title (the percolation status is always appended)
        render: Colors, DPI and figure size
    """
    render = render or RenderConfig()
    cmap = ListedColormap([render.closed_color, render.open_color, render.full_color])

    fig, ax = plt.subplots(figsize=render.figure_size)
    ax.imshow(grid_states(grid), cmap=cmap, vmin=0, vmax=2, interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])

    status = f"Percolates: {grid.percolates()}"
    ax.set_title(f"{title} - {status}" if title else status)

    fig.tight_layout()
    fig.savefig(output_path, dpi=render.dpi, bbox_inches="tight")
    plt.close(fig)


def plot_sweep(
    df: pd.DataFrame,
    output_path: Path | str,
    title: str | None = None,
    threshold: float | None = None,
    render: RenderConfig | None = None,
) -> None:
    """Plot percolation rate against opening probability.

    Args:
        df: DataFrame returned by run_sweep
        output_path: Path to save plot
        title: Plot title
        threshold: Estimated threshold to mark with a vertical line
        render: DPI of the saved plot
    """
    if df.empty:
        raise ValueError("DataFrame is empty")
    render = render or RenderConfig()

    sns.set_theme(style="whitegrid")
    plt.figure(figsize=(10, 6))

    ax = sns.lineplot(data=df, x="probability", y="percolation_rate", marker="o")
    ax.set_xlabel("Site opening probability")
    ax.set_ylabel("Percolation rate")
    ax.set_ylim(-0.05, 1.05)

    if threshold is not None:
        ax.axvline(threshold, color="red", linestyle="--", label=f"p ≈ {threshold:.3f}")
        ax.legend()

    plt.title(title or "Percolation Probability")
    plt.tight_layout()
    plt.savefig(output_path, dpi=render.dpi, bbox_inches="tight")
    plt.close()
