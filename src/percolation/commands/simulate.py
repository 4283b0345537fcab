"""Simulate command for a single random percolation run."""

from pathlib import Path

import click
import numpy as np
from rich.console import Console

from percolation.analysis.grid_presenter import display_grid, display_grid_summary
from percolation.analysis.grid_visualizer import plot_grid
from percolation.core.config import load_config
from percolation.core.grid import PercolationGrid
from percolation.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.option(
    "--size",
    "-n",
    type=click.IntRange(1),
    help="Side length of the grid (default: from config, 20)",
)
@click.option(
    "--probability",
    "-p",
    type=click.FloatRange(0.0, 1.0),
    help="Probability of opening each site (0.0-1.0, default: from config, 0.6)",
)
@click.option("--seed", "-s", type=int, help="Seed for the random source")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON configuration file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Save an image of the grid to this file",
)
@click.option("--no-display", is_flag=True, help="Do not print the grid to the terminal")
@handle_command_errors
def simulate(
    size: int | None,
    probability: float | None,
    seed: int | None,
    config_path: Path | None,
    output: Path | None,
    no_display: bool,
) -> None:
    """Open sites at random and report whether the grid percolates."""
    config = load_config(config_path)
    n = size if size is not None else config.simulation.grid_size
    p = probability if probability is not None else config.simulation.probability
    seed = seed if seed is not None else config.simulation.seed

    console.print(f"[bold blue]Simulating {n}x{n} grid with p={p}[/bold blue]")

    rng = np.random.default_rng(seed)
    grid = PercolationGrid(n)
    grid.open_random(p, rng.random)

    if not no_display:
        display_grid(grid, console)
    display_grid_summary(grid, console)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        plot_grid(grid, output, title=f"{n}x{n}, p={p}", render=config.render)
        console.print(f"[bold green]✓[/bold green] Grid image saved to: {output}")
