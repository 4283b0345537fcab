"""Scenario commands for the built-in opening patterns."""

from pathlib import Path

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from percolation.analysis.grid_presenter import display_grid, display_grid_summary
from percolation.analysis.grid_visualizer import plot_grid
from percolation.analysis.scenarios import get_scenarios
from percolation.core.config import load_config
from percolation.error.cmd import handle_command_errors

console = Console()


@click.group()
def scenario():
    """Run built-in opening patterns.

    This command group provides subcommands for:
    - list: Show the available scenarios
    - run: Build scenarios and report whether they percolate
    """
    pass


@scenario.command("list")
def list_scenarios() -> None:
    """List the available scenarios."""
    table = Table(title="Scenarios")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Description")

    for item in get_scenarios():
        table.add_row(item.name, f"{item.size}x{item.size}", item.description)

    console.print(table)


@scenario.command()
@click.argument("names", nargs=-1)
@click.option("--seed", "-s", type=int, help="Seed for the random scenarios")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    help="Save an image of each grid into this directory",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON configuration file for image colors and DPI",
)
@click.option("--no-display", is_flag=True, help="Do not print the grids to the terminal")
@handle_command_errors
def run(
    names: tuple[str, ...],
    seed: int | None,
    output_dir: Path | None,
    config_path: Path | None,
    no_display: bool,
) -> None:
    """Build scenarios and report whether they percolate.

    NAMES: Scenario names (default: all scenarios)
    """
    scenarios = get_scenarios(list(names) if names else None)
    render = load_config(config_path).render
    rng = np.random.default_rng(seed)

    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)

    for item in scenarios:
        console.print(f"[bold blue]Scenario:[/bold blue] {item.name} - {item.description}")
        grid = item.build(rng.random)

        if not no_display:
            display_grid(grid, console, title=item.name)
        display_grid_summary(grid, console)

        if output_dir:
            output_path = output_dir / f"{item.name}.png"
            plot_grid(grid, output_path, title=item.name, render=render)
            console.print(f"[bold green]✓[/bold green] Grid image saved to: {output_path}")
