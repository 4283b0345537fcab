"""Presentation layer for grids and sweeps in the terminal.

This module renders grids and sweep results with Rich, keeping display
logic out of the command modules. It only uses the grid's public queries.
"""

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from percolation.core.grid import PercolationGrid

CLOSED_CELL = "█"
OPEN_CELL = "░"
FULL_CELL = "▓"


def render_grid(grid: PercolationGrid) -> Text:
    """Render a grid as one character per site.

    Closed sites are drawn dim, open sites white and sites connected to the
    top row blue.

    Args:
        grid: Grid to render

    Returns:
        Rich Text with one line per row
    """
    text = Text()
    for row in range(grid.size):
        for col in range(grid.size):
            if not grid.is_open(row, col):
                text.append(CLOSED_CELL, style="grey23")
            elif grid.is_connected_to_top(row, col):
                text.append(FULL_CELL, style="bold blue")
            else:
                text.append(OPEN_CELL, style="white")
        if row < grid.size - 1:
            text.append("\n")
    return text


def display_grid(grid: PercolationGrid, console: Console, title: str | None = None) -> None:
    """Print a grid inside a panel followed by its percolation status.

    Grids wider than the console are not drawn, since wrapped rows would no
    longer show one character per site. A notice is printed instead.

    Args:
        grid: Grid to display
        console: Rich console for output
        title: Panel title (defaults to the grid dimensions)
    """
    title = title or f"{grid.size}x{grid.size} grid"
    status = "[bold green]True[/bold green]" if grid.percolates() else "[bold red]False[/bold red]"
    width = max(grid.size + 4, len(title) + 6)

    if width > console.width:
        console.print(
            f"[yellow]{title}: {grid.size} columns do not fit the terminal "
            f"({console.width}), grid not drawn[/yellow]"
        )
    else:
        console.print(Panel(render_grid(grid), title=title, width=width))
    console.print(f"Percolates: {status}")


def display_grid_summary(grid: PercolationGrid, console: Console) -> None:
    """Print a table of grid statistics."""
    full = int(grid.full_sites().sum())

    table = Table(title="Grid Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Grid size", f"{grid.size}x{grid.size}")
    table.add_row("Open sites", str(grid.open_count))
    table.add_row("Open fraction", f"{grid.open_fraction():.3f}")
    table.add_row("Sites connected to top", str(full))
    table.add_row("Percolates", str(grid.percolates()))

    console.print(table)


def display_sweep_table(df: pd.DataFrame, console: Console) -> None:
    """Display sweep results as a Rich table.

    Args:
        df: DataFrame returned by run_sweep
        console: Rich console for output
    """
    table = Table(title="Percolation Sweep")
    table.add_column("p", style="cyan", justify="right")
    table.add_column("Trials", justify="right")
    table.add_column("Percolated", justify="right")
    table.add_column("Rate", style="green", justify="right")
    table.add_column("Open fraction", justify="right")

    for _, row in df.iterrows():
        table.add_row(
            f"{row['probability']:.3f}",
            str(int(row["trials"])),
            str(int(row["percolated"])),
            f"{row['percolation_rate']:.3f}",
            f"{row['mean_open_fraction']:.3f}",
        )

    console.print(table)
