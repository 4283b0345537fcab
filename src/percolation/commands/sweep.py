"""Sweep command for estimating the percolation threshold."""

from pathlib import Path

import click
from rich.console import Console

from percolation.analysis.grid_presenter import display_sweep_table
from percolation.analysis.grid_visualizer import plot_sweep
from percolation.analysis.sweep import estimate_threshold, probability_range, run_sweep
from percolation.core.config import load_config
from percolation.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.option("--size", "-n", type=click.IntRange(1), help="Side length of the grid (default: from config, 20)")
@click.option("--trials", "-t", type=click.IntRange(1), help="Trials per probability (default: from config, 50)")
@click.option("--start", type=click.FloatRange(0.0, 1.0), help="First probability (default: 0.0)")
@click.option("--stop", type=click.FloatRange(0.0, 1.0), help="Last probability (default: 1.0)")
@click.option("--step", type=click.FloatRange(0.0, 1.0, min_open=True), help="Probability increment (default: 0.05)")
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
    help="Write the results to this CSV file",
)
@click.option(
    "--plot",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Save a plot of the percolation rate to this file",
)
@click.option("--progress/--no-progress", default=False, help="Show a progress bar")
@handle_command_errors
def sweep(
    size: int | None,
    trials: int | None,
    start: float | None,
    stop: float | None,
    step: float | None,
    seed: int | None,
    config_path: Path | None,
    output: Path | None,
    plot: Path | None,
    progress: bool,
) -> None:
    """Estimate how often random grids percolate across probabilities."""
    config = load_config(config_path)
    size = size if size is not None else config.simulation.grid_size
    trials = trials if trials is not None else config.sweep.trials
    start = start if start is not None else config.sweep.start
    stop = stop if stop is not None else config.sweep.stop
    step = step if step is not None else config.sweep.step

    probabilities = probability_range(start, stop, step)
    console.print(
        f"[bold blue]Sweeping {len(probabilities)} probabilities on a {size}x{size} grid "
        f"({trials} trials each)[/bold blue]"
    )

    df = run_sweep(size, probabilities, trials, seed=seed, show_progress=progress)
    display_sweep_table(df, console)

    threshold = estimate_threshold(df)
    if threshold is None:
        console.print("[yellow]No probability reached a percolation rate of 0.5[/yellow]")
    else:
        console.print(f"[bold]Estimated threshold:[/bold] p ≈ {threshold:.3f}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        console.print(f"[bold green]✓[/bold green] Results saved to: {output}")

    if plot:
        plot.parent.mkdir(parents=True, exist_ok=True)
        plot_sweep(
            df,
            plot,
            title=f"{size}x{size} grid, {trials} trials",
            threshold=threshold,
            render=config.render,
        )
        console.print(f"[bold green]✓[/bold green] Plot saved to: {plot}")
