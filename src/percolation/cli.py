"""CLI entry point for the percolation tool."""

import logging

import click
from rich.logging import RichHandler

from percolation.commands import scenario, simulate, sweep


@click.group()
@click.version_option(version="0.1.0", prog_name="percolation")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose):
    """Percolation Simulation Tool.

    Open sites on a square grid and check whether an open path joins the
    top row to the bottom row.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# Register commands
main.add_command(scenario.scenario)
main.add_command(simulate.simulate)
main.add_command(sweep.sweep)


if __name__ == "__main__":
    main()
