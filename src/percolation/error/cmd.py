import functools
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

from percolation.error.exceptions import PercolationError

console = Console()


def handle_command_errors(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PercolationError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise click.Abort()

    return wrapper
