"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from moss.exceptions import InputError, MossError, NoContentError, OutputWriteError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Turn ``MossError``s into a one-line red message and exit code 1.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except InputError as e:
        if debug:
            raise
        console.print(f"[bold red]📁 Invalid folder:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except NoContentError as e:
        if debug:
            raise
        console.print(f"[bold red]📭 Nothing to build:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except OutputWriteError as e:
        if debug:
            raise
        console.print(f"[bold red]💾 Output error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except MossError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
