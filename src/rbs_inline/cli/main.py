"""rbs-inline CLI - Ruby declarations to RBS signatures.

This module provides the command-line interface for inspecting the
declarations found in a Ruby file and the RBS signatures derived from them.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from rbs_inline.adapters.ruby.scanner import RubyDeclarationScanner
from rbs_inline.cli._tables import build_declarations_table
from rbs_inline.core.config import get_config

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="rbs-inline",
    help="Derive RBS signatures from Ruby declarations",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging and full tracebacks"),
    ] = False,
) -> None:
    """rbs-inline CLI - Ruby declarations to RBS signatures."""
    set_verbose(verbose)
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_config().log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def scan(
    path: Annotated[
        Path,
        typer.Argument(help="Ruby source file to scan"),
    ],
    show_private: Annotated[
        Optional[bool],
        typer.Option(
            "--show-private/--hide-private",
            help="Include private declarations (default from RBS_INLINE_SHOW_PRIVATE)",
        ),
    ] = None,
) -> None:
    """Scan a Ruby file and print its declarations with derived signatures.

    Annotation comments are not parsed here, so every derived type is
    untyped.
    """
    if not path.is_file():
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)

    try:
        declarations = RubyDeclarationScanner().scan_file(path)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {path}: {e}")
        print_exception(e)
        raise typer.Exit(1)

    if not declarations:
        console.print("[yellow]No declarations found[/yellow]")
        return

    if show_private is None:
        show_private = get_config().show_private
    console.print(build_declarations_table(declarations, show_private))


if __name__ == "__main__":
    app()
