"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import re
from typing import Any, Optional

import typer
from rich.console import Console as RichConsole
from rich.markup import escape

from docgraph.cli.config import CLIConfig


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if CLIConfig.is_machine_mode():
            for arg in args:
                if isinstance(arg, str):
                    # Remove rich markup
                    plain = re.sub(r'\[.*?\]', '', arg).strip()
                    if plain:
                        typer.echo(plain)
                # Rich renderables are suppressed in machine mode - use --json instead
        else:
            self._rich_console.print(*args, **kwargs)

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


_console = MachineAwareConsole()


def get_console() -> MachineAwareConsole:
    return _console


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        typer.echo(json.dumps(data, separators=(',', ':')))
    else:
        typer.echo(json.dumps(data, indent=CLIConfig.JSON_INDENT))


def print_error(message: str) -> None:
    """
    Print an error message respecting machine mode.
    In machine mode, outputs a structured JSON error on stdout.
    """
    if CLIConfig.is_machine_mode():
        typer.echo(json.dumps({"status": "error", "message": message}))
    else:
        _console.print(f"[red]Error:[/red] {escape(message)}")
