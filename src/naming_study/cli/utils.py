"""
CLI utility helpers — output formatting and error reporting.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn, Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from naming_study.core.errors import StudyError
from naming_study.registry import ExampleInfo

console = Console()
err_console = Console(stderr=True)


def fail(error: StudyError, *, code: int = 1) -> NoReturn:
    """Print a study error on stderr and exit with ``code``."""
    err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {escape(error.message)}")
    raise typer.Exit(code=code) from error


def output_examples(examples: Sequence[ExampleInfo], *, as_json: bool = False) -> None:
    """Render the example catalog to the terminal."""
    if as_json:
        payload: list[dict[str, Any]] = [ex.to_dict() for ex in examples]
        console.print_json(json.dumps(payload, ensure_ascii=False))
        return

    table = Table(title="Meaningful Names")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Slug")
    table.add_column("Title")
    for ex in examples:
        table.add_row(str(ex.number), ex.slug, ex.title)
    console.print(table)
