"""
Root Typer application for the naming-study CLI.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from typer import Typer

from naming_study.cli.utils import fail, output_examples
from naming_study.core.errors import ConfigError, StudyError
from naming_study.core.logging import configure_logging, get_logger
from naming_study.core.settings import get_settings
from naming_study.registry import EXAMPLES, run_examples

app = Typer(
    name="naming-study",
    help="naming-study — before/after demonstrations of meaningful names.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

logger = get_logger(__name__)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        from naming_study import __version__

        try:
            v = pkg_version("naming-study")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"naming-study {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override NAMING_STUDY_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """naming-study CLI — run and list the naming demonstrations."""
    try:
        settings = get_settings()
    except ValidationError as e:
        fields = ", ".join(".".join(map(str, err["loc"])) for err in e.errors())
        fail(ConfigError(f"Invalid configuration: {fields}", context={"fields": fields}, cause=e))

    try:
        configure_logging(
            level=log_level or settings.log_level,
            json_format=settings.log_json,
            service=settings.service,
        )
    except StudyError as e:
        fail(e)


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("run")
def run_command(
    only: list[int] | None = typer.Option(
        None,
        "--only",
        "-n",
        help="Run only this example number (repeatable).",
    ),
) -> None:
    """Run the demonstrations (all nine by default)."""
    try:
        ran = run_examples(only or None)
    except StudyError as e:
        logger.warning("run_failed", **e.to_dict())
        fail(e)
    logger.info("run_complete", numbers=[ex.number for ex in ran])


@app.command("list")
def list_command(
    json_out: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
) -> None:
    """List the available demonstrations."""
    output_examples(EXAMPLES, as_json=json_out)
