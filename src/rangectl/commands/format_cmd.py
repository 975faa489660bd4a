"""Command: render a date with the configured locale."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeCommand
from rangectl.services.rules import RuleService

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext


@click.command(
    "format",
    cls=RangeCommand,
    examples="""\
  rangectl format 2014-06-01
  rangectl --lang fr format 2014-08-15
  rangectl format 2014-06-01 --spec FullYear --spec / --spec Month""",
)
@click.argument("date")
@click.option(
    "--spec",
    "spec",
    multiple=True,
    help="Format token (repeatable); defaults to the locale's format.",
)
@click.pass_obj
def format_cmd(app: AppContext, date: str, spec: tuple[str, ...]) -> None:
    """Render DATE (YYYY-MM-DD) as text."""
    app.emit(RuleService(app.settings).format_date(date, list(spec) or None))
