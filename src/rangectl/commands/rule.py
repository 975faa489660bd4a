"""Command group: rule grammar, offsets, and alignment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeGroup
from rangectl.services.rules import RuleService
from rangectl.services.selector import SelectorService

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext

# Negative tokens such as -1m must reach arguments instead of the parser.
TOKEN_ARGS = {"ignore_unknown_options": True}

_RULE_EXAMPLES = """\
  rangectl rule parse +0.5m
  rangectl rule invert +1m
  rangectl rule apply 2014-01-31 +1m
  rangectl rule align 2014-06-15 +7d
  rangectl rule list --rule +3m"""


@click.group(cls=RangeGroup, examples=_RULE_EXAMPLES)
def rule() -> None:
    """Parse, invert, apply, and align rule tokens."""


@rule.command(
    context_settings=TOKEN_ARGS,
    examples="""\
  rangectl rule parse +1m
  rangectl --json rule parse -- -2.25y""",
)
@click.argument("token")
@click.pass_obj
def parse(app: AppContext, token: str) -> None:
    """Show the sign, unit, and magnitude of TOKEN."""
    app.emit(RuleService(app.settings).parse_rule(token))


@rule.command(context_settings=TOKEN_ARGS)
@click.argument("token")
@click.pass_obj
def invert(app: AppContext, token: str) -> None:
    """Print the rule that navigates opposite to TOKEN."""
    app.emit(RuleService(app.settings).invert_rule(token))


@rule.command(
    context_settings=TOKEN_ARGS,
    examples="""\
  rangectl rule apply 2014-06-01 +1m
  rangectl rule apply 2014-06-01 -- -0.5m""",
)
@click.argument("date")
@click.argument("token")
@click.pass_obj
def apply(app: AppContext, date: str, token: str) -> None:
    """Move DATE (YYYY-MM-DD) by TOKEN."""
    app.emit(RuleService(app.settings).apply_rule(date, token))


@rule.command(context_settings=TOKEN_ARGS)
@click.argument("date")
@click.argument("token")
@click.pass_obj
def align(app: AppContext, date: str, token: str) -> None:
    """Start of the TOKEN period that contains DATE."""
    app.emit(RuleService(app.settings).start_of_range(date, token))


@rule.command(name="list")
@click.option("--rule", "current", default=None, help="Rule to mark as selected.")
@click.pass_obj
def list_rules(app: AppContext, current: str | None) -> None:
    """List configured rules with their localized labels."""
    app.emit(SelectorService(app.settings).list_rules(rule=current))
