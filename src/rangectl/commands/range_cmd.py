"""Command group: compute and navigate date ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeGroup
from rangectl.domain.navigation import Direction
from rangectl.services.selector import SelectorService

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext

_RANGE_EXAMPLES = """\
  rangectl range init --today 2014-06-15 --rule +1m
  rangectl range init --previous
  rangectl --lang fr range init --rule +3m
  rangectl range next --rule +1m --from 2014-06-01
  rangectl range prev --rule +3m --from 2014-04-01
  rangectl range select +3m --rule +1m --from 2014-06-01"""


@click.group(name="range", cls=RangeGroup, examples=_RANGE_EXAMPLES)
def range_group() -> None:
    """Compute, step, and switch date ranges."""


@range_group.command()
@click.option("--today", default=None, help="Reference date (default: today).")
@click.option("--rule", default=None, help="Rule to use instead of the configured one.")
@click.option(
    "--data-select",
    default=None,
    help="Rule echoed back by a host form; wins over --rule when configured.",
)
@click.option(
    "--previous/--current",
    default=None,
    help="Start on the period before TODAY's (default from config).",
)
@click.pass_obj
def init(
    app: AppContext,
    today: str | None,
    rule: str | None,
    data_select: str | None,
    previous: bool | None,
) -> None:
    """Range a fresh selector shows for TODAY."""
    svc = SelectorService(app.settings)
    app.emit(svc.init_range(today=today, rule=rule, data_select=data_select, previous=previous))


def _step_command(direction: Direction, help_text: str) -> click.Command:
    @click.option("--rule", required=True, help="Current rule.")
    @click.option("--from", "start", required=True, help="Current range start.")
    @click.pass_obj
    def _step(app: AppContext, rule: str, start: str) -> None:
        app.emit(SelectorService(app.settings).step(direction, rule=rule, start=start))

    _step.__doc__ = help_text
    return range_group.command(name=direction.value)(_step)


next_cmd = _step_command(Direction.FORWARD, "Move the range one period forward.")
prev_cmd = _step_command(Direction.BACKWARD, "Move the range one period back.")


@range_group.command(context_settings={"ignore_unknown_options": True})
@click.argument("new_rule")
@click.option("--rule", required=True, help="Current rule.")
@click.option("--from", "start", default=None, help="Current range start.")
@click.option("--to", "end", default=None, help="Current range end.")
@click.pass_obj
def select(
    app: AppContext,
    new_rule: str,
    rule: str,
    start: str | None,
    end: str | None,
) -> None:
    """Switch to NEW_RULE, realigning the range start."""
    svc = SelectorService(app.settings)
    app.emit(svc.select_rule(new_rule, rule=rule, start=start, end=end))
