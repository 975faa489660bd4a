"""Command group: flat interchange state for host forms."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from rangectl.commands._base import RangeGroup
from rangectl.services.selector import SelectorService

if TYPE_CHECKING:
    from rangectl.commands._context import AppContext

_STATE_EXAMPLES = """\
  rangectl state get --rule +1m --from 2014-06-01 --to 2014-06-30
  rangectl state merge '{"__daterange": "+2m", "foo": "1"}' --rule +1m --from 2014-06-01"""


@click.group(cls=RangeGroup, examples=_STATE_EXAMPLES)
def state() -> None:
    """Encode and merge selector state."""


def _state_options(func: click.decorators.FC) -> click.decorators.FC:
    func = click.option("--to", "end", default=None, help="Range end.")(func)
    func = click.option("--from", "start", default=None, help="Range start.")(func)
    return click.option("--rule", required=True, help="Selected rule.")(func)


@state.command()
@_state_options
@click.pass_obj
def get(app: AppContext, rule: str, start: str | None, end: str | None) -> None:
    """Print the interchange dict for a state."""
    app.emit(SelectorService(app.settings).get_state(rule=rule, start=start, end=end))


@state.command()
@click.argument("blob")
@_state_options
@click.pass_obj
def merge(app: AppContext, blob: str, rule: str, start: str | None, end: str | None) -> None:
    """Merge a JSON object BLOB into a state.

    Keys the selector recognises are consumed; the rest are reported as
    remaining.
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="BLOB") from exc
    if not isinstance(data, dict):
        raise click.BadParameter("must be a JSON object", param_hint="BLOB")
    values = {str(k): v if isinstance(v, str) else json.dumps(v) for k, v in data.items()}
    svc = SelectorService(app.settings)
    app.emit(svc.merge_state(values, rule=rule, start=start, end=end))
