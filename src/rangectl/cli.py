"""Root CLI group for rangectl with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from rangectl import __version__
from rangectl.commands import register_commands
from rangectl.commands._context import AppContext
from rangectl.config.settings import ConfigError, RangeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rangectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--lang", default=None, help="Locale for labels and formatted dates.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    lang: str | None,
    config_path: str | None,
) -> None:
    """rangectl — calendar-rule date ranges."""
    flags: dict[str, Any] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if lang:
        flags["lang"] = lang
    try:
        settings = RangeSettings.from_cli(config_path=config_path, **flags)
    except (ConfigError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
