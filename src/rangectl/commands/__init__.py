"""Subcommand modules for rangectl.

Provides register_commands() which imports command modules lazily so
``rangectl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root group."""
    # --- Groups ---
    from rangectl.commands.range_cmd import range_group
    from rangectl.commands.rule import rule
    from rangectl.commands.state import state

    cli.add_command(rule)
    cli.add_command(range_group)
    cli.add_command(state)

    # --- Standalone commands ---
    from rangectl.commands.format_cmd import format_cmd

    cli.add_command(format_cmd)
