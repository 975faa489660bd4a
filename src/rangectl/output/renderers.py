"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rangectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rangectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


# Primary value printed by ``--quiet`` for single-value ops.
_QUIET_KEYS: dict[str, str] = {
    "invert_rule": "inverted",
    "apply_rule": "result",
    "start_of_range": "start",
    "format_date": "text",
    "parse_rule": "token",
}


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in data:
        return str(data[key])
    if "from" in data:
        return " ".join(str(data[k]) for k in ("from", "to") if data.get(k))
    if "items" in data:
        return "\n".join(str(item.get("rule", "")) for item in data["items"])
    if "state" in data:
        return _json.dumps(data["state"], separators=(",", ":"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="range.ok")
    op = Text(f"  {result.op}", style="range.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="range.key")
    if key in ("rule", "token", "inverted", "new_rule"):
        v = Text(str(value), style="range.rule")
    elif key in ("date", "from", "to", "start", "result"):
        v = Text(str(value), style="range.date")
    elif key in ("label", "text"):
        v = Text(str(value), style="range.label")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="range.error")
    op = Text(f"  {result.op}", style="range.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Range renderers ───────────────────────────────────────────────────


def _render_range(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render init/step/select results: rule, bounds, and label."""
    _status_line(console, result)
    d = result.data
    for key in ("direction", "rule", "from", "to"):
        if d.get(key):
            _field(console, key, d[key])
    if d.get("label"):
        _field(console, "label", d["label"])


def _render_rule_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_rules as a table with the selected rule highlighted."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Rule", style="range.rule")
    table.add_column("Label")
    table.add_column("", width=1)
    for item in result.data.get("items", []):
        marker = Text("*", style="range.selected") if item.get("selected") else Text("")
        table.add_row(str(item.get("rule", "")), str(item.get("label", "")), marker)
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} rules")


def _render_state(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_state/merge_state: the interchange dict, key by key."""
    _status_line(console, result)
    d = result.data
    if "changed" in d:
        _field(console, "changed", d["changed"])
    console.print(Text("  state:", style="range.key"))
    for key, value in d.get("state", {}).items():
        console.print(f"    {key} = {value}")
    remaining = d.get("remaining")
    if remaining:
        console.print(Text("  remaining:", style="range.key"))
        for key, value in remaining.items():
            console.print(f"    {key} = {value}")
    if d.get("label"):
        _field(console, "label", d["label"])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Rules
    "parse_rule": _render_generic,
    "invert_rule": _render_generic,
    "apply_rule": _render_generic,
    "start_of_range": _render_generic,
    "format_date": _render_generic,
    "list_rules": _render_rule_table,
    # Selector
    "init_range": _render_range,
    "step": _render_range,
    "select_rule": _render_range,
    "get_state": _render_state,
    "merge_state": _render_state,
}
