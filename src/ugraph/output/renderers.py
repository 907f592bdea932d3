"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ugraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from ugraph.services.result import ServiceResult


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


def render_quiet(result: ServiceResult) -> str:
    """Render minimal, pipe-friendly output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "euler_circuit":
        return " ".join(d.get("circuit", []))
    if result.op == "components":
        return "\n".join(" ".join(c["members"]) for c in d.get("components", []))
    if result.op == "bridge":
        return "true" if d.get("is_bridge") else "false"
    if result.op == "degree":
        return str(d.get("degree", ""))
    if result.op in ("neighbors", "inspect"):
        items = d.get("items", [])
        return "\n".join(item["id"] if isinstance(item, dict) else str(item) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="ug.ok")
    op = Text(f"  {result.op}", style="ug.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ug.key")
    if key == "id" or key == "start":
        v = Text(str(value), style="ug.node")
    elif isinstance(value, bool):
        v = Text(str(value).lower(), style="ug.yes" if value else "ug.no")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  {warning}", style="ug.warning"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ug.error")
    op = Text(f"  {result.op}", style="ug.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Summary counts followed by one row per node."""
    d = result.data
    _status_line(console, result)
    for key in ("order", "size", "components", "self_loops"):
        _field(console, key, d.get(key, 0))

    items = d.get("items", [])
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Node", style="ug.node", no_wrap=True)
        table.add_column("Degree", style="ug.count", justify="right")
        table.add_column("Adjacent")
        if verbose:
            table.add_column("Value", style="dim")
        for item in items:
            row = [str(item["id"]), str(item["degree"]), ", ".join(item["adjacency"])]
            if verbose:
                row.append("" if item.get("value") is None else str(item["value"]))
            table.add_row(*row)
        console.print()
        console.print(table)
    _render_warnings(console, result)


def _render_components(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    components = result.data.get("components", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Size", style="ug.count", justify="right")
    table.add_column("Members", style="ug.node")
    for comp in components:
        table.add_row(str(comp["component_id"]), str(comp["size"]), ", ".join(comp["members"]))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(components))} components")
    if verbose:
        _render_meta(console, result)


def _render_circuit(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an Euler circuit as a chain of nodes."""
    circuit = result.data.get("circuit", [])
    chain = Text()
    for index, node in enumerate(circuit):
        if index:
            chain.append(" → ")
        chain.append(node, style="ug.node")
    console.print(chain)
    console.print(f"\nEdges walked: {result.data.get('size', max(len(circuit) - 1, 0))}")


def _render_bridge(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    u, v = result.data.get("edge", ["?", "?"])
    _field(console, "edge", f"{u} - {v}")
    _field(console, "is_bridge", bool(result.data.get("is_bridge")))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "inspect": _render_inspect,
    "components": _render_components,
    "euler_circuit": _render_circuit,
    "bridge": _render_bridge,
}
