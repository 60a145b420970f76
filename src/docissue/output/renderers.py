"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from docissue.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from docissue.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    An issued document reduces to its stamp; a type listing to the type names.
    """
    if not result.ok:
        code = result.error.code if result.error else "UNKNOWN"
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} [{code}] — {msg}"

    if "stamp" in result.data:
        return str(result.data["stamp"])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("type", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


def _print_plain(console: Console, text: str, style: str = "") -> None:
    """Print *text* literally: no markup parsing, no wrapping."""
    console.print(Text(text, style=style), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            _print_plain(console, f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {name}")

    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")

    console.print(line, soft_wrap=True)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    line = Text("ERROR", style="doc.error")
    line.append(f"  {result.op}", style="doc.op")
    if err:
        line.append(f" [{err.code}]", style="doc.code")
    line.append(" — ")
    line.append(err.message if err else "Unknown error")
    console.print(line, soft_wrap=True)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            _print_plain(console, f"    {k}: {v}")


def _render_document(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Label line, body, stamp line — in that order."""
    d = result.data
    label_style = style_for_type(str(d.get("type", ""))) or "doc.label"
    _print_plain(console, f"=== {d.get('label', '')} ===", style=label_style)
    _print_plain(console, str(d.get("body", "")))
    line = Text("Sello: ")
    line.append(str(d.get("stamp", "")), style="doc.stamp")
    console.print(line, soft_wrap=True)
    if verbose:
        _render_meta(console, result)


def _render_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type", no_wrap=True)
    table.add_column("Label", style="doc.label")
    table.add_column("Prefix", style="doc.stamp")
    table.add_column("Rule")
    if verbose:
        table.add_column("Template", style="dim")

    for item in result.data.get("items", []):
        request_type = str(item.get("type", ""))
        row = [
            Text(request_type, style=style_for_type(request_type)),
            Text(str(item.get("label", ""))),
            Text(str(item.get("prefix", ""))),
            Text(str(item.get("rule", ""))),
        ]
        if verbose:
            row.append(Text(str(item.get("template", ""))))
        table.add_row(*row)

    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    line = Text("OK", style="doc.ok")
    line.append(f"  {result.op}", style="doc.op")
    console.print(line)
    for key, value in result.data.items():
        k = Text(f"  {key}: ", style="doc.key")
        k.append(str(value))
        console.print(k, soft_wrap=True)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "issue_document": _render_document,
    "list_types": _render_types,
}
