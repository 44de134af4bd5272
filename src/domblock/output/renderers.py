"""Text renderers for ServiceResult.

Verdict lines are plain ``Bad``/``Good`` tokens. The human view of a
lookup is a Rich table drawn into a StringIO-backed console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.padding import Padding
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from domblock.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from domblock.services.result import ServiceResult

BLOCKED_TOKEN = "Bad"
ALLOWED_TOKEN = "Good"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a lookup result, or any failed result, for a human reader."""
    console = create_console()
    if result.ok:
        _render_lookup(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_verdicts(result: ServiceResult) -> str:
    """One ``Bad``/``Good`` token per query, in query order.

    Returns an empty string when there were no queries.
    """
    verdicts = result.data.get("verdicts", [])
    return "\n".join(BLOCKED_TOKEN if v["blocked"] else ALLOWED_TOKEN for v in verdicts)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return render_verdicts(result)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "dom.ok"), (f"  {result.op}", "dom.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "dom.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            console.print(Padding(_span_tree(value), (0, 0, 0, 4)))
        else:
            console.print(Text(f"    {key}: {value}"))


def _span_label(span: dict[str, Any]) -> Text:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    label = Text.assemble((f"{duration:.2f}ms", style), f"  {span.get('name', '?')}")
    notes = span.get("annotations")
    if notes:
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    return label


def _span_tree(span: dict[str, Any], parent: Tree | None = None) -> Tree:
    """Timing tree for a serialized span, slow steps highlighted."""
    node = Tree(_span_label(span)) if parent is None else parent.add(_span_label(span))
    for child in span.get("children", []):
        _span_tree(child, node)
    return node


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}] " if err else " "
    console.print(
        Text.assemble(("ERROR", "dom.error"), (f"  {result.op}", "dom.op"), (code, "dom.key"), msg)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_lookup(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render lookup results as a table of domain, verdict, and blocking entry."""
    d = result.data
    _status_line(console, result)
    _field(console, "blocklist", d.get("blocklist", ""))
    _field(console, "entries", d.get("entries", 0))
    if verbose:
        _field(console, "duplicates", d.get("duplicates", 0))

    verdicts = d.get("verdicts", [])
    if verdicts:
        console.print()
        console.print(_verdict_table(verdicts))
    if verbose:
        _render_meta(console, result)


def _verdict_table(verdicts: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Domain", style="dom.domain", no_wrap=True)
    table.add_column("Verdict")
    table.add_column("Matched", style="dom.matched")
    for v in verdicts:
        if v["blocked"]:
            verdict = Text(BLOCKED_TOKEN, style="dom.bad")
        else:
            verdict = Text(ALLOWED_TOKEN, style="dom.good")
        table.add_row(Text(v["domain"]), verdict, Text(v["matched"] or ""))
    return table
