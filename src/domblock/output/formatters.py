"""Output mode selection for ServiceResult.

The CLI renders ServiceResult for humans (Rich), for machines (--json),
or as bare verdict lines. The batch ``check`` op always prints one
``Bad``/``Good`` line per query so its stdout is the protocol output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from domblock.output.renderers import render_quiet, render_result, render_verdicts

if TYPE_CHECKING:
    from domblock.services.result import ServiceResult

# Ops whose human output is the verdict lines themselves.
VERDICT_OPS = frozenset({"check", "classify"})


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Priority: ``json_output`` > verdict ops > ``quiet`` > Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok and result.op in VERDICT_OPS:
        return render_verdicts(result)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
