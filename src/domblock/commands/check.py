"""Command: batch classification over the count-prefixed stream protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from domblock.commands._base import DomCommand

if TYPE_CHECKING:
    from domblock.commands._context import AppContext


@click.command(
    cls=DomCommand,
    examples="""\
  domblock check < batch.txt
  domblock check batch.txt
  printf '1\\ngdz.ru\\n2\\nmath.gdz.ru\\nfreegdz.ru\\n' | domblock check
  domblock --json check batch.txt""",
)
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_obj
def check(app: AppContext, source: BinaryIO) -> None:
    """Read a block-list and queries from SOURCE and print Bad/Good per query.

    SOURCE defaults to stdin. Layout: a count N, N blocked domains,
    a count M, then M query domains, one per line. Input must be UTF-8
    and lines end at \\n.
    """
    from domblock.infrastructure.batch_io import decode_lines
    from domblock.services.classify import ClassifyService

    app.emit(ClassifyService(app.settings).check(decode_lines(source)))
