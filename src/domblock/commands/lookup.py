"""Command: check domains against a block-list file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from domblock.commands._base import DomCommand

if TYPE_CHECKING:
    from domblock.commands._context import AppContext


@click.command(
    cls=DomCommand,
    examples="""\
  domblock lookup -b blocked.txt math.gdz.ru
  domblock lookup -b blocked.txt a.example.com b.example.org
  domblock --json lookup -b blocked.txt maps.me""",
)
@click.option(
    "-b",
    "--blocklist",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Block-list file, one domain per line.",
)
@click.argument("domains", nargs=-1, required=True)
@click.pass_obj
def lookup(app: AppContext, blocklist: Path, domains: tuple[str, ...]) -> None:
    """Show whether each DOMAIN is blocked and which entry blocks it."""
    from domblock.services.classify import ClassifyService

    app.emit(ClassifyService(app.settings).lookup(blocklist, list(domains)))
