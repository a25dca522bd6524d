"""GPIO line command implementations."""

import logging
from pathlib import Path
from typing import Optional

import click

from gpiolocator.core import LineBank
from gpiolocator.gpio import DEFAULT_GPIO_ROOT, SysfsLineControl
from gpiolocator.models import Level

logger = logging.getLogger(__name__)


@click.group(name="lines")
def lines_group():
    """GPIO line commands."""
    pass


@lines_group.command(name="list")
@click.option(
    '--count',
    '-n',
    type=click.IntRange(min=1),
    default=256,
    show_default=True,
    help='Number of lines to read (rounded up to a multiple of 8)'
)
@click.option(
    '--gpio-root',
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_GPIO_ROOT,
    show_default=True,
    help='Sysfs GPIO directory'
)
@click.option(
    '--all',
    'show_all',
    is_flag=True,
    help='Also list lines that could not be read'
)
def list_lines(count: int, gpio_root: Optional[Path], show_all: bool):
    """
    Read every line once and print its level.

    Useful without a terminal, e.g. over a serial console or in scripts.
    """
    bank = LineBank(SysfsLineControl(gpio_root), count)
    bank.prime()
    snapshot = bank.snapshot()

    click.echo(f"GPIO lines under {gpio_root} ({snapshot.available_count}/{snapshot.line_count} readable):\n")

    shown = [line for line in snapshot.lines if show_all or line.level is not Level.UNAVAILABLE]
    if not shown:
        click.echo("  No readable GPIO lines found.")
        return

    for line in shown:
        click.echo(f"  Pin{line.index:<5} {line.level.value}")
