"""Output routing for the goto command.

stdout is evaluated by the calling shell, so everything meant for a human
goes to stderr through user_output(). Only the final directive is written
with machine_output().
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write shell-evaluated output to stdout."""
    click.echo(message, nl=nl)
