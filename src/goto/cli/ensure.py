"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in the goto
command with consistent, user-friendly error messages. All errors use a red
"Error:" prefix and go to stderr so the shell never evaluates them.
"""

from collections.abc import Callable
from typing import NoReturn, TypeVar

import click

from goto.cli.output import user_output
from goto.core.config_model import ShortcutConfig
from goto.core.errors import GotoError
from goto.core.resolver import ShortcutNotFound

T = TypeVar("T")


def _fail(error_message: str) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
        return value

    @staticmethod
    def config_loaded(load: Callable[[], ShortcutConfig]) -> ShortcutConfig:
        """Run a config loader, turning configuration errors into a styled exit.

        Args:
            load: Zero-argument callable, typically ConfigStore.load

        Returns:
            The loaded configuration

        Raises:
            SystemExit: If loading raised a GotoError (with exit code 1)

        Example:
            >>> config = Ensure.config_loaded(ctx.config_store.load)
        """
        try:
            return load()
        except GotoError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    @staticmethod
    def shortcut_found(value: T | ShortcutNotFound) -> T:
        """Ensure resolution produced a target, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | ShortcutNotFound`
        and returns `T`.

        Raises:
            SystemExit: If value is ShortcutNotFound (with exit code 1)
        """
        if isinstance(value, ShortcutNotFound):
            _fail(value.message)
        return value
