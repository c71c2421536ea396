"""Errors raised while loading shortcut configuration."""

from pathlib import Path


class GotoError(Exception):
    """Base class for goto failures that end the invocation."""


class ConfigParseError(GotoError):
    """Configuration file is missing, unreadable, or malformed."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"invalid configuration in {path}: {detail}")
        self.path = path
        self.detail = detail


class InvalidContextBase(GotoError):
    """A context header names a relative path.

    Context bases must be absolute or home-relative since there is no
    enclosing directory to resolve them against.
    """

    def __init__(self, base: str) -> None:
        super().__init__(
            f"context base {base!r} must be an absolute path or start with '~/'"
        )
        self.base = base
