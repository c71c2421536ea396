"""Resolve a shortcut name through the ordered scope chain."""

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath

from goto.core.config_model import DEFAULT_SHORTCUT
from goto.core.matcher import Scope
from goto.core.paths import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortcutNotFound:
    """Sentinel value indicating no active scope defines the requested name."""

    name: str

    @property
    def message(self) -> str:
        if self.name == DEFAULT_SHORTCUT:
            return "No default shortcut ('*') is defined for this directory"
        return f"No shortcut named '{self.name}' is defined for this directory"


def resolve(
    scopes: list[Scope], home: PurePosixPath, requested: str = DEFAULT_SHORTCUT
) -> PurePosixPath | ShortcutNotFound:
    """Find the first scope defining `requested` and compute its target.

    The first (most specific) definition wins outright. A relative target is
    resolved against the base of the scope that declares it, never the cwd.

    Args:
        scopes: Output of matching_contexts(), most specific first
        home: User home directory for `~` expansion
        requested: Shortcut name; `*` selects the default shortcut

    Returns:
        Absolute target path, or ShortcutNotFound if no scope defines the name
    """
    for scope in scopes:
        spec = scope.shortcuts.get(requested)
        if spec is None:
            continue
        target = normalize(spec, scope.base, home)
        logger.debug("Shortcut %r found in %s -> %s", requested, scope.label, target)
        return target
    return ShortcutNotFound(name=requested)


def available_shortcuts(
    scopes: list[Scope], home: PurePosixPath
) -> dict[str, tuple[PurePosixPath, Scope]]:
    """Return every name visible from these scopes with its winning target.

    Each entry maps a shortcut name to the resolved target and the scope
    that supplies it, after overrides are applied.
    """
    visible: dict[str, tuple[PurePosixPath, Scope]] = {}
    for scope in scopes:
        for name, spec in scope.shortcuts.items():
            if name in visible:
                continue
            visible[name] = (normalize(spec, scope.base, home), scope)
    return visible
