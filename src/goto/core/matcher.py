"""Select and rank the contexts that apply to a working directory."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath

from goto.core.config_model import ShortcutConfig
from goto.core.paths import depth, is_within, normalize

logger = logging.getLogger(__name__)

GLOBAL_LABEL = "(global)"


@dataclass(frozen=True)
class Scope:
    """A context as seen from one cwd: its normalized base and shortcuts.

    The global pseudo-context has `index` None and is anchored at the home
    directory, which is where its relative entries resolve.
    """

    label: str
    base: PurePosixPath
    shortcuts: Mapping[str, str]
    index: int | None

    @property
    def is_global(self) -> bool:
        return self.index is None


def matching_contexts(
    config: ShortcutConfig, cwd: PurePosixPath, home: PurePosixPath
) -> list[Scope]:
    """Return the scopes active at `cwd`, most specific first.

    Deeper bases come first. Among bases of equal depth the later
    declaration wins. The global scope always closes the list.

    Args:
        config: Loaded shortcut configuration
        cwd: Absolute current working directory
        home: User home directory

    Returns:
        Ordered scopes; just the global scope when no context applies
    """
    root = PurePosixPath("/")
    candidates: list[Scope] = []
    for decl in config.contexts:
        base = normalize(decl.base, root, home)
        if not is_within(cwd, base):
            continue
        candidates.append(
            Scope(label=decl.base, base=base, shortcuts=decl.shortcuts, index=decl.index)
        )

    _warn_duplicate_bases(candidates)

    candidates.sort(key=lambda s: (depth(s.base), s.index), reverse=True)
    candidates.append(
        Scope(label=GLOBAL_LABEL, base=home, shortcuts=config.global_shortcuts, index=None)
    )

    logger.debug("Active scopes at %s: %s", cwd, [s.label for s in candidates])
    return candidates


def _warn_duplicate_bases(scopes: list[Scope]) -> None:
    seen: dict[PurePosixPath, Scope] = {}
    for scope in scopes:
        earlier = seen.get(scope.base)
        if earlier is not None:
            logger.warning(
                "Contexts %r and %r both resolve to %s; using the later one",
                earlier.label,
                scope.label,
                scope.base,
            )
        seen[scope.base] = scope
