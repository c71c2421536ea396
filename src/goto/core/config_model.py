"""Typed model of the shortcut configuration.

Built once per invocation from `~/.goto.toml` and never modified afterwards.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from goto.core.errors import InvalidContextBase
from goto.core.paths import is_anchored

DEFAULT_SHORTCUT = "*"


def _freeze(shortcuts: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(shortcuts))


@dataclass(frozen=True)
class ContextDecl:
    """Shortcuts that apply only while the cwd is under `base`.

    `index` records declaration order and breaks ties between contexts of
    equal specificity.
    """

    base: str
    shortcuts: Mapping[str, str]
    index: int

    def __post_init__(self) -> None:
        if not is_anchored(self.base):
            raise InvalidContextBase(self.base)
        object.__setattr__(self, "shortcuts", _freeze(self.shortcuts))


@dataclass(frozen=True)
class ShortcutConfig:
    """Global shortcuts plus context declarations in file order."""

    global_shortcuts: Mapping[str, str] = field(default_factory=dict)
    contexts: tuple[ContextDecl, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "global_shortcuts", _freeze(self.global_shortcuts))

    @staticmethod
    def build(
        global_shortcuts: Mapping[str, str],
        contexts: list[tuple[str, Mapping[str, str]]],
    ) -> "ShortcutConfig":
        """Create a config, numbering contexts in the order given.

        Example:
            >>> ShortcutConfig.build(
            ...     {"proj": "~/projects/current"},
            ...     [("~/projects/current", {"*": "src"})],
            ... )
        """
        return ShortcutConfig(
            global_shortcuts=global_shortcuts,
            contexts=tuple(
                ContextDecl(base=base, shortcuts=shortcuts, index=i)
                for i, (base, shortcuts) in enumerate(contexts)
            ),
        )
