"""Pure path arithmetic for shortcut targets.

Nothing in this module touches the filesystem: paths are expanded and
normalized as strings, so targets that do not exist yet still resolve.
"""

import posixpath
from pathlib import PurePosixPath

HOME_MARKER = "~"


def is_home_relative(spec: str) -> bool:
    """Return True for `~` and `~/...` specs.

    `~name` forms are not expanded; they are treated as plain relative names.
    """
    return spec == HOME_MARKER or spec.startswith(HOME_MARKER + "/")


def is_anchored(spec: str) -> bool:
    """Return True if `spec` can be resolved without a base directory."""
    return spec.startswith("/") or is_home_relative(spec)


def normalize(spec: str, base: PurePosixPath, home: PurePosixPath) -> PurePosixPath:
    """Resolve a configured path spec into a canonical absolute path.

    Args:
        spec: Path as written in configuration
        base: Directory that relative specs are resolved against
        home: User home directory substituted for a leading `~`

    Returns:
        Absolute path with `.`, `..` and duplicate separators collapsed

    Example:
        >>> normalize("src/../lib", PurePosixPath("/proj"), PurePosixPath("/home/u"))
        PurePosixPath('/proj/lib')
        >>> normalize("~/notes", PurePosixPath("/proj"), PurePosixPath("/home/u"))
        PurePosixPath('/home/u/notes')
    """
    if spec.startswith("/"):
        joined = spec
    elif is_home_relative(spec):
        joined = str(home) + spec[len(HOME_MARKER) :]
    else:
        joined = f"{base}/{spec}"

    collapsed = posixpath.normpath(joined)
    # normpath keeps a leading "//" as POSIX allows it to be special
    if collapsed.startswith("//"):
        collapsed = "/" + collapsed.lstrip("/")
    return PurePosixPath(collapsed)


def is_within(path: PurePosixPath, base: PurePosixPath) -> bool:
    """Check whether `path` equals `base` or lies underneath it.

    Comparison is per path component, so `/foo` does not contain `/foobar`.
    """
    return path.parts[: len(base.parts)] == base.parts


def depth(path: PurePosixPath) -> int:
    """Number of components below the filesystem root."""
    return len(path.parts) - 1
