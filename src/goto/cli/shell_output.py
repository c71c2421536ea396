"""Rendering of the directive evaluated by the shell wrapper."""

from pathlib import PurePosixPath

DEFAULT_SHELL_CMD = "pushd"


def quote_path(path: PurePosixPath) -> str:
    """Single-quote a path so the shell performs no expansion on it.

    Directory names are untrusted input: a folder named `$(rm -rf ~)` must
    come through as a literal.

    A name containing a newline stays inside the quotes, so the directive
    still reads as one shell command even though it spans several lines.
    """
    return "'" + str(path).replace("'", "'\\''") + "'"


def emit(target: PurePosixPath, shell_cmd: str = DEFAULT_SHELL_CMD) -> str:
    """Build the single line the shell wrapper evaluates.

    Args:
        target: Normalized absolute target directory
        shell_cmd: Command to prefix; empty to emit only the quoted path

    Returns:
        Directive such as `pushd '/home/user/projects'`

    Example:
        >>> emit(PurePosixPath("/home/user/projects"))
        "pushd '/home/user/projects'"
    """
    if not shell_cmd:
        return quote_path(target)
    return f"{shell_cmd} {quote_path(target)}"
