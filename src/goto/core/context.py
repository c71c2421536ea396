"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from goto.core.config_store import ConfigStore, FilesystemConfigStore, default_config_path


@dataclass(frozen=True)
class GotoContext:
    """Immutable context holding the inputs of one goto invocation.

    Created at CLI entry point and threaded through the command.
    Frozen to prevent accidental modification at runtime.
    """

    config_store: ConfigStore
    cwd: PurePosixPath  # Current working directory at CLI invocation
    home: PurePosixPath

    @staticmethod
    def for_test(
        config_store: ConfigStore,
        *,
        cwd: PurePosixPath | str = "/home/user",
        home: PurePosixPath | str = "/home/user",
    ) -> "GotoContext":
        """Create a context with explicit directories for tests.

        Example:
            >>> ctx = GotoContext.for_test(FakeConfigStore(config), cwd="/home/user/proj")
        """
        return GotoContext(
            config_store=config_store,
            cwd=PurePosixPath(cwd),
            home=PurePosixPath(home),
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        tuple[Path | None, str | None]: (path, error_message)
        - If successful: (Path, None)
        - If directory deleted: (None, error_message)

    Note:
        Path.cwd() offers no way to check the condition first, so this wraps it.
    """
    try:
        return (Path.cwd(), None)
    except OSError:
        return (None, "Current working directory no longer exists")


def safe_home() -> tuple[Path | None, str | None]:
    """Get the user home directory, detecting if it cannot be determined.

    Returns:
        tuple[Path | None, str | None]: (path, error_message)
    """
    try:
        return (Path.home(), None)
    except RuntimeError:
        return (None, "Unable to determine home directory (is $HOME set?)")


def create_context(*, cwd: Path, home: Path, config_path: Path | None = None) -> GotoContext:
    """Create production context from already-discovered directories.

    Args:
        cwd: Current working directory, usually from safe_cwd()
        home: User home directory, usually from safe_home()
        config_path: Explicit configuration file (defaults to ~/.goto.toml)

    Returns:
        GotoContext backed by the filesystem configuration store
    """
    if config_path is None:
        config_path = default_config_path(home)

    return GotoContext(
        config_store=FilesystemConfigStore(config_path),
        cwd=PurePosixPath(cwd),
        home=PurePosixPath(home),
    )
