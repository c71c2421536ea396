import logging
import os
from pathlib import Path

import click
from click.shell_completion import CompletionItem

from goto.cli.ensure import Ensure
from goto.cli.output import machine_output, user_output
from goto.cli.shell_output import DEFAULT_SHELL_CMD, emit
from goto.core.config_model import DEFAULT_SHORTCUT
from goto.core.context import GotoContext, create_context, safe_cwd, safe_home
from goto.core.errors import GotoError
from goto.core.matcher import matching_contexts
from goto.core.resolver import available_shortcuts, resolve

logger = logging.getLogger(__name__)

# Enable debug logging if GOTO_DEBUG environment variable is set
if os.getenv("GOTO_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EPILOG = """\b
Configuration is stored in ~/.goto.toml:

\b
    name = "/some/path"              # 'goto name' takes you here
    othername = "~/some/other/path"  # $HOME expansion will happen

\b
    ["/somewhere/specific"]          # Only in effect when in this location
    "*" = "default/under/specific"   # With no arguments, this is used
    name = "somewhere/else"          # Overshadows the one above

Relative paths under a context header are resolved relative to the path in
that header.

\b
goto is meant to be evaluated by your shell:
    function goto() {
        eval "$(command goto "$@")"
    }
"""


def _complete_shortcut_names(
    ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Offer the shortcut names visible from the current directory."""
    if isinstance(ctx.obj, GotoContext):
        goto_ctx = ctx.obj
    else:
        cwd, _ = safe_cwd()
        home, _ = safe_home()
        if cwd is None or home is None:
            return []
        goto_ctx = create_context(cwd=cwd, home=home, config_path=ctx.params.get("config_path"))
    try:
        config = goto_ctx.config_store.load()
    except GotoError as e:
        logger.debug("Completion unavailable: %s", e)
        return []

    scopes = matching_contexts(config, goto_ctx.cwd, goto_ctx.home)
    return [
        CompletionItem(name, help=str(target))
        for name, (target, _scope) in sorted(available_shortcuts(scopes, goto_ctx.home).items())
        if name != DEFAULT_SHORTCUT and name.startswith(incomplete)
    ]


def _list_shortcuts(goto_ctx: GotoContext) -> None:
    config = Ensure.config_loaded(goto_ctx.config_store.load)
    scopes = matching_contexts(config, goto_ctx.cwd, goto_ctx.home)
    visible = available_shortcuts(scopes, goto_ctx.home)

    if not visible:
        user_output("No shortcuts defined for this directory")
        return

    width = max(len(name) for name in visible)
    for name, (target, scope) in sorted(visible.items()):
        user_output(
            f"{click.style(name.ljust(width), fg='cyan', bold=True)}  {target}  "
            + click.style(f"[{scope.label}]", dim=True)
        )


@click.command("goto", context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(package_name="goto-shortcuts")
@click.argument("name", required=False, shell_complete=_complete_shortcut_names)
@click.option(
    "-c",
    "--cmd",
    "shell_cmd",
    default=DEFAULT_SHELL_CMD,
    show_default=True,
    help="Shell command to emit before the target path.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="GOTO_CONFIG",
    help="Configuration file to read instead of ~/.goto.toml.",
)
@click.option(
    "-l",
    "--list",
    "list_only",
    is_flag=True,
    help="List the shortcuts available from the current directory.",
)
@click.pass_context
def goto_cmd(
    ctx: click.Context,
    name: str | None,
    shell_cmd: str,
    config_path: Path | None,
    list_only: bool,
) -> None:
    """Print a command that takes your shell to the shortcut NAME.

    Without NAME the default shortcut ('*') of the current directory is used.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        cwd, cwd_error = safe_cwd()
        home, home_error = safe_home()
        ctx.obj = create_context(
            cwd=Ensure.not_none(cwd, str(cwd_error)),
            home=Ensure.not_none(home, str(home_error)),
            config_path=config_path,
        )
    goto_ctx: GotoContext = ctx.obj

    if list_only:
        _list_shortcuts(goto_ctx)
        return

    requested = name if name is not None else DEFAULT_SHORTCUT
    Ensure.invariant(bool(requested), "Shortcut name cannot be empty")

    config = Ensure.config_loaded(goto_ctx.config_store.load)
    scopes = matching_contexts(config, goto_ctx.cwd, goto_ctx.home)
    target = Ensure.shortcut_found(resolve(scopes, goto_ctx.home, requested))

    machine_output(emit(target, shell_cmd))


def main() -> None:
    """CLI entry point used by the `goto` console script."""
    goto_cmd()
