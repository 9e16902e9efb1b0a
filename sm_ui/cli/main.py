"""
Command-line interface for shellmenu.

Loads a menu file, shows it as a navigable terminal menu and runs the chosen
commands until the menu is closed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.text import Text

from sm_common.api import LauncherError, UnsupportedFormatError, configure_logging
from sm_common.version import __version__
from sm_menu.api import build_from_item, load_menu_file
from sm_ui.session import run_session
from sm_ui.wiring.dependencies import LauncherContext

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: shellmenu FILE\n"
    "  - FILE: Input file in JSON (.json) or YAML (.yaml)"
)

ctx_store = LauncherContext()
err_console = Console(stderr=True, highlight=False)

app = typer.Typer(
    help="Open a navigable menu of shell commands described by a JSON or YAML file.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"shellmenu {__version__}")
        raise typer.Exit()


def _fail(exc: LauncherError, *, show_usage: bool = False) -> NoReturn:
    err_console.print(Text(f"Error: {exc}", style="bold red"))
    if show_usage:
        err_console.print(USAGE, markup=False)
    logger.error("%s: %s", exc.error_type, exc, extra={"context": exc.context})
    raise typer.Exit(code=1)


@app.command()
def launch(
    file: Path = typer.Argument(
        ...,
        metavar="FILE",
        help="Menu file in JSON (.json) or YAML (.yaml).",
    ),
    shell: Optional[str] = typer.Option(
        None, "--shell", help="Shell for wrapped commands [env: SM_SHELL, default: bash]."
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="Profile sourced before wrapped commands; '' disables it "
        "[env: SM_PROFILE, default: ~/.bash_profile].",
    ),
    back_exits: Optional[bool] = typer.Option(
        None,
        "--back-exits/--no-back-exits",
        help="Whether the back key on the top menu closes the launcher [env: SM_BACK_EXITS].",
    ),
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Replay --pick paths instead of reading keys (useful in scripts and CI).",
    ),
    pick: Optional[list[str]] = typer.Option(
        None,
        "--pick",
        "-p",
        help="Menu path to select in headless mode, e.g. 'Tools/Disk usage'. Repeatable.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log debug messages to stderr."),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write logs to this file [env: SM_LOG_FILE]."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Show the menu described by FILE and run the selected commands."""
    _ = version
    configure_logging(
        debug=debug,
        log_file=str(log_file) if log_file is not None else None,
        force=True,
    )
    ctx_store.headless = headless
    ctx_store.picks = list(pick or [])

    try:
        ctx_store.settings = ctx_store.settings.with_overrides(
            shell=shell, profile=profile, back_exits_at_root=back_exits
        )
        tree = build_from_item(load_menu_file(file))
        logger.info("Loaded %s menu entries from %s", len(tree) - 1, file)
        run_session(
            tree,
            ctx_store.selector_for(tree),
            ctx_store.executor,
            ctx_store.terminal,
            ctx_store.presenter,
        )
    except UnsupportedFormatError as exc:
        _fail(exc, show_usage=True)
    except LauncherError as exc:
        _fail(exc)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
