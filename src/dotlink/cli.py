"""Command-line interface for dotlink."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, config_file_path
from .errors import ConfigError, DotlinkError, FilesystemError, MissingConfigError
from .filesystem import get_home_dir
from .manager import DotfilesManager
from .models import LinkState, Plan, StatusEntry, StatusReport
from .version import __version__

app = typer.Typer(
    help="Simple dotfiles manager keeping track of file links",
    no_args_is_help=True,
)
console = Console()

STATE_STYLES = {
    LinkState.LINKED: "green",
    LinkState.UNLINKED: "yellow",
    LinkState.UNMAPPED: "dim",
    LinkState.INVALID: "red",
    LinkState.CONFLICT_NO_LINK: "red",
    LinkState.CONFLICT_WRONG_TARGET: "red",
}


@dataclass
class CliState:
    repo_root: Path


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dotlink version {__version__}")
        raise typer.Exit()


def _load_manager(state: CliState) -> DotfilesManager:
    home = get_home_dir()
    config_path = config_file_path(state.repo_root, home)
    if not config_path.exists():
        create = typer.confirm(
            f"Could not find the dotfiles config file at '{config_path}'. Should I create it?",
            default=True,
        )
        if not create:
            raise MissingConfigError(config_path)
        AppConfig(config_path).save()
        console.print(f"[green]Created '{config_path}'.[/green]")

    return DotfilesManager(AppConfig.load(config_path), state.repo_root, home)


def _handle_error(exc: Exception) -> None:
    if isinstance(exc, PermissionError) or (
        isinstance(exc, FilesystemError) and isinstance(exc.cause, PermissionError)
    ):
        console.print(f"[red]Permission denied.[/red] {exc}", soft_wrap=True)
        raise typer.Exit(code=1)
    if isinstance(exc, ConfigError):
        console.print(f"[red]{exc}[/red]", soft_wrap=True)
        if isinstance(exc, MissingConfigError):
            console.print(
                "[yellow]Run the command again and confirm the prompt to create an empty config file.[/yellow]",
                soft_wrap=True,
            )
        raise typer.Exit(code=1)
    if isinstance(exc, DotlinkError):
        console.print(f"[red]{exc}[/red]", soft_wrap=True)
        raise typer.Exit(code=1)
    raise exc


def _status_details(entry: StatusEntry) -> str:
    payload = entry.status.path
    if entry.state is LinkState.INVALID:
        return f"{payload} does not exist"
    if entry.state is LinkState.CONFLICT_NO_LINK:
        return f"{payload} is not a symlink"
    if entry.state is LinkState.CONFLICT_WRONG_TARGET:
        return f"points to {payload} instead"
    return ""


def _format_status(report: StatusReport) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Entry", no_wrap=True)
    table.add_column("State", no_wrap=True)
    table.add_column("Details", overflow="fold")

    for entry in report.entries:
        style = STATE_STYLES.get(entry.state, "white")
        table.add_row(
            entry.path.as_posix(),
            f"[{style}]{entry.state.value.upper()}[/{style}]",
            _status_details(entry),
        )

    console.print(table)


def _format_plan(plan: Plan) -> None:
    if plan.skipped:
        console.print("Following steps can be skipped:")
        for reason in plan.skipped:
            console.print(f"- {reason}", highlight=False, soft_wrap=True)
    if plan.changes:
        console.print("Following things will be done:")
        for change in plan.changes:
            console.print(f"- {change.describe()}", highlight=False, soft_wrap=True)


@app.callback()
def main(
    ctx: typer.Context,
    root: Path = typer.Option(
        ...,
        "--root",
        "-r",
        envvar="DOTFILES_ROOT",
        help="Absolute path of the dotfiles repository root directory",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Keep the files of a dotfiles repository symlinked into your home directory."""

    _configure_logging(verbose)
    ctx.obj = CliState(repo_root=root.expanduser().resolve(strict=False))


@app.command()
def status(ctx: typer.Context) -> None:
    """Show every repository entry and whether it is linked into the home directory."""

    try:
        manager = _load_manager(ctx.obj)
        report = manager.status()
        if report.is_empty():
            console.print("Nothing to show: the repository is empty and no mappings are configured.")
            return
        _format_status(report)
        if any(entry.state is LinkState.UNLINKED for entry in report.entries):
            console.print("[yellow]Some mapped entries are not linked yet. Run 'dotlink add <path>' to link them.[/yellow]")
    except Exception as exc:  # noqa: BLE001
        _handle_error(exc)


@app.command()
def add(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="The path to the directory or file to add"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Apply the changes without asking for confirmation"),
) -> None:
    """Add a path to the dotfiles mappings and link it.

    A path inside the dotfiles repository is added to the mappings and linked
    into the home directory. A path inside the home directory is added to the
    mappings, moved into the repository and replaced with a symlink.
    """

    try:
        manager = _load_manager(ctx.obj)
        plan = manager.plan_add(path)
        _format_plan(plan)
        if plan.is_noop:
            console.print("[green]Nothing left to be done. Have a good time![/green]")
            return
        if not yes and not typer.confirm("Continue?", default=True):
            console.print("[yellow]Aborted, nothing was changed.[/yellow]")
            return
        applied = manager.apply(plan)
        console.print(
            f"[green]Applied {len(applied)} change(s) for '{plan.path.as_posix()}'.[/green]", soft_wrap=True
        )
    except Exception as exc:  # noqa: BLE001
        _handle_error(exc)


def run() -> None:
    """Entry point used for console_script bindings."""

    app()
