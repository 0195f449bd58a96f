"""Command line entry point."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from .engine.host import TerminalPromptHost
from .engine.loader import SettingsStore
from .engine.runner import RealActionRunner
from .errors import ConfigError, InquiryError
from .services.commit import commit_message, compose_commit
from .utils import configure_logging

app = typer.Typer(help="Compose conventional commit messages interactively.")


@app.command()
def compose(
    workspace: Optional[Path] = typer.Option(None, help="Repository directory (default: current directory)"),
    commit: bool = typer.Option(False, "--commit", help="Run git commit with the composed message"),
    log_level: str = typer.Option("WARNING", help="DEBUG, INFO, WARNING or ERROR"),
):
    """Ask for the commit fields and print the composed message."""
    configure_logging(log_level)
    store = SettingsStore(workspace=workspace)
    runner = RealActionRunner()
    host = TerminalPromptHost()

    try:
        message = asyncio.run(compose_commit(host, runner, store))
    except (ConfigError, InquiryError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if message is None:
        typer.echo("Cancelled", err=True)
        raise typer.Exit(code=1)

    if not commit:
        typer.echo(message)
        return

    result = commit_message(message, store.workspace, runner)
    if result.get('returncode') != 0:
        typer.echo(result.get('stderr', '').strip() or "git commit failed", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.get('stdout', '').strip())


@app.command()
def scopes(
    workspace: Optional[Path] = typer.Option(None, help="Repository directory (default: current directory)"),
):
    """List the saved scopes."""
    try:
        settings = SettingsStore(workspace=workspace).load()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for scope in settings.scopes:
        typer.echo(scope)


if __name__ == "__main__":
    app()
