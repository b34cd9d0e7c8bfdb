"""slack-paste CLI entry point.

Provides ``slack-paste init``, ``slack-paste paste DESTINATION`` and
``slack-paste version``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from importlib.metadata import version as pkg_version
from pathlib import Path
from typing import Annotated

import click
import typer
from typer.core import TyperGroup

from slack_paste.client import create_client
from slack_paste.commands import run_init, run_paste
from slack_paste.config import CONFIG_ENVVAR, default_config_path
from slack_paste.errors import SlackPasteError

# Exit status for command-line usage errors, matching click's.
USAGE_EXIT_CODE = 2


class _CommandRouter(TyperGroup):
    """Reports unknown subcommands as ``Unknown command: NAME``."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        name = args[0] if args else None
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            ctx.fail(f"Unknown command: {name}")
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=_CommandRouter,
    help="Paste the contents of stdin to Slack.",
    invoke_without_command=True,
    add_completion=False,
    rich_markup_mode=None,
)


@dataclass(frozen=True)
class CliState:
    """Global options shared by every subcommand."""

    config_path: Path


def _prompt_token(message: str) -> str:
    return typer.prompt(message)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            metavar="FILE",
            envvar=CONFIG_ENVVAR,
            help="The location of the config file.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
) -> None:
    """Paste the contents of stdin to Slack."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=USAGE_EXIT_CODE)
    ctx.obj = CliState(config_path=config or default_config_path())


@app.command()
def version() -> None:
    """Print the slack-paste version."""
    print(f"slack-paste {pkg_version('slack-paste')}")


@app.command()
def init(ctx: typer.Context) -> None:
    """Initialize slack app credentials."""
    state: CliState = ctx.obj
    try:
        written = run_init(state.config_path, _prompt_token)
    except SlackPasteError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    print(f"Config written to: {written}")


@app.command()
def paste(
    ctx: typer.Context,
    destination: Annotated[
        str,
        typer.Argument(
            metavar="DESTINATION",
            help="The slack user or channel that should receive the paste.",
        ),
    ],
) -> None:
    """Paste the contents of stdin to slack."""
    state: CliState = ctx.obj
    try:
        run_paste(
            state.config_path,
            destination,
            typer.get_text_stream("stdin"),
            create_client(),
        )
    except SlackPasteError as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    app()
