"""respec-validator CLI — validate a ReSpec document for publication.

Usage:
    respec-validator --help
    python -m cli.main [OPTIONS] [SRC]

Exit codes:
    0    all checks passed
    1    a check failed, or the invocation was invalid
    127  unrecognised options or arguments
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import click
import typer

from validator import __version__
from validator.config import settings
from validator.models import ConfigurationError, ServerError, ValidationRequest
from validator.pipeline import ValidationPipeline
from validator.server import LocalServer

EXIT_UNKNOWN_ARGUMENTS = 127

app = typer.Typer(
    name="respec-validator",
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(levelname)s] %(message)s",
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__version__}\n")
        raise typer.Exit()


@app.command("respec-validator")
def validate(
    src: str = typer.Argument("index.html", help="A ReSpec src file."),
    no_links: bool = typer.Option(
        False, "--no-links", "-l", help="Don't validate cross references."
    ),
    check_links_using_get: bool = typer.Option(
        False,
        "--check-links-using-get",
        "-g",
        help="Use HTTP GET when doing link validation, instead of HEAD.",
    ),
    no_validator: bool = typer.Option(
        False, "--no-validator", "-v", help="Don't perform HTML validation."
    ),
    status: Optional[str] = typer.Option(None, "--status", help="Override the spec's status."),
    gh_token: Optional[str] = typer.Option(
        None,
        "--gh-token",
        help="A GitHub token, if needed: https://github.com/settings/tokens",
    ),
    gh_user: Optional[str] = typer.Option(
        None, "--gh-user", help="A GitHub user associated with the token."
    ),
    manifest: Optional[Path] = typer.Option(
        None, "--manifest", help="Path to Echidna manifest."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show additional debugging information."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version number.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """A tool that helps validate a ReSpec document for publication.

    Generates the document with ReSpec, then checks its markup and links.
    If there are any errors or warnings, the command exits with 1.

    \b
    Examples:
      1. Check all warnings/errors, HTML, and cross references.
         $ respec-validator index.html
      2. Don't do link check
         $ respec-validator --no-links index.html

    Project home: https://github.com/w3c/respec
    """
    _configure_logging(debug or settings.debug)

    try:
        request = ValidationRequest(
            src=src,
            status=status,
            gh_token=gh_token,
            gh_user=gh_user,
            skip_markup=no_validator,
            skip_links=no_links,
            use_get=check_links_using_get,
            manifest=manifest,
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    server = LocalServer(
        settings.server_root,
        host=settings.server_host,
        port=settings.server_port,
        start_timeout=settings.server_start_timeout,
    )
    try:
        with server:
            outcome = asyncio.run(ValidationPipeline(request, settings).run())
    except ServerError as exc:
        typer.echo(f"❌  {exc}", err=True)
        raise typer.Exit(code=1)

    if not outcome.passed:
        raise typer.Exit(code=outcome.exit_code)


def _is_unknown_argument(exc: click.UsageError) -> bool:
    if isinstance(exc, click.NoSuchOption):
        return True
    return type(exc) is click.UsageError and "unexpected extra argument" in exc.message


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return its exit code instead of exiting."""
    command = typer.main.get_command(app)
    try:
        rv = command.main(
            args=list(argv) if argv is not None else None,
            prog_name="respec-validator",
            standalone_mode=False,
        )
    except click.UsageError as exc:
        if not _is_unknown_argument(exc):
            exc.show()
            return 1
        if exc.ctx is not None:
            typer.echo(exc.ctx.get_help())
        exc.show()
        return EXIT_UNKNOWN_ARGUMENTS
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
