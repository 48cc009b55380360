"""
Command line interface for the Aerospike SDK.

Commands:
- version: Show the library version
- edition: Show the resolved edition
- connect: Connect with active/passive failover
- ping: Check that some host answers
- stats: Print node statistics from the first responding host
"""

import sys
from pathlib import Path

import click

from . import version
from .client import Client
from .config import ClientConfig
from .edition import EDITION_ENV_KEY, edition_parity_statement, resolve_edition
from .exceptions import AeroError
from .log import Logger, LogLevel

LOG_LEVEL_NAMES = [level.name.lower() for level in LogLevel]


def _build_client(ctx: click.Context) -> Client:
    logger: Logger = ctx.obj["logger"]
    config = ClientConfig.build_default(logger=logger, secrets_path=ctx.obj["secrets_file"])
    return Client(config, logger=logger)


def _fail(error: AeroError) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    "-l",
    envvar="AEROSPIKE_LOG_LEVEL",
    type=click.Choice(LOG_LEVEL_NAMES, case_sensitive=False),
    default="info",
    help="Minimum diagnostic level (default: info)",
)
@click.option(
    "--secrets-file",
    "-s",
    envvar="AEROSPIKE_SECRETS_FILE",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read credentials from a KEY=VALUE secrets file instead of the environment",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, secrets_file: Path | None) -> None:
    """Aerospike active/passive connectivity tool."""
    ctx.ensure_object(dict)
    ctx.obj["logger"] = Logger(LogLevel.parse(log_level))
    ctx.obj["secrets_file"] = secrets_file


@cli.command("version")
def show_version() -> None:
    """Show the library version."""
    click.echo(version())


@cli.command()
def edition() -> None:
    """Show the edition resolved from AEROSPIKE_EDITION."""
    try:
        resolved = resolve_edition(EDITION_ENV_KEY)
    except AeroError as e:
        _fail(e)
        return
    click.echo(f"Edition: {resolved.value}")
    click.echo(edition_parity_statement())


@cli.command()
@click.pass_context
def connect(ctx: click.Context) -> None:
    """Connect to the active cluster, failing over to passive."""
    try:
        with _build_client(ctx) as client:
            client.connect()
    except AeroError as e:
        _fail(e)
        return
    click.echo("Connected to Aerospike (active/passive failover supported)")


@cli.command()
@click.pass_context
def ping(ctx: click.Context) -> None:
    """Check that at least one host answers."""
    try:
        with _build_client(ctx) as client:
            client.ping()
    except AeroError as e:
        _fail(e)
        return
    click.echo("alive")


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Print statistics from the first responding host."""
    try:
        with _build_client(ctx) as client:
            response = client.statistics()
    except AeroError as e:
        _fail(e)
        return
    for key, value in response.statistics.items():
        click.echo(f"{key}={value}")


def main() -> None:
    cli(obj={})


__all__ = ["cli", "main"]
