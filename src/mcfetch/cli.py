"""
Command line entry point.

    mcfetch --version 1.20.1
    mcfetch --version snapshot --server --root ./cache -v
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from mcfetch.mcfetch_config import MCFetchConfig
from mcfetch.mcfetch_exceptions import MCFetchException
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.version_fetcher import VersionFetcher

app = typer.Typer(
    name="mcfetch",
    help="Download a game version's jar and libraries into the local cache",
    add_completion=False,
)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS.get(verbosity, logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def main(
    version: Optional[str] = typer.Option(
        None,
        "--version",
        help="Codename for the wanted version (e.g., release, snapshot, 1.16.4, 20w51a) [default: release]",
    ),
    server: Optional[bool] = typer.Option(
        None,
        "--server/--client",
        help="Download the server jar instead of the client jar",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        envvar="MCFETCH_ROOT",
        help="Cache root directory [default: <user config dir>/minecraft]",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="TOML file with an [mcfetch] table",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    ),
) -> None:
    """
    Resolve VERSION against the version catalog and download what it needs.
    """
    _configure_logging(verbosity)

    try:
        config = MCFetchConfig.from_toml(config_file) if config_file is not None else MCFetchConfig()
        config = config.merged(version=version, server=server, root_path=root)
        fetcher = VersionFetcher.create(config, MCFetchLogger())
        try:
            result = fetcher.fetch()
        finally:
            fetcher.close()
    except MCFetchException as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    summary = result.summary
    typer.echo(
        f"{result.version_id} ({result.platform_tag}) in {result.version_dir}: "
        f"{summary['completed']} downloaded, {summary['skipped']} already present, {summary['failed']} failed"
    )


if __name__ == "__main__":
    app()
