"""Main CLI entry point for scrapbox-to-esa command.

This module provides the Typer application that serves as the entry point
for the scrapbox-to-esa command-line tool. A single command takes the esa
team name and the Scrapbox export path as positional arguments.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.errors import UsageError
from src.cli.migrate_command import MigrateCommand
from src.cli.models import ExitCode
from src.cli.output import OutputHandler

__version__ = "0.1.0"

app = typer.Typer(
    name="scrapbox-to-esa",
    help="""Publish the pages of a Scrapbox export as esa posts.

USAGE:
  scrapbox-to-esa TEAM EXPORT_PATH

The esa access token is read from the ESA_ACCESS_TOKEN environment variable
(or a .env file in the current directory).""",
    add_completion=False,
    rich_markup_mode=None,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"scrapbox-to-esa_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _validate_arguments(team: str, export_path: str) -> None:
    """Reject blank positional arguments.

    Raises:
        UsageError: If either argument is empty or whitespace
    """
    missing = []
    if not team.strip():
        missing.append("TEAM")
    if not export_path.strip():
        missing.append("EXPORT_PATH")
    if missing:
        raise UsageError(f"Missing required argument(s): {', '.join(missing)}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"scrapbox-to-esa version {__version__}")
        raise typer.Exit()


@app.command()
def main_command(
    team: str = typer.Argument(
        ...,
        help="esa team name (the <team> in <team>.esa.io)",
        metavar="TEAM",
    ),
    export_path: str = typer.Argument(
        ...,
        help="Path to the Scrapbox export JSON file",
        metavar="EXPORT_PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Publish every page of a Scrapbox export as a new esa post.

    \b
    EXAMPLE:
      ESA_ACCESS_TOKEN=xxxx scrapbox-to-esa myteam ./myproject.json
    """
    try:
        _validate_arguments(team, export_path)
    except UsageError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Usage: scrapbox-to-esa TEAM EXPORT_PATH", err=True)
        raise typer.Exit(ExitCode.USAGE_ERROR)

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        exit_code = MigrateCommand(output_handler=output).run(
            team=team.strip(),
            export_path=export_path,
        )
    except Exception as e:
        logger.exception("Unexpected error during migration")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
