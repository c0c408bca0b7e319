"""
Stone Paper Scissors CLI - Main entry point.

A best-of-N terminal match against the computer, with ASCII-art rounds and a
figlet banner for the final result.
"""

import click
import sys
from loguru import logger
from pathlib import Path
from types import TracebackType
from typing import Any
from sps_cli.commands.play import play_cli
from sps_cli.commands.rules import rules_cli
from sps_cli.utils.rich_utils import print_ascii_banner, console

DEFAULT_LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
VERBOSE_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
CANCELLED_MESSAGE = "⚠️  Game cancelled by user"

# Configure logging
logger.remove()  # Remove default handler
logger.add(sys.stderr, format=DEFAULT_LOG_FORMAT, level="INFO")


def print_version(ctx: click.Context, _: Any, value: bool) -> None:
    """Print version information and exit."""
    if not value or ctx.resilient_parsing:
        return

    from sps_cli import __version__

    print_ascii_banner()
    console.print(f"[bright_green bold]Version {__version__}[/bright_green bold]")
    ctx.exit()


@click.group(context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.option(
    "--version", is_flag=True, callback=print_version, expose_value=False, is_eager=True, help="Show version and exit"
)
@click.option("--config", help="Path to a JSON settings file", envvar="SPS_CONFIG")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging", envvar="SPS_VERBOSE")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error log output")
@click.pass_context
def cli(ctx: click.Context, config: str | None = None, verbose: bool = False, quiet: bool = False) -> None:
    """
    ✊ Stone Paper Scissors - a best-of-N match against the computer

    \b
    HOW IT WORKS:
    • Enter your name and an odd number of rounds (best of 1, 3, 5, ...)
    • Each round, type Stone, Paper or Scissors (any capitalization)
    • Stone beats Scissors, Scissors beats Paper, Paper beats Stone
    • First to win a majority of the rounds takes the match

    \b
    COMMANDS:
    • play        Play a match
    • rules       Show the outcome of every pair of moves

    The final result is drawn with figlet, which must be on your PATH.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Configure logging based on flags
    if verbose:
        logger.remove()
        logger.add(sys.stderr, format=VERBOSE_LOG_FORMAT, level="DEBUG")
        ctx.obj["verbose"] = True
    elif quiet:
        logger.remove()
        logger.add(sys.stderr, level="ERROR")
        ctx.obj["quiet"] = True

    # Store config path if provided
    if config:
        ctx.obj["config_path"] = str(Path(config))


def register_commands() -> None:
    """Register all commands with the main CLI."""
    cli.add_command(play_cli, name="play")
    cli.add_command(rules_cli, name="rules")


# Global error handler
def handle_exception(
    exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None
) -> None:
    """Global exception handler for errors that escape the command group."""
    logger.error(f"Unexpected error: {exc_value}")
    # Show full traceback in verbose mode (check environment variable)
    import os

    if os.getenv("SPS_VERBOSE"):
        import traceback

        traceback.print_exception(exc_type, exc_value, exc_traceback)
    else:
        click.echo("❌ An unexpected error occurred. Use --verbose for details.", err=True)
    sys.exit(1)


register_commands()


def main() -> None:
    # Set up global exception handling
    sys.excepthook = handle_exception

    # Click turns Ctrl-C into Abort and reports usage errors itself only in standalone mode
    try:
        exit_code = cli(standalone_mode=False)
    except (click.Abort, KeyboardInterrupt):
        click.echo(CANCELLED_MESSAGE, err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    sys.exit(exit_code if isinstance(exit_code, int) else 0)


if __name__ == "__main__":
    main()
