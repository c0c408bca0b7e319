"""Play command for the Stone Paper Scissors CLI.

This module wires the resolved settings into the match services and runs one
interactive best-of-N match against the computer.
"""

import click
from loguru import logger

from sps_cli.services.announcer import ResultAnnouncer
from sps_cli.services.config import SettingsError, SettingsManager
from sps_cli.services.game import MatchRunner
from sps_cli.services.input_collector import InputCollector
from sps_cli.services.opponent import RandomOpponent
from sps_cli.services.presentation import Presenter
from sps_cli.utils.rich_utils import print_ascii_banner, print_warning
from sps_cli.utils.validation import validate_banner_tool


@click.command("play")
@click.option("--seed", type=int, envvar="SPS_SEED", help="Seed for the computer's moves (default: current time)")
@click.option("--banner-tool", envvar="SPS_BANNER_TOOL", help="Banner renderer for the final result (default: figlet)")
@click.option("--banner-width", type=int, envvar="SPS_BANNER_WIDTH", help="Width passed to the banner renderer")
@click.option("--no-delay", is_flag=True, envvar="SPS_NO_DELAY", help="Disable the retro line-by-line pacing")
@click.pass_context
def play_cli(
    ctx: click.Context,
    seed: int | None = None,
    banner_tool: str | None = None,
    banner_width: int | None = None,
    no_delay: bool = False,
) -> None:
    """Play a best-of-N match against the computer.

    You will be asked for your name and an odd number of rounds, then for
    Stone, Paper or Scissors each round. The first side to win a majority of
    the rounds takes the match.

    Examples:
      sps play                       # Classic game
      sps play --no-delay            # Skip the line-by-line pacing
      sps play --seed 42             # Reproducible computer moves
    """
    obj = ctx.ensure_object(dict)

    try:
        manager = SettingsManager(obj.get("config_path"))
        settings = manager.apply_overrides(
            no_delay=no_delay, seed=seed, banner_tool=banner_tool, banner_width=banner_width
        )
    except SettingsError as e:
        raise click.ClickException(str(e)) from e

    print_ascii_banner("Best-of-N against the computer")

    if not validate_banner_tool(settings.banner_tool):
        print_warning(
            f"Banner renderer '{settings.banner_tool}' not found on PATH",
            "The final result cannot be displayed without it",
        )

    runner = MatchRunner(
        collector=InputCollector(settings),
        opponent=RandomOpponent(seed=settings.seed),
        presenter=Presenter(settings),
        announcer=ResultAnnouncer(settings),
    )
    result = runner.play()
    logger.debug(f"Match finished with exit code {result.exit_code}: {result.message}")

    ctx.exit(result.exit_code)
