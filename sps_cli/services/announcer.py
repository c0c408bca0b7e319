"""Final result announcement for the Stone Paper Scissors CLI.

This module formats the final score and hands it to an external banner renderer
(figlet by default), the single external collaborator of the game. Any failure
to start the renderer, a non-zero exit status or a signal is reported on
standard error and turned into exit code 1.
"""

from loguru import logger
from rich.console import Console

from sps_cli.models.config import GameSettings
from sps_cli.models.match import MatchConfig, MatchState
from sps_cli.models.responses import AnnouncementResult
from sps_cli.utils.command_executor import execute_command
from sps_cli.utils.rich_utils import console as default_console, print_error, print_plain

COMPUTER_NAME = "Computer"


class ResultAnnouncer:
    """Builds the result message and renders it with the banner tool."""

    def __init__(self, settings: GameSettings | None = None, console: Console | None = None):
        """Initialize the announcer.

        Args:
            settings: Banner tool, width and message limit. Defaults are used when None.
            console: Console the captured banner is printed to.
        """
        self.settings = settings or GameSettings()
        self.console = console or default_console

    def build_message(self, config: MatchConfig, state: MatchState) -> str:
        """Format the final score and winner, truncated to ``max_message_length``."""
        winner = config.player_name if state.winner == "player" else COMPUTER_NAME
        message = (
            f"{config.player_name}  :  {state.player_wins}        |        "
            f"{COMPUTER_NAME}  :  {state.computer_wins}\n{winner}   wins !"
        )
        return message[: self.settings.max_message_length]

    def build_command(self, message: str) -> list[str]:
        return [self.settings.banner_tool, "-w", str(self.settings.banner_width), message]

    def announce(self, message: str) -> AnnouncementResult:
        """Render ``message`` with the banner tool and wait for it to finish.

        Returns:
            AnnouncementResult: Success with exit code 0, or the failure with exit code 1.
        """
        result = execute_command(self.build_command(message), log_output=False)

        if not result.spawned:
            error = f"Failed to start banner renderer '{self.settings.banner_tool}'"
            logger.error(f"{error}: {result.error}")
            print_error(error, result.error, stderr=True)
            return AnnouncementResult(success=False, message=error, banner_message=message, exit_code=1)

        if not result.exited_normally:
            error = f"Banner renderer terminated abnormally (signal {result.signal})"
            logger.error(error)
            print_error(error, stderr=True)
            return AnnouncementResult(success=False, message=error, banner_message=message, exit_code=1)

        if result.returncode != 0:
            error = f"Banner renderer failed with status {result.returncode}"
            logger.error(f"{error}: {result.stderr.strip()}")
            print_error(error, result.stderr.strip() or None, stderr=True)
            return AnnouncementResult(success=False, message=error, banner_message=message, exit_code=1)

        print_plain(result.stdout, self.console, end="")
        return AnnouncementResult(success=True, message="Result announced", banner_message=message, exit_code=0)
