"""Round presentation for the Stone Paper Scissors CLI.

Each round is drawn as a triptych: the player's move, the VS separator and the
computer's move printed side by side, one combined line at a time with a short
pause between lines.
"""

import time
from collections.abc import Callable, Sequence
from rich.console import Console

from sps_cli.models.base import Move
from sps_cli.models.config import GameSettings
from sps_cli.static.art import VS, art_for
from sps_cli.utils.rich_utils import console as default_console, print_plain


class Presenter:
    """Prints rounds, the running score and the suspense before the result."""

    def __init__(
        self,
        settings: GameSettings | None = None,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the presenter.

        Args:
            settings: Delay settings. Defaults are used when None.
            console: Console to print to. Defaults to the global console.
            sleep: Function used for pauses; replaced in tests.
        """
        self.settings = settings or GameSettings()
        self.console = console or default_console
        self._sleep = sleep

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)

    def render_round(self, left: Sequence[str], center: Sequence[str], right: Sequence[str]) -> None:
        """Print three art blocks side by side.

        Raises:
            ValueError: If the blocks are not all the same height.
        """
        height = len(left)
        if len(center) != height or len(right) != height:
            raise ValueError(
                f"Art blocks must share the same height, got {len(left)}, {len(center)} and {len(right)}"
            )

        for left_line, center_line, right_line in zip(left, center, right):
            print_plain(left_line + center_line + right_line, self.console)
            self._pause(self.settings.line_delay)

    def render_moves(self, player: Move, computer: Move) -> None:
        """Print the triptych for a player move against a computer move."""
        self.render_round(art_for(player), VS, art_for(computer))

    def render_scoreboard(self, name: str, player_wins: int, computer_wins: int) -> None:
        """Print the running tally on its own line."""
        self.console.print()
        self._pause(self.settings.line_delay)
        print_plain(f"{name} : {player_wins} | Computer : {computer_wins}", self.console)
        self._pause(self.settings.line_delay)

    def render_suspense(self) -> None:
        """Print the dots shown while the final result is being "worked out"."""
        self.console.print()
        self._pause(self.settings.pause_delay)
        for dots in (".", "..", "..."):
            print_plain(dots, self.console)
            self._pause(self.settings.suspense_delay)
        self.console.print()
        self._pause(self.settings.pause_delay)
