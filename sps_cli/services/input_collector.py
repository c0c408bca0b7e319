"""Player input collection for the Stone Paper Scissors CLI.

This module reads the player name, the best-of round count and the per-round
moves. Every read consumes one whole line, so characters beyond a length limit
are dropped together with the line instead of leaking into the next prompt.
"""

import sys
from typing import TextIO
from loguru import logger
from rich.console import Console

from sps_cli.models.base import Move
from sps_cli.models.config import GameSettings
from sps_cli.models.responses import BestOfResult, MoveInputResult
from sps_cli.utils.rich_utils import console as default_console, print_plain
from sps_cli.utils.validation import parse_leading_integer, validate_best_of

NAME_PROMPT = "Player name: "
BEST_OF_PROMPT = "Best of: "
MOVE_PROMPT = "Stone, Paper or Scissors: "

INVALID_INPUT_MESSAGE = "Invalid input..."
INVALID_CHOICE_MESSAGE = "Invalid Choice..."
TOO_MANY_INVALID_MESSAGE = "Too many invalid inputs..."


class InputCollector:
    """Prompts the player and sanitizes what they type."""

    def __init__(
        self, settings: GameSettings | None = None, console: Console | None = None, stream: TextIO | None = None
    ):
        """Initialize the input collector.

        Args:
            settings: Length limits and attempt count. Defaults are used when None.
            console: Console prompts are printed to. Defaults to the global console.
            stream: Stream lines are read from. Standard input is used when None,
                looked up on every read so a replaced ``sys.stdin`` is honoured.
        """
        self.settings = settings or GameSettings()
        self.console = console or default_console
        self.stream = stream

    def _read_line(self, prompt: str, limit: int | None = None) -> str:
        """Prompt for and read one line without its line break.

        Returns an empty string at end of input.
        """
        stream = self.stream or sys.stdin
        raw = self.console.input(prompt, markup=False, emoji=False, stream=stream)
        if raw.endswith("\n"):
            raw = raw[:-1]
        if limit is not None and len(raw) > limit:
            logger.debug(f"Input truncated from {len(raw)} to {limit} characters")
            raw = raw[:limit]
        return raw

    def read_player_name(self) -> str:
        """Read the player name, truncated to ``max_name_length`` characters.

        The name is not retried or validated; an empty name is accepted.
        """
        self.console.print()
        name = self._read_line(NAME_PROMPT, self.settings.max_name_length)
        logger.debug(f"Player name: {name!r}")
        return name

    def read_best_of(self) -> BestOfResult:
        """Read and validate the best-of round count.

        Returns:
            BestOfResult: The count and the wins it takes, or the reason it was rejected.
        """
        self.console.print()
        raw = self._read_line(BEST_OF_PROMPT)

        value = parse_leading_integer(raw)
        if value is None:
            logger.debug(f"Best-of input {raw!r} is not an integer")
            return BestOfResult(success=False, message=INVALID_INPUT_MESSAGE)

        is_valid, error_msg = validate_best_of(value)
        if not is_valid:
            logger.debug(f"Best-of value {value} rejected")
            return BestOfResult(success=False, message=error_msg, best_of=value)

        wins_needed = (value + 1) // 2
        logger.debug(f"Best of {value}: {wins_needed} wins needed")
        return BestOfResult(success=True, best_of=value, wins_needed=wins_needed)

    def read_player_move(self) -> MoveInputResult:
        """Prompt for a move until a valid one is typed or the attempts run out.

        Matching is case-insensitive against "stone", "paper" and "scissors".

        Returns:
            MoveInputResult: The move, or a failed result after ``max_move_attempts``
            invalid entries. The caller decides how to end the match.
        """
        attempts = self.settings.max_move_attempts
        for attempt in range(1, attempts + 1):
            self.console.print()
            raw = self._read_line(MOVE_PROMPT, self.settings.max_move_length)
            self.console.print()

            choice = raw.lower()
            try:
                move = Move(choice)
            except ValueError:
                logger.debug(f"Invalid move {raw!r} (attempt {attempt}/{attempts})")
                print_plain(INVALID_CHOICE_MESSAGE, self.console)
                continue

            return MoveInputResult(success=True, move=move, attempts=attempt)

        return MoveInputResult(success=False, message=TOO_MANY_INVALID_MESSAGE, attempts=attempts)
