"""Response models for the Stone Paper Scissors CLI.

This module defines the result models returned by the input collector, the
command executor, the result announcer and the match runner.
"""

from .base import ActionResult, BaseSPSModel, Move
from pydantic import Field


class MoveInputResult(ActionResult):
    """Result of prompting the player for a move.

    ``success`` is False only when every attempt was used up on invalid input.
    """

    move: Move | None = Field(default=None, description="Parsed move when successful")
    attempts: int = Field(default=0, ge=0, description="Prompts shown before a valid move or giving up")


class BestOfResult(ActionResult):
    """Result of reading the best-of round count."""

    best_of: int | None = Field(default=None, description="Validated best-of count")
    wins_needed: int | None = Field(default=None, description="Round wins required, (best_of + 1) // 2")


class CommandResult(BaseSPSModel):
    """Outcome of running an external command.

    A negative return code means the child was terminated by a signal, following
    the ``subprocess`` convention. ``error`` is set when the process could not be
    started at all, in which case ``returncode`` is None.
    """

    command: list[str] = Field(description="Argument list that was executed")
    returncode: int | None = Field(default=None, description="Exit status of the child process")
    stdout: str = Field(default="", description="Captured standard output")
    stderr: str = Field(default="", description="Captured standard error")
    error: str | None = Field(default=None, description="Reason the process could not be started")

    @property
    def spawned(self) -> bool:
        return self.error is None and self.returncode is not None

    @property
    def exited_normally(self) -> bool:
        return self.spawned and self.returncode >= 0  # type: ignore[operator]

    @property
    def signal(self) -> int | None:
        """Signal number that terminated the child, if any."""
        if self.spawned and self.returncode < 0:  # type: ignore[operator]
            return -self.returncode  # type: ignore[operator]
        return None

    @property
    def succeeded(self) -> bool:
        return self.spawned and self.returncode == 0


class AnnouncementResult(ActionResult):
    """Result of rendering the final banner."""

    banner_message: str = Field(description="Message handed to the banner renderer")
    exit_code: int = Field(default=0, description="Process exit code implied by the announcement")


class MatchResult(ActionResult):
    """Result of a complete match run."""

    exit_code: int = Field(description="Process exit code for the match")
    player_wins: int = Field(default=0, ge=0, description="Rounds won by the player")
    computer_wins: int = Field(default=0, ge=0, description="Rounds won by the computer")
    rounds_played: int = Field(default=0, ge=0, description="Rounds played, ties included")
    winner: str | None = Field(default=None, description="'player', 'computer' or None if the match was aborted")
