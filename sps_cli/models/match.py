"""Match models for the Stone Paper Scissors CLI.

A match is configured once (player name and best-of count) and then tracked
round by round until one side reaches the required number of wins.
"""

from .base import BaseSPSModel, RoundOutcome
from pydantic import ConfigDict, Field, field_validator

MAX_PLAYER_NAME = 19


class MatchConfig(BaseSPSModel):
    """Immutable configuration of a single match."""

    model_config = ConfigDict(frozen=True)

    player_name: str = Field(max_length=MAX_PLAYER_NAME, description="Player name as typed, truncated")
    best_of: int = Field(description="Total number of rounds the match is played over (positive odd integer)")

    @field_validator("best_of")
    @classmethod
    def validate_best_of(cls, value: int) -> int:
        """Only positive odd counts can produce a decisive match."""
        if value < 0 or value % 2 == 0:
            raise ValueError("best_of must be a positive odd integer")
        return value

    @property
    def wins_needed(self) -> int:
        """Number of round wins that decides the match."""
        return (self.best_of + 1) // 2


class MatchState(BaseSPSModel):
    """Running tally of a match.

    Exactly one counter is incremented per decided round; ties only advance
    ``rounds_played``.
    """

    player_wins: int = Field(default=0, ge=0, description="Rounds won by the player")
    computer_wins: int = Field(default=0, ge=0, description="Rounds won by the computer")
    wins_needed: int = Field(gt=0, description="Round wins required to take the match")
    rounds_played: int = Field(default=0, ge=0, description="Rounds played so far, ties included")

    @classmethod
    def for_config(cls, config: MatchConfig) -> "MatchState":
        """Create a fresh state for a match configuration."""
        return cls(wins_needed=config.wins_needed)

    @property
    def is_over(self) -> bool:
        return self.player_wins >= self.wins_needed or self.computer_wins >= self.wins_needed

    @property
    def winner(self) -> str | None:
        """Return "player", "computer" or None while the match is still running."""
        if self.player_wins >= self.wins_needed:
            return "player"
        if self.computer_wins >= self.wins_needed:
            return "computer"
        return None

    def record(self, outcome: RoundOutcome) -> None:
        """Record the outcome of one round.

        Raises:
            ValueError: If the match has already been decided.
        """
        if self.is_over:
            raise ValueError("Cannot record a round after the match is over")

        if outcome == RoundOutcome.PLAYER_WIN:
            self.player_wins += 1
        elif outcome == RoundOutcome.COMPUTER_WIN:
            self.computer_wins += 1
        self.rounds_played += 1
