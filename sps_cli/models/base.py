"""Base models for the Stone Paper Scissors CLI.

This module defines the base model class and the enums shared by every other
model: the three moves and the three possible round outcomes.
"""

from enum import StrEnum
from pydantic import BaseModel, ConfigDict, Field


class Move(StrEnum):
    """A move in the game.

    Values are the lowercase words the player types at the move prompt.
    """

    STONE = "stone"
    PAPER = "paper"
    SCISSORS = "scissors"


class RoundOutcome(StrEnum):
    """Outcome of a single round, seen from the player's side."""

    PLAYER_WIN = "player_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"


class BaseSPSModel(BaseModel):
    """Base model with common configuration for all CLI models.

    Input is kept exactly as typed (no whitespace stripping) because names and
    moves are compared and printed verbatim.
    """

    model_config = ConfigDict(
        extra="forbid",  # Forbid extra attributes
        validate_default=True,  # Validate default values
        validate_assignment=True,  # Validate attribute assignments
        use_enum_values=False,  # Keep Move/RoundOutcome members on the model
    )


class ActionResult(BaseSPSModel):
    """Base model for service action results."""

    success: bool = Field(description="Whether the action was successful")
    message: str = Field(default="", description="Status message")
