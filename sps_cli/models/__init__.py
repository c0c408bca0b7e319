"""Models package for the Stone Paper Scissors CLI.

This package provides data models for the Stone Paper Scissors CLI.
"""

# Base models
from .base import ActionResult, BaseSPSModel, Move, RoundOutcome

# Match models
from .match import MAX_PLAYER_NAME, MatchConfig, MatchState

# Configuration models
from .config import GameSettings

# Response models
from .responses import AnnouncementResult, BestOfResult, CommandResult, MatchResult, MoveInputResult

__all__ = [
    # Base
    "ActionResult",
    "BaseSPSModel",
    "Move",
    "RoundOutcome",
    # Match
    "MAX_PLAYER_NAME",
    "MatchConfig",
    "MatchState",
    # Configuration
    "GameSettings",
    # Responses
    "AnnouncementResult",
    "BestOfResult",
    "CommandResult",
    "MatchResult",
    "MoveInputResult",
]
