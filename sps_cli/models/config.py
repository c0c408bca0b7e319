"""Configuration models for the Stone Paper Scissors CLI.

Defaults reproduce the constants of the classic terminal game: a 180 column
figlet banner (three 60 column art blocks side by side), 100 ms line pacing,
five move attempts and the input buffer sizes for names, moves and the final
message.
"""

from .base import BaseSPSModel
from pydantic import Field


class GameSettings(BaseSPSModel):
    """Tunable settings for a match."""

    banner_tool: str = Field(default="figlet", min_length=1, description="Banner renderer executable")
    banner_width: int = Field(default=180, gt=0, description="Output width passed to the banner renderer with -w")

    line_delay: float = Field(default=0.1, ge=0, description="Pause after each printed art line, in seconds")
    pause_delay: float = Field(default=0.2, ge=0, description="Pause before and after the suspense dots, in seconds")
    suspense_delay: float = Field(default=0.5, ge=0, description="Pause after each suspense dot line, in seconds")

    max_move_attempts: int = Field(default=5, gt=0, description="Move prompts before giving up")
    max_name_length: int = Field(default=19, gt=0, le=19, description="Characters kept from the player name")
    max_move_length: int = Field(default=8, ge=8, description="Characters kept from a move entry")
    max_message_length: int = Field(default=119, gt=0, description="Characters kept from the banner message")

    seed: int | None = Field(default=None, description="Opponent seed; the wall clock is used when unset")

    def without_delays(self) -> "GameSettings":
        """Return a copy with every cosmetic pause disabled."""
        return self.model_copy(update={"line_delay": 0.0, "pause_delay": 0.0, "suspense_delay": 0.0})
