"""Computer opponent for Stone Paper Scissors."""

import random
import time
from loguru import logger
from sps_cli.models.base import Move

# Die faces 1..3 map onto the moves in this order
MOVE_BY_NUMBER: dict[int, Move] = {1: Move.STONE, 2: Move.PAPER, 3: Move.SCISSORS}


class RandomOpponent:
    """Computer player drawing uniformly random moves.

    The generator is created once per opponent and reused for every round, so a
    seeded opponent replays the same sequence of moves.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        """Initialize the opponent.

        Args:
            seed: Seed for a new generator. The current time is used when None.
            rng: Existing generator to draw from. Takes precedence over ``seed``.
        """
        if rng is None:
            if seed is None:
                seed = time.time_ns()
            logger.debug(f"Seeding opponent with {seed}")
            rng = random.Random(seed)
        self.rng = rng

    def random_move(self) -> Move:
        """Draw the computer's move for a round."""
        return MOVE_BY_NUMBER[self.rng.randint(1, 3)]
