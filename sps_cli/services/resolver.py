"""Round resolution for Stone Paper Scissors.

Stone beats Scissors, Scissors beats Paper, Paper beats Stone and identical
moves tie. The rule is written out as a total table over all nine pairs.
"""

from sps_cli.models.base import Move, RoundOutcome

RULES: dict[tuple[Move, Move], RoundOutcome] = {
    (Move.STONE, Move.STONE): RoundOutcome.TIE,
    (Move.STONE, Move.PAPER): RoundOutcome.COMPUTER_WIN,
    (Move.STONE, Move.SCISSORS): RoundOutcome.PLAYER_WIN,
    (Move.PAPER, Move.STONE): RoundOutcome.PLAYER_WIN,
    (Move.PAPER, Move.PAPER): RoundOutcome.TIE,
    (Move.PAPER, Move.SCISSORS): RoundOutcome.COMPUTER_WIN,
    (Move.SCISSORS, Move.STONE): RoundOutcome.COMPUTER_WIN,
    (Move.SCISSORS, Move.PAPER): RoundOutcome.PLAYER_WIN,
    (Move.SCISSORS, Move.SCISSORS): RoundOutcome.TIE,
}


def resolve(player: Move, computer: Move) -> RoundOutcome:
    """Return the outcome of a round from the player's side."""
    return RULES[(player, computer)]


def rule_table() -> list[tuple[Move, Move, RoundOutcome]]:
    """Return every (player, computer, outcome) row in move order."""
    return [(player, computer, resolve(player, computer)) for player in Move for computer in Move]
