"""Unit tests for the computer opponent."""

import random
from collections import Counter
from sps_cli.models.base import Move
from sps_cli.services.opponent import MOVE_BY_NUMBER, RandomOpponent
from unittest.mock import Mock, patch


class TestRandomOpponent:
    """Test cases for RandomOpponent."""

    def test_moves_are_roughly_uniform(self):
        """Test that each move shows up about a third of the time."""
        opponent = RandomOpponent(seed=1234)
        samples = 3000
        counts = Counter(opponent.random_move() for _ in range(samples))

        assert set(counts) == set(Move)
        for move in Move:
            assert abs(counts[move] / samples - 1 / 3) < 0.05

    def test_same_seed_same_sequence(self):
        """Test that a seeded opponent is reproducible."""
        first = RandomOpponent(seed=7)
        second = RandomOpponent(seed=7)
        assert [first.random_move() for _ in range(50)] == [second.random_move() for _ in range(50)]

    def test_number_mapping(self):
        """Test that die faces 1..3 map to stone, paper and scissors."""
        rng = Mock(spec=random.Random)
        rng.randint.side_effect = [1, 2, 3]
        opponent = RandomOpponent(rng=rng)

        assert [opponent.random_move() for _ in range(3)] == [Move.STONE, Move.PAPER, Move.SCISSORS]
        rng.randint.assert_called_with(1, 3)
        assert set(MOVE_BY_NUMBER.values()) == set(Move)

    def test_unseeded_uses_clock(self):
        """Test that the generator is seeded from the clock when no seed is given."""
        with patch("sps_cli.services.opponent.time.time_ns", return_value=99) as mock_clock:
            opponent = RandomOpponent()
            mock_clock.assert_called_once()

        reference = RandomOpponent(seed=99)
        assert [opponent.random_move() for _ in range(20)] == [reference.random_move() for _ in range(20)]

    def test_injected_generator_is_used(self):
        """Test that an explicit generator takes precedence over a seed."""
        rng = random.Random(5)
        opponent = RandomOpponent(seed=1, rng=rng)
        assert opponent.rng is rng
