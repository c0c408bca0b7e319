"""Match orchestration for the Stone Paper Scissors CLI.

The match runner wires the input collector, the computer opponent, the
presenter and the result announcer together: read the name and round count,
play rounds until one side has enough wins, then announce the result.
"""

from loguru import logger

from sps_cli.models.match import MatchConfig, MatchState
from sps_cli.models.responses import MatchResult
from sps_cli.services.announcer import ResultAnnouncer
from sps_cli.services.input_collector import InputCollector
from sps_cli.services.opponent import RandomOpponent
from sps_cli.services.presentation import Presenter
from sps_cli.services.resolver import resolve
from sps_cli.utils.rich_utils import print_plain


class MatchRunner:
    """Runs a single best-of-N match against the computer."""

    def __init__(
        self,
        collector: InputCollector,
        opponent: RandomOpponent,
        presenter: Presenter,
        announcer: ResultAnnouncer,
    ):
        self.collector = collector
        self.opponent = opponent
        self.presenter = presenter
        self.announcer = announcer

    def _abort(self, message: str, state: MatchState | None = None) -> MatchResult:
        """Print ``message`` and end the match with exit code 1."""
        print_plain(message, self.collector.console)
        self.collector.console.print()
        return MatchResult(
            success=False,
            message=message,
            exit_code=1,
            player_wins=state.player_wins if state else 0,
            computer_wins=state.computer_wins if state else 0,
            rounds_played=state.rounds_played if state else 0,
        )

    def play(self) -> MatchResult:
        """Play a full match.

        Returns:
            MatchResult: Final tally and the exit code for the process.
        """
        name = self.collector.read_player_name()

        best_of = self.collector.read_best_of()
        if not best_of.success or best_of.best_of is None:
            return self._abort(best_of.message)

        config = MatchConfig(player_name=name, best_of=best_of.best_of)
        state = MatchState.for_config(config)
        logger.debug(f"Match started: best of {config.best_of}, {config.wins_needed} wins needed")

        while not state.is_over:
            choice = self.collector.read_player_move()
            if not choice.success or choice.move is None:
                return self._abort(choice.message, state)

            computer_move = self.opponent.random_move()
            outcome = resolve(choice.move, computer_move)
            state.record(outcome)
            logger.debug(f"Round {state.rounds_played}: {choice.move} vs {computer_move} -> {outcome}")

            self.presenter.render_moves(choice.move, computer_move)

            if not state.is_over:
                self.presenter.render_scoreboard(config.player_name, state.player_wins, state.computer_wins)

        logger.debug(f"Match over after {state.rounds_played} rounds: {state.player_wins}-{state.computer_wins}")
        self.presenter.render_suspense()

        announcement = self.announcer.announce(self.announcer.build_message(config, state))
        return MatchResult(
            success=announcement.success,
            message=announcement.message,
            exit_code=announcement.exit_code,
            player_wins=state.player_wins,
            computer_wins=state.computer_wins,
            rounds_played=state.rounds_played,
            winner=state.winner,
        )
