"""Rules command for the Stone Paper Scissors CLI."""

import click
from tabulate import tabulate

from sps_cli.models.base import RoundOutcome
from sps_cli.services.resolver import rule_table
from sps_cli.utils.rich_utils import console, print_info, print_section_header

OUTCOME_LABELS: dict[RoundOutcome, str] = {
    RoundOutcome.PLAYER_WIN: "You win",
    RoundOutcome.COMPUTER_WIN: "Computer wins",
    RoundOutcome.TIE: "Tie",
}


@click.command("rules")
def rules_cli() -> None:
    """Show how every pair of moves is decided."""
    print_section_header("Round Rules")
    console.print()

    table_data = [
        [player.value.title(), computer.value.title(), OUTCOME_LABELS[outcome]]
        for player, computer, outcome in rule_table()
    ]
    headers = ["You", "Computer", "Result"]
    console.print(tabulate(table_data, headers=headers, tablefmt="simple"), markup=False, highlight=False)
    console.print()
    print_info("The first side to win a majority of the rounds takes the match")
