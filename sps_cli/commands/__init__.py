"""Click commands for the Stone Paper Scissors CLI."""
