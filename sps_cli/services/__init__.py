"""Service layer for the Stone Paper Scissors CLI."""
