"""Stone Paper Scissors CLI.

A best-of-N terminal match against the computer with ASCII-art rounds and a
figlet banner for the final result.
"""

__version__ = "1.0.0"
