"""Rich utilities for consistent CLI formatting and styling.

This module provides the shared Rich consoles and the message helpers used by
the commands and services. Game output (prompts, art, scoreboard) goes to the
standard output console; subprocess failures go to the standard error console.
"""

from rich.console import Console
from rich.text import Text
from sps_cli.static.banner import banner_ascii


# Global console instances for consistent output
console = Console()
err_console = Console(stderr=True)


def _target(stderr: bool) -> Console:
    return err_console if stderr else console


def print_error(message: str, details: str | None = None, stderr: bool = False) -> None:
    """Print an error message with consistent styling."""
    target = _target(stderr)
    text = Text("❌ ", style="red") + Text(message, style="red bold")
    target.print(text)
    if details:
        target.print(f"   {details}", style="dim red", markup=False)


def print_warning(message: str, details: str | None = None) -> None:
    """Print a warning message with consistent styling."""
    text = Text("⚠️  ", style="yellow") + Text(message, style="yellow bold")
    console.print(text)
    if details:
        console.print(f"   {details}", style="dim yellow", markup=False)


def print_info(message: str, details: str | None = None) -> None:
    """Print an info message with consistent styling."""
    text = Text("💡 ", style="blue") + Text(message, style="blue bold")
    console.print(text)
    if details:
        console.print(f"   {details}", style="dim", markup=False)


def print_plain(line: str, target: Console | None = None, end: str = "\n") -> None:
    """Print a line verbatim: no markup, emoji codes, highlighting or wrapping.

    ASCII art and user-typed names must reach the terminal untouched.
    """
    (target or console).print(line, markup=False, emoji=False, highlight=False, soft_wrap=True, end=end)


def print_section_header(title: str, emoji: str = "📋") -> None:
    """Print a section header with consistent styling."""
    text = Text(f"{emoji} ", style="bright_blue") + Text(title, style="bright_blue bold")
    console.print()
    console.print(text)


def print_ascii_banner(subtitle: str | None = None) -> None:
    """Print the Stone Paper Scissors ASCII title banner.

    The plain title is printed instead when banner.txt is missing.
    """
    console.print()
    console.print(Text(banner_ascii, style="bright_blue"), soft_wrap=True)
    if subtitle:
        console.print(f"[bright_blue bold]   {subtitle}[/bright_blue bold]")
    console.print()
