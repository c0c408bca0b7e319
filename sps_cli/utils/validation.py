"""Validation utilities for the Stone Paper Scissors CLI."""

import re
import shutil

# Leading integer as accepted by C's "%i": decimal, 0x hexadecimal or 0 octal
_INTEGER_PATTERN: re.Pattern = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def validate_banner_tool(tool: str) -> bool:
    """Check if the banner renderer is available on the command search path.

    Returns:
        bool: True if the tool can be found, False otherwise.
    """
    return shutil.which(tool) is not None


def parse_leading_integer(raw: str) -> int | None:
    """Parse the integer at the start of ``raw``.

    Leading whitespace and a sign are allowed, ``0x`` selects hexadecimal and a
    leading ``0`` selects octal. Characters after the number are ignored.

    Args:
        raw: Text typed by the player.

    Returns:
        int | None: The parsed integer, or None if ``raw`` does not start with one.
    """
    match = _INTEGER_PATTERN.match(raw)
    if not match:
        return None

    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)

    return -value if sign == "-" else value


def validate_best_of(value: int) -> tuple[bool, str]:
    """Validate a best-of round count.

    The count must be a positive odd integer so the match cannot end level.

    Args:
        value: Round count to validate.

    Returns:
        Tuple[bool, str]: Success status and error message if any.
    """
    if value % 2 == 0 or value < 0:
        return False, "Only positive odd integers are valid..."

    return True, ""
