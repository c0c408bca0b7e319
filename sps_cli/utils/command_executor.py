"""Command execution utilities with security validation for the Stone Paper Scissors CLI.

This module provides a centralized utility for executing external commands. The
only external collaborator of the game is the banner renderer, so commands are
validated against an allowlist of banner tools and always run from an argument
list, never through a shell. Output is captured so it can be printed through
the game console.
"""

import os
import subprocess  # nosec: B404
from loguru import logger
from sps_cli.models.responses import CommandResult

# Executables (by basename) the CLI is allowed to spawn
ALLOWED_COMMANDS: frozenset[str] = frozenset({"figlet", "toilet"})


def execute_command(cmd: list[str], text: bool = True, log_cmd: bool = True, log_output: bool = True) -> CommandResult:
    """Execute a command and capture all output with security validation.

    The call blocks until the child process exits. Failure to start the process
    is reported through ``CommandResult.error`` rather than raised.

    Args:
        cmd: Command to execute as a list of arguments
        text: Whether to decode output as text (vs bytes)
        log_cmd: Whether to log the command being executed
        log_output: Whether to log command output

    Returns:
        CommandResult: Return code, captured stdout and stderr, or the spawn error.
    """
    if log_cmd:
        logger.debug(f"Executing: {' '.join(cmd)}")

    # Validate command for security
    is_valid, error_msg = _validate_command_security(cmd)
    if not is_valid:
        logger.warning(f"Command rejected by security validation: {error_msg}")
        return CommandResult(command=list(cmd), error=f"Command rejected: {error_msg}")

    try:
        result = subprocess.run(cmd, shell=False, check=False, text=text, capture_output=True)  # nosec: B603 inputs are validated
    except OSError as e:
        logger.error(f"Error executing command: {str(e)}")
        return CommandResult(command=list(cmd), error=str(e))

    stdout = result.stdout or ""
    stderr = result.stderr or ""
    if log_output:
        if result.returncode == 0:
            if stdout.strip():
                logger.debug(f"Command output: {stdout.strip()}")
        else:
            logger.error(f"Command failed with exit code {result.returncode}: {stderr.strip()}")

    return CommandResult(command=list(cmd), returncode=result.returncode, stdout=stdout, stderr=stderr)


def _validate_command_security(cmd: list[str]) -> tuple[bool, str]:
    """Validate a command before it is spawned.

    Only argument lists whose executable is a known banner renderer are accepted.
    Arguments are passed to the child verbatim without a shell, so the player's
    name may contain any characters.

    Args:
        cmd: Command to validate

    Returns:
        Tuple[bool, str]: (is_valid, error_message)
    """
    if not isinstance(cmd, list) or not cmd:
        return False, "Command must be a non-empty argument list"

    if not all(isinstance(arg, str) for arg in cmd):
        return False, "Command arguments must be strings"

    executable = os.path.basename(cmd[0])
    if executable not in ALLOWED_COMMANDS:
        return False, f"Command must start with one of: {', '.join(sorted(ALLOWED_COMMANDS))}"

    return True, ""
