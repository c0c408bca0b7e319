"""Unit tests for CLI commands."""

import io
import json
import pytest
import subprocess
import sys
from click.testing import CliRunner
from sps_cli.cli import cli, handle_exception, main
from sps_cli.models.base import Move
from unittest.mock import patch


def completed(returncode: int, stdout: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class TestCLI:
    """Test cases for the command group."""

    def test_cli_help(self):
        """Test CLI help command."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Stone Paper Scissors" in result.output
        assert "play" in result.output
        assert "rules" in result.output

    def test_cli_version(self):
        """Test CLI version command."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "Version 1.0.0" in result.output

    def test_cli_with_invalid_option(self):
        """Test CLI with invalid option."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--invalid-option"])
        assert result.exit_code != 0

    def test_rules_command(self):
        """Test the rules table."""
        runner = CliRunner()
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert "Computer wins" in result.output
        assert "Scissors" in result.output
        assert result.output.count("Tie") == 3


@patch("sps_cli.commands.play.validate_banner_tool", return_value=True)
class TestPlayCommand:
    """Test cases for the play command."""

    @patch("sps_cli.utils.command_executor.subprocess.run")
    def test_full_match(self, mock_run, mock_validate):
        """Test a seeded best of 1 ending in a rendered banner."""
        mock_run.return_value = completed(0, stdout="*** BANNER ***\n")
        runner = CliRunner()

        with patch("sps_cli.commands.play.RandomOpponent.random_move", return_value=Move.SCISSORS):
            result = runner.invoke(cli, ["play", "--no-delay"], input="Ada\n1\nstone\n")

        assert result.exit_code == 0
        assert "*** BANNER ***" in result.output
        command = mock_run.call_args.args[0]
        assert command[:3] == ["figlet", "-w", "180"]
        assert command[3].endswith("Ada   wins !")

    def test_invalid_best_of_exits_1(self, mock_validate):
        """Test that an even round count exits with status 1."""
        runner = CliRunner()
        result = runner.invoke(cli, ["play", "--no-delay"], input="Ada\n4\n")
        assert result.exit_code == 1
        assert "Only positive odd integers are valid..." in result.output

    def test_too_many_invalid_moves_exits_1(self, mock_validate):
        """Test that five invalid moves exit with status 1."""
        runner = CliRunner()
        result = runner.invoke(cli, ["play", "--no-delay"], input="Ada\n3\nrock\nrock\nrock\nrock\nrock\n")
        assert result.exit_code == 1
        assert result.output.count("Invalid Choice...") == 5
        assert "Too many invalid inputs..." in result.output

    @patch("sps_cli.utils.command_executor.subprocess.run")
    def test_banner_options(self, mock_run, mock_validate):
        """Test that banner options reach the renderer."""
        mock_run.return_value = completed(0)
        runner = CliRunner()

        with patch("sps_cli.commands.play.RandomOpponent.random_move", return_value=Move.PAPER):
            result = runner.invoke(
                cli,
                ["play", "--no-delay", "--banner-tool", "toilet", "--banner-width", "90", "--seed", "1"],
                input="Ada\n1\nscissors\n",
            )

        assert result.exit_code == 0
        assert mock_run.call_args.args[0][:3] == ["toilet", "-w", "90"]

    @patch("sps_cli.utils.command_executor.subprocess.run")
    def test_banner_failure_exits_1(self, mock_run, mock_validate):
        """Test that a failing renderer exits with status 1."""
        mock_run.return_value = completed(1)
        runner = CliRunner()

        with patch("sps_cli.commands.play.RandomOpponent.random_move", return_value=Move.SCISSORS):
            result = runner.invoke(cli, ["play", "--no-delay"], input="Ada\n1\nstone\n")

        assert result.exit_code == 1

    def test_missing_banner_tool_warns(self, mock_validate):
        """Test the warning shown when the renderer is not on PATH."""
        mock_validate.return_value = False
        runner = CliRunner()
        result = runner.invoke(cli, ["play", "--no-delay"], input="Ada\n2\n")
        assert "not found on PATH" in result.output
        assert result.exit_code == 1

    def test_config_file(self, mock_validate, tmp_path):
        """Test that a settings file is honoured and validated."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_move_attempts": 2}), encoding="utf-8")
        runner = CliRunner()

        result = runner.invoke(cli, ["--config", str(path), "play", "--no-delay"], input="Ada\n3\nx\nx\n")

        assert result.exit_code == 1
        assert result.output.count("Invalid Choice...") == 2

    def test_bad_config_file(self, mock_validate, tmp_path):
        """Test that an unreadable settings file stops before the match."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "missing.json"), "play"])
        assert result.exit_code == 1
        assert "Settings file not found" in result.output


@pytest.fixture
def run_main(monkeypatch):
    """Run the console-script entry point with the given arguments and stdin."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    def _run(args: list[str], stdin: str = "") -> int:
        monkeypatch.setattr(sys, "argv", ["sps", *args])
        monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
        with pytest.raises(SystemExit) as exc_info:
            main()
        return exc_info.value.code

    return _run


@patch("sps_cli.commands.play.validate_banner_tool", return_value=True)
class TestMain:
    """Test cases for the console-script entry point."""

    def test_ctrl_c_prints_cancel_message(self, mock_validate, run_main, capsys):
        """Test that Ctrl-C during a match is reported and exits with status 1."""
        with patch("sps_cli.commands.play.InputCollector.read_player_name", side_effect=KeyboardInterrupt):
            exit_code = run_main(["play", "--no-delay"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Game cancelled by user" in captured.err
        assert "Aborted!" not in captured.err

    def test_match_exit_code_is_returned(self, mock_validate, run_main, capsys):
        """Test that the match's exit code becomes the process exit code."""
        exit_code = run_main(["play", "--no-delay"], stdin="Ada\n4\n")

        assert exit_code == 1
        assert "Only positive odd integers are valid..." in capsys.readouterr().out

    @patch("sps_cli.utils.command_executor.subprocess.run")
    def test_finished_match_exits_0(self, mock_run, mock_validate, run_main, capsys):
        """Test a full match through the entry point."""
        mock_run.return_value = completed(0, stdout="*** BANNER ***\n")

        with patch("sps_cli.commands.play.RandomOpponent.random_move", return_value=Move.SCISSORS):
            exit_code = run_main(["play", "--no-delay"], stdin="Ada\n1\nstone\n")

        assert exit_code == 0
        assert "*** BANNER ***" in capsys.readouterr().out

    def test_click_exception_is_shown(self, mock_validate, run_main, capsys, tmp_path):
        """Test that a settings error is printed and exits with status 1."""
        exit_code = run_main(["--config", str(tmp_path / "missing.json"), "play"])

        assert exit_code == 1
        assert "Settings file not found" in capsys.readouterr().err

    def test_usage_error_exits_2(self, mock_validate, run_main, capsys):
        """Test that an unknown option is a usage error."""
        exit_code = run_main(["--invalid-option"])

        assert exit_code == 2
        assert "No such option" in capsys.readouterr().err

    def test_rules_exits_0(self, mock_validate, run_main, capsys):
        """Test a command that completes normally."""
        assert run_main(["rules"]) == 0
        assert "Computer wins" in capsys.readouterr().out


class TestHandleException:
    """Test cases for the global exception hook."""

    def test_unexpected_error_exits_1(self, monkeypatch, capsys):
        """Test that an unexpected error is summarized without a traceback."""
        monkeypatch.delenv("SPS_VERBOSE", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            handle_exception(RuntimeError, RuntimeError("boom"), None)

        assert exc_info.value.code == 1
        assert "An unexpected error occurred" in capsys.readouterr().err
