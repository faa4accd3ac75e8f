"""Tests for CLI interface."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from notify_relay.app.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup() -> Generator[MagicMock, None, None]:
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("notify_relay.app.cli.configure_logging") as mock_configure:
        yield mock_configure


def parse_lines(output: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    def test_cli_help_command(self, runner: CliRunner) -> None:
        """Test CLI help lists the commands and options."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Notify Relay" in result.output
        assert "--config" in result.output
        assert "--log-level" in result.output
        assert "send" in result.output
        assert "status" in result.output

    def test_cli_version_command(self, runner: CliRunner) -> None:
        """Test CLI version command displays correctly."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "version" in result.output.lower()

    def test_log_level_passed_to_logging(self, runner: CliRunner, no_logging_setup: MagicMock) -> None:
        """Test the log level override reaches logging setup."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--log-level", "debug", "status", "abc"])

        assert result.exit_code == 1
        no_logging_setup.assert_called_once_with(log_level="DEBUG", log_file=None)

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        """Test an unknown log level is rejected."""
        result = runner.invoke(cli, ["--log-level", "loud", "status", "abc"])

        assert result.exit_code == 2
        assert "Invalid log level" in result.output


class TestCLIConfiguration:
    """Test configuration handling."""

    def test_config_must_be_yaml(self, runner: CliRunner) -> None:
        """Test non-YAML configuration paths are rejected."""
        with runner.isolated_filesystem():
            _ = Path("relay.json").write_text("{}")
            result = runner.invoke(cli, ["--config", "relay.json", "status", "abc"])

        assert result.exit_code == 2
        assert "must be YAML" in result.output

    def test_invalid_config_reports_hint(self, runner: CliRunner) -> None:
        """Test validation failures print the error and a hint."""
        with runner.isolated_filesystem():
            _ = Path("relay.yaml").write_text("queue:\n  concurrency: 0\n")
            result = runner.invoke(cli, ["-c", "relay.yaml", "status", "abc"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert "queue.concurrency" in result.output

    def test_missing_config_file(self, runner: CliRunner) -> None:
        """Test an explicit missing file is a configuration error."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["-c", "absent.yaml", "status", "abc"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestSendCommand:
    """Test the send command."""

    def test_send_sms_in_dev_mode(self, runner: CliRunner) -> None:
        """Test an SMS job is queued, processed and reported."""
        payload = json.dumps({"to": "+35799999999", "message": "hello"})

        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["send", "sms", "--payload", payload])

        assert result.exit_code == 0
        queued, final = parse_lines(result.output)
        assert queued["status"] == "in queue"
        assert queued["position"] == 1
        assert isinstance(queued["id"], str)
        assert final["completed"] is True
        assert final["data"] == {"message": "DEV LOG: SMS to +35799999999 - hello"}

    def test_send_without_wait(self, runner: CliRunner) -> None:
        """Test --no-wait prints only the queue entry."""
        payload = json.dumps({"chatId": 1, "message": "hi"})

        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["send", "telegram", "-p", payload, "--no-wait"])

        assert result.exit_code == 0
        lines = parse_lines(result.output)
        assert len(lines) == 1
        assert lines[0]["status"] == "in queue"

    def test_send_to_unknown_service(self, runner: CliRunner) -> None:
        """Test an unknown service ends in a failed record."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["send", "fax", "-p", "{}"])

        assert result.exit_code == 0
        final = parse_lines(result.output)[-1]
        assert final["failed"] is True
        assert final["error"] == "Service 'fax' is not registered"

    def test_send_rejects_invalid_json(self, runner: CliRunner) -> None:
        """Test a malformed payload is a usage error."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["send", "sms", "-p", "{not json"])

        assert result.exit_code == 2
        assert "Payload is not valid JSON" in result.output


class TestStatusCommand:
    """Test the status command."""

    def test_unknown_job(self, runner: CliRunner) -> None:
        """Test an id without a record reports not found."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["status", "3f0c2a8e"])

        assert result.exit_code == 1
        assert "Service not found." in result.output

    def test_known_job(self, runner: CliRunner) -> None:
        """Test a stored record is printed as JSON."""
        record = {"data": "ok", "completed": True, "failed": False, "error": None, "position": None, "timestamp": 1}

        with runner.isolated_filesystem():
            with patch("notify_relay.app.cli._status", AsyncMock(return_value=record)):
                result = runner.invoke(cli, ["status", "3f0c2a8e"])

        assert result.exit_code == 0
        assert parse_lines(result.output) == [record]


class TestCommandHelp:
    """Test command help describes in-process behavior."""

    def test_send_help_explains_no_wait(self, runner: CliRunner) -> None:
        """Test --no-wait is documented as only omitting the final record."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["send", "--help"])

        assert result.exit_code == 0
        assert "processed before exit either way" in " ".join(result.output.split())

    def test_status_help_mentions_redis(self, runner: CliRunner) -> None:
        """Test status help points at the redis store backend."""
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["status", "--help"])

        assert result.exit_code == 0
        assert "redis" in result.output
