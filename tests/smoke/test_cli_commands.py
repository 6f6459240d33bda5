"""
Smoke tests for CLI commands.

Runs each command through typer's CliRunner and checks the exit code and
the key lines of output. No server is started.
"""

import pytest
from typer.testing import CliRunner

from contextual_ai.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIHelp:
    """Tests for CLI help output."""

    def test_main_help(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for group in ("context", "personal", "adapt", "remote"):
            assert group in result.output

    @pytest.mark.parametrize("group", ["context", "personal", "adapt", "remote"])
    def test_group_help(self, runner, group):
        result = runner.invoke(app, [group, "--help"])

        assert result.exit_code == 0


class TestInfoCommand:
    def test_info(self, runner):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestAnalyzeCommands:
    def test_context_analyze_offline(self, runner):
        result = runner.invoke(app, ["context", "analyze", "--offline", "--speed", "slow"])

        assert result.exit_code == 0
        assert "offline_mode_required" in result.output
        assert "Optimize content for low bandwidth" in result.output

    def test_personal_analyze(self, runner):
        result = runner.invoke(app, ["personal", "analyze", "--hearing-impairment"])

        assert result.exit_code == 0
        assert "Provide captions and text alternatives" in result.output


class TestAdaptCommands:
    def test_compress_slow(self, runner):
        result = runner.invoke(app, ["adapt", "compress", "A. B. C. D. E.", "--bandwidth", "slow"])

        assert result.exit_code == 0
        assert "A. B. C..." in result.output

    def test_offline_high_priority(self, runner):
        result = runner.invoke(app, ["adapt", "offline", "Exam notes", "--priority", "high"])

        assert result.exit_code == 0
        assert "[OFFLINE-PRIORITY] Exam notes" in result.output
        assert "Sync required: True" in result.output

    def test_offline_stale_sync(self, runner):
        result = runner.invoke(app, ["adapt", "offline", "Notes", "--hours-since-sync", "48"])

        assert result.exit_code == 0
        assert "Sync required: True" in result.output

    def test_behavior(self, runner):
        result = runner.invoke(app, ["adapt", "behavior", "Fractions", "--pace", "slow"])

        assert result.exit_code == 0
        assert "[TEXT-FORMAT] [SLOW-PACED] Fractions" in result.output

    def test_invalid_bandwidth(self, runner):
        result = runner.invoke(app, ["adapt", "compress", "x", "--bandwidth", "warp"])

        assert result.exit_code == 1
        assert "Invalid input: bandwidth" in result.output


class TestRemoteCommands:
    def test_health_unreachable(self, runner):
        result = runner.invoke(app, ["remote", "health", "--url", "http://127.0.0.1:9/api"])

        assert result.exit_code == 1
        assert "API not available" in result.output
