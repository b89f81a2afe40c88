"""Tests for main CLI entry point and application setup.

This module tests:
- Help and version display
- Configuration file loading
- Error handling at top level
"""

import logging

import click

from pagenav.cli.main import Context, cli, setup_logging


class TestCLIEntryPoint:
    """Test the main CLI entry point."""

    def test_cli_help_flag(self, cli_runner):
        """Test --help flag."""
        result = cli_runner.invoke(["--help"])

        assert result.exit_code == 0
        assert "Pagination and navigation engine" in result.output
        assert "browse" in result.output
        assert "navigate" in result.output
        assert "pages" in result.output

    def test_cli_version_flag(self, cli_runner):
        """Test --version flag."""
        result = cli_runner.invoke(["--version"])

        assert result.exit_code == 0
        assert "pagenav version 0.1.0" in result.output

    def test_cli_with_config_file(self, cli_runner, mock_config_file):
        """Settings from --config are used by commands."""
        result = cli_runner.invoke(["--config", str(mock_config_file), "pages", "12"])

        assert result.exit_code == 0
        assert "1 2 3" in result.output

    def test_cli_with_invalid_config_file(self, cli_runner, tmp_path):
        """Invalid YAML is reported and exits with an error."""
        bad_config = tmp_path / "bad_config.yaml"
        bad_config.write_text("invalid: yaml: content:")

        result = cli_runner.invoke(["--config", str(bad_config), "pages", "5"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_cli_with_out_of_range_setting(self, cli_runner, tmp_path):
        bad_config = tmp_path / "zero.yaml"
        bad_config.write_text("page_length: 0\n")

        result = cli_runner.invoke(["--config", str(bad_config), "pages", "5"])

        assert result.exit_code == 1
        assert "page_length" in result.output

    def test_cli_context_initialization(self, cli_runner):
        """Commands receive the shared context."""

        @cli.command(name="probe-context")
        @click.pass_context
        def probe_context(ctx):
            assert isinstance(ctx.obj, Context)
            assert ctx.obj.console is not None
            assert ctx.obj.event_bus is not None
            assert ctx.obj.settings.page_length == 10
            click.echo("Context OK")

        try:
            result = cli_runner.invoke(["probe-context"])
        finally:
            cli.commands.pop("probe-context", None)

        assert result.exit_code == 0
        assert "Context OK" in result.output

    def test_unexpected_error_is_reported(self, cli_runner):
        """Engine errors become an error line and exit code 1."""
        result = cli_runner.invoke(["navigate", "0", "next"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_debug_reraises(self, cli_runner):
        """--debug lets the exception through."""
        result = cli_runner.invoke(["--debug", "navigate", "0", "next"])

        assert result.exit_code != 0
        assert result.exception is not None


class TestLogging:
    def test_setup_logging_levels(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        setup_logging(quiet=True)
        setup_logging(verbose=True)
        setup_logging()

        assert [c["level"] for c in calls] == [
            logging.WARNING,
            logging.DEBUG,
            logging.INFO,
        ]
