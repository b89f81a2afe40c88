"""Pytest configuration and fixtures for CLI tests."""

import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner(tmp_path, monkeypatch):
    """Click CLI test runner invoking the pagenav group.

    Runs from an empty directory so no project config file is picked up.
    """
    from pagenav.cli.main import cli

    monkeypatch.chdir(tmp_path)

    class PagenavCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            if isinstance(args, list):
                return super().invoke(cli, args, **kwargs)
            return super().invoke(args, **kwargs)

    return PagenavCliRunner()


@pytest.fixture
def items_file(tmp_path):
    """JSON array file with 12 items."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"id": i, "name": f"item {i}"} for i in range(12)]))
    return path


@pytest.fixture
def mock_config_file(tmp_path):
    """Valid YAML config file."""
    path = tmp_path / "custom.yaml"
    path.write_text("page_length: 5\nnavigator: sequential\n")
    return path
