"""Pytest configuration and fixtures for CLI tests."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner that invokes the sitasi group by default."""

    class SitasiCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            from sitasi.cli.main import cli

            if isinstance(args, list):
                return super().invoke(cli, args, **kwargs)
            return super().invoke(args, **kwargs)

    return SitasiCliRunner()


@pytest.fixture
def mock_clipboard():
    """Patch pyperclip so no real clipboard is touched."""
    with patch("sitasi.citations.clipboard.pyperclip.copy") as mock_copy:
        yield mock_copy


@pytest.fixture
def basic_args():
    """Options describing the Fiqh Dasar record."""
    return [
        "--title",
        "Fiqh Dasar",
        "--author",
        "Ahmad Sanusi",
        "--year",
        "2020",
        "--publisher",
        "An-Nur Press",
    ]


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(content: str):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    return _write
