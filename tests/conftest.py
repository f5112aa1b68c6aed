"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from fastcsv2json.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["-d", "pipe"], input_data="a|b\\n1|2\\n")
        result = invoke(["-i", "in.csv", "-o", "out.json"])

    ``result.stdout`` holds only the JSON; diagnostics go to stderr and
    show up in ``result.output``.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def people_csv(test_data):
    """Provide path to people.csv test file."""
    return test_data / "people.csv"


@pytest.fixture
def people_psv(test_data):
    """Provide path to pipe-separated people.psv test file."""
    return test_data / "people.psv"
