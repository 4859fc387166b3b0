"""Pytest configuration and shared fixtures for font-config-info tests."""

import pytest
from click.testing import CliRunner
from helpers import make_context

from font_config_info.context import ReportContext


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def report_ctx() -> ReportContext:
    """A ReportContext wired to fake backends with typical desktop values."""
    return make_context()
