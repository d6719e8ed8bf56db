"""Shared pytest fixtures for cloudcore tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.models import Customer, make_customer


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo root handler and level changes made by configure_logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger("cloudcore")
    package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory with no cloudcore env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLOUDCORE_CONFIG", raising=False)
    monkeypatch.delenv("CLOUDCORE_VERBOSE", raising=False)
    monkeypatch.delenv("CLOUDCORE_JSON_OUTPUT", raising=False)
    return tmp_path


@pytest.fixture
def customer() -> Customer:
    """A fully populated customer with nested address and tag list."""
    return make_customer()


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the invoice template and model fixtures."""
    return Path(__file__).parent / "fixtures"
