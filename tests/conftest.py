"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the autodoc test suite.
"""

import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.fixtures.actions import ACTION_YAML, README

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (use the filesystem)"
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests (full command line runs)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="autodoc-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def action_file(temp_dir: Path) -> Path:
    """Provide an action.yml with inputs and outputs."""
    path = temp_dir / "action.yml"
    path.write_text(ACTION_YAML)
    return path


@pytest.fixture
def readme_file(temp_dir: Path) -> Path:
    """Provide a README.md with Inputs and Outputs sections."""
    path = temp_dir / "README.md"
    path.write_text(README)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep AUTODOC_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("AUTODOC_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("NO_COLOR", "1")


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)
