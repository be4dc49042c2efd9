"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-02

Global pytest configuration and fixtures for the doppel test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import re

# Qt must not try to open a display when tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from doppel.utils.logging.logger_factory import LoggerFactory


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add custom markers if not already added via pyproject.toml
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")
    config.addinivalue_line("markers", "local_only: mark test as local environment only")


def pytest_collection_modifyitems(session, config, items):
    """Modify test collection to handle CI environment."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ

    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")

        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)
            if "local_only" in item.keywords:
                item.add_marker(skip_local)


@pytest.fixture(scope="session")
def ci_environment():
    """Fixture to detect CI environment."""
    return "CI" in os.environ or "GITHUB_ACTIONS" in os.environ


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep log files written by the CLI out of the real home directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    return config_home


@pytest.fixture
def fresh_logger_factory():
    """Empty the logger cache before and after a test."""
    LoggerFactory._loggers.clear()
    yield LoggerFactory
    LoggerFactory._loggers.clear()


@pytest.fixture
def version_pattern():
    """The "hyphen + 1-2 digits" suffix pattern, anchored as the CLI anchors it."""
    return re.compile(r"-\d{1,2}$")


@pytest.fixture
def make_files(tmp_path):
    """Create files with optional content in a temporary directory.

    Usage:
        paths = make_files({"a.txt": "hello", "b.txt": ""})
    """

    def _make(contents: dict[str, str], directory=None):
        target = directory or tmp_path
        target.mkdir(parents=True, exist_ok=True)
        paths = {}
        for name, text in contents.items():
            path = target / name
            path.write_text(text, encoding="utf-8")
            paths[name] = str(path)
        return paths

    return _make
