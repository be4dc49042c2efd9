"""
Module: test_external_tools.py

Author: Michael Economou
Date: 2026-10-02

Tests for locating the diff program.
"""

from unittest.mock import patch

import pytest

from doppel.utils.shared.external_tools import (
    ToolName,
    get_system_tool_path,
    get_tool_path,
    resolve_diff_tool,
)


class TestToolLookup:
    """Test PATH lookup with shutil.which mocked."""

    def test_found_on_path(self):
        """Test that a tool on PATH is returned."""
        with patch("shutil.which", return_value="/usr/bin/diff") as which:
            assert get_system_tool_path(ToolName.DIFF) == "/usr/bin/diff"

        which.assert_called_once_with("diff")

    def test_not_found(self):
        """Test that a missing tool raises with an install hint."""
        with patch("shutil.which", return_value=None):
            assert get_system_tool_path(ToolName.DIFF) is None
            with pytest.raises(FileNotFoundError, match="diff not found"):
                get_tool_path(ToolName.DIFF)


class TestResolveDiffTool:
    """Test diff command resolution."""

    def test_override_used_as_given(self):
        """Test that a user override skips the PATH lookup."""
        with patch("shutil.which") as which:
            assert resolve_diff_tool("colordiff") == "colordiff"

        which.assert_not_called()

    def test_system_diff(self):
        """Test fallback to the system diff."""
        with patch("shutil.which", return_value="/usr/bin/diff"):
            assert resolve_diff_tool() == "/usr/bin/diff"

    def test_system_diff_missing(self):
        """Test that a missing system diff is reported."""
        with patch("shutil.which", return_value=None):
            with pytest.raises(FileNotFoundError):
                resolve_diff_tool(None)
