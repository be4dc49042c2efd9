"""Module: external_tools.py

Author: Michael Economou
Date: 2026-10-02

External tool detection and path resolution.

doppel compares files with a system diff program. This module locates it:
- a user-supplied command is used as given
- otherwise the tool is searched for on the system PATH

Usage:
    from doppel.utils.shared.external_tools import get_tool_path, ToolName

    # Get diff path (raises FileNotFoundError if not found)
    diff = get_tool_path(ToolName.DIFF)

    # Honour a user override, else look on PATH
    diff = resolve_diff_tool(override)
"""

import platform
import shutil
from enum import Enum

from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ToolName(str, Enum):
    """Supported external tools."""

    DIFF = "diff"


_DOWNLOAD_HINTS = {
    ToolName.DIFF: {
        "Windows": "Install GNU diffutils (e.g. from Git for Windows or MSYS2) or pass --diff-tool.",
        "Darwin": "diff ships with the Xcode command line tools: xcode-select --install",
        "Linux": "Install the diffutils package with your distribution's package manager.",
    },
}


def get_system_tool_path(tool_name: ToolName) -> str | None:
    """Find tool in system PATH.

    Args:
        tool_name: Tool to locate

    Returns:
        Path string to the tool or None if not found

    """
    system_path = shutil.which(tool_name.value)
    if system_path:
        logger.debug("[ExternalTools] Found system %s at: %s", tool_name.value, system_path)
    else:
        logger.debug("[ExternalTools] %s not found in system PATH", tool_name.value)
    return system_path


def get_tool_path(tool_name: ToolName) -> str:
    """Get the path to an external tool.

    Args:
        tool_name: Tool to locate

    Returns:
        Path string to the tool

    Raises:
        FileNotFoundError: If tool not found on PATH

    """
    system_path = get_system_tool_path(tool_name)
    if system_path:
        return system_path

    raise FileNotFoundError(f"{tool_name.value} not found. {_get_install_hint(tool_name)}")


def resolve_diff_tool(override: str | None = None) -> str:
    """Return the diff command to run.

    Args:
        override: Command supplied by the user, used as given when set

    Returns:
        The override, or the path of the system diff

    Raises:
        FileNotFoundError: If no override is given and diff is not on PATH

    """
    if override:
        logger.info("[ExternalTools] Using diff override: %s", override)
        return override
    return get_tool_path(ToolName.DIFF)


def _get_install_hint(tool_name: ToolName) -> str:
    """Get a platform-specific hint on installing a tool."""
    hints = _DOWNLOAD_HINTS.get(tool_name, {})
    return hints.get(platform.system(), "Please install it and make sure it is on PATH.")
