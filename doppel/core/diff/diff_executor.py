"""Module: diff_executor.py

Author: Michael Economou
Date: 2026-10-02

Runs a system diff command to compare two files.

diff exits with 0 when files match, 1 when they differ and 2 on trouble.
Side-by-side and unified output is returned whatever the exit code, since
diff prints its own complaint in that case; only a command that cannot be
started raises DiffError. files_identical needs a clean answer, so any exit
code other than 0 or 1 raises there.
"""

import subprocess

from doppel.config import DEFAULT_DIFF_TOOL, SIDE_BY_SIDE_WIDTH
from doppel.core.errors import DiffError
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1


class DiffExecutor:
    """Executes diff commands to compare files.

    Attributes:
        diff_cmd: Command used for every comparison

    """

    def __init__(self, diff_cmd: str | None = None, width: int = SIDE_BY_SIDE_WIDTH):
        """Initialize executor.

        Args:
            diff_cmd: Diff command; defaults to DEFAULT_DIFF_TOOL when empty
            width: Output width for side-by-side diffs

        """
        self.diff_cmd = diff_cmd or DEFAULT_DIFF_TOOL
        self.width = width

    def diff_side_by_side(self, file1: str, file2: str) -> str:
        """Return the side-by-side diff of two files."""
        return self._run_for_output(["-y", f"--width={self.width}", file1, file2])

    def diff_unified(self, file1: str, file2: str) -> str:
        """Return the unified diff of two files."""
        return self._run_for_output(["-u", file1, file2])

    def files_identical(self, file1: str, file2: str) -> bool:
        """Check whether two files have identical content.

        Raises:
            DiffError: If the command cannot run or reports an error

        """
        completed = self._run(["-q", file1, file2])
        if completed.returncode == EXIT_IDENTICAL:
            return True
        if completed.returncode == EXIT_DIFFERENT:
            return False
        raise DiffError(
            f"diff command failed with exit code {completed.returncode}: "
            f"{completed.stdout.strip()}"
        )

    def _run_for_output(self, args: list[str]) -> str:
        return self._run(args).stdout

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        command = [self.diff_cmd, *args]
        logger.debug("[DiffExecutor] Running: %s", " ".join(command), extra={"dev_only": True})
        try:
            return subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            logger.error("[DiffExecutor] Could not execute %s: %s", self.diff_cmd, e)
            raise DiffError(f"failed to execute diff command {self.diff_cmd!r}: {e}") from e
