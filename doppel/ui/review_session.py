"""Module: review_session.py

Author: Michael Economou
Date: 2026-10-02

Interactive terminal review of file groups.

For each group the session lists the members, numbers every pair of files and
asks which pair to diff:
- "<n>": compare pair number n
- "<a>-<b>": compare file a with file b (either order)
- "n": next group
- "q": stop the session
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from doppel.core.diff.diff_executor import DiffExecutor
from doppel.core.errors import DiffError
from doppel.models.file_entry import base_filename
from doppel.models.file_group import FileGroup
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_FILE_NUMBERS = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")
_PAIR_NUMBER = re.compile(r"^\s*(\d+)\s*$")


class ReviewSession:
    """Walks the user through groups one at a time."""

    def __init__(
        self,
        groups: Sequence[FileGroup],
        diff_executor: DiffExecutor,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ):
        self.groups = list(groups)
        self.diff_executor = diff_executor
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def run(self) -> bool:
        """Review every group.

        Returns:
            True if all groups were visited, False if the user quit or input ended

        Raises:
            DiffError: If the diff command cannot be executed

        """
        if not self.groups:
            self._write("No groups of similar files found.\n")
            return True

        self._write(f"Found {len(self.groups)} group(s) of similar files.\n\n")

        for number, group in enumerate(self.groups, start=1):
            if not self.review_group(number, group):
                logger.info("[ReviewSession] Session ended at group %d", number)
                return False
        return True

    def review_group(self, number: int, group: FileGroup) -> bool:
        """Prompt for comparisons within one group until the user moves on.

        Returns:
            True to continue with the next group, False to stop the session

        """
        while True:
            self._print_group(number, group)

            pairs = group.pairs()
            if not pairs:
                self._write("No pairs to compare in this group.\n\n")
                return True

            self._print_pairs(group, pairs)
            answer = self._prompt(
                f"Enter pair number (1-{len(pairs)}), file numbers (e.g., '2-3'), "
                "'n' for next group, 'q' to quit: "
            )
            if answer is None or answer.lower() == "q":
                return False
            if answer.lower() == "n":
                return True

            selected = self._parse_selection(answer, group, pairs)
            if selected is None:
                continue

            self.show_diff(*selected)

            if self._prompt("\nPress Enter to continue...") is None:
                return False
            response = self._prompt("View another pair in this group? (y/n): ")
            if response is None:
                return False
            if response.lower() != "y":
                return True

    def show_diff(self, file1: str, file2: str) -> None:
        """Print the side-by-side diff of two files."""
        self._write("\n--- Comparing ---\n")
        self._write(f"File 1: {base_filename(file1)}\n")
        self._write(f"File 2: {base_filename(file2)}\n")
        self._write("---\n\n")

        try:
            diff = self.diff_executor.diff_side_by_side(file1, file2)
        except DiffError as e:
            raise DiffError(f"failed to generate diff: {e}") from e

        self._write(f"{diff}\n")

    def _parse_selection(
        self, answer: str, group: FileGroup, pairs: list[tuple[str, str]]
    ) -> tuple[str, str] | None:
        """Turn an answer into the two files to compare, or report why not."""
        file_numbers = _FILE_NUMBERS.match(answer)
        if file_numbers:
            first, second = (int(value) for value in file_numbers.groups())
            size = group.file_count
            if not (1 <= first <= size and 1 <= second <= size) or first == second:
                self._write(
                    "Invalid file numbers. Please enter two different numbers "
                    f"between 1 and {size}.\n\n"
                )
                return None
            return group.files[first - 1], group.files[second - 1]

        pair_number = _PAIR_NUMBER.match(answer)
        if pair_number and 1 <= int(pair_number.group(1)) <= len(pairs):
            return pairs[int(pair_number.group(1)) - 1]

        self._write(
            f"Invalid input. Please enter a pair number (1-{len(pairs)}) "
            "or file numbers (e.g., '2-3').\n\n"
        )
        return None

    def _print_group(self, number: int, group: FileGroup) -> None:
        self._write(f"=== Group {number}: {group.file_count} files ===\n")
        for index, filename in enumerate(group.filenames, start=1):
            self._write(f"  {index}. {filename}\n")
        self._write("\n")

    def _print_pairs(self, group: FileGroup, pairs: list[tuple[str, str]]) -> None:
        self._write("Available pairs to compare:\n")
        for index, (file1, file2) in enumerate(pairs, start=1):
            self._write(
                f"  {index}. File {group.index_of(file1) + 1} vs File {group.index_of(file2) + 1} "
                f"({base_filename(file1)} vs {base_filename(file2)})\n"
            )
        self._write("\n")

    def _prompt(self, text: str) -> str | None:
        """Write a prompt and read one line; None at end of input."""
        self._write(text)
        self.output.flush()
        line = self.input_stream.readline()
        if not line:
            return None
        return line.strip()

    def _write(self, text: str) -> None:
        self.output.write(text)


def print_groups(groups: Sequence[FileGroup], output: TextIO | None = None) -> None:
    """Print groups and their members without interaction."""
    output = output if output is not None else sys.stdout
    output.write(f"Found {len(groups)} group(s) of similar files.\n\n")
    for number, group in enumerate(groups, start=1):
        output.write(f"=== Group {number}: {group.file_count} files ===\n")
        for file_path in group.files:
            output.write(f"  {file_path}\n")
        output.write("\n")
