"""
Module: test_review_dialog.py

Author: Michael Economou
Date: 2026-10-02

Tests for the review window.
"""

import pytest

pytest.importorskip("PyQt5")

from doppel.core.errors import DiffError  # noqa: E402
from doppel.models.file_group import FileGroup  # noqa: E402
from doppel.ui.dialogs.review_dialog import (  # noqa: E402
    HINT_SELECT_FILES,
    HINT_TOO_MANY,
    MODE_UNIFIED,
    ReviewDialog,
)

pytestmark = pytest.mark.gui


class FakeDiffExecutor:
    """Returns canned diff output and records calls."""

    def __init__(self, identical=False, error=None):
        self.identical = identical
        self.error = error
        self.calls = []

    def diff_side_by_side(self, file1, file2):
        if self.error:
            raise self.error
        self.calls.append(("side_by_side", file1, file2))
        return f"side {file1} | {file2}"

    def diff_unified(self, file1, file2):
        if self.error:
            raise self.error
        self.calls.append(("unified", file1, file2))
        return f"unified {file1} {file2}"

    def files_identical(self, file1, file2):
        return self.identical


@pytest.fixture
def groups():
    return [
        FileGroup(["/data/report.txt", "/data/report-1.txt", "/data/report-2.txt"], 3),
        FileGroup(["/data/image.png", "/data/image-1.png"], 3),
    ]


@pytest.fixture
def make_dialog(qtbot):
    def _make(groups, executor=None):
        dialog = ReviewDialog(groups, executor or FakeDiffExecutor())
        qtbot.addWidget(dialog)
        return dialog

    return _make


class TestReviewDialogGroups:
    """Test the group list."""

    def test_groups_listed(self, make_dialog, groups):
        """Test one entry per group with the first one selected."""
        dialog = make_dialog(groups)

        assert dialog.group_list.count() == 2
        assert dialog.header_label.text() == "Found 2 group(s) of similar files"
        assert dialog.current_group is groups[0]
        assert dialog.file_list.count() == 3
        assert dialog.file_list.item(0).text() == "report.txt"

    def test_group_entry_text(self, make_dialog, groups):
        """Test that an entry shows number, size and member names."""
        dialog = make_dialog(groups)

        text = dialog.group_list.item(1).text()

        assert text.startswith("Group 2: 2 files")
        assert "image.png, image-1.png" in text

    def test_switch_group(self, make_dialog, groups):
        """Test that selecting another group shows its members."""
        dialog = make_dialog(groups)

        dialog.select_group(1)

        assert dialog.current_group is groups[1]
        assert dialog.file_list.count() == 2
        assert dialog.diff_text() == ""

    def test_no_groups(self, make_dialog):
        """Test the empty state."""
        dialog = make_dialog([])

        assert dialog.header_label.text() == "No groups of similar files found."
        assert dialog.current_group is None
        assert dialog.file_list.count() == 0


class TestReviewDialogDiff:
    """Test comparing selected files."""

    def test_two_files_selected(self, make_dialog, groups):
        """Test that selecting two files shows the side-by-side diff."""
        executor = FakeDiffExecutor()
        dialog = make_dialog(groups, executor)

        dialog.select_files(0, 2)

        assert dialog.diff_text() == "side /data/report.txt | /data/report-2.txt"
        assert dialog.status_label.text() == "report.txt vs report-2.txt: different"
        assert executor.calls == [("side_by_side", "/data/report.txt", "/data/report-2.txt")]

    def test_identical_status(self, make_dialog, groups):
        """Test the status for identical files."""
        dialog = make_dialog(groups, FakeDiffExecutor(identical=True))

        dialog.select_files(0, 1)

        assert dialog.status_label.text().endswith(": identical")

    def test_unified_mode(self, make_dialog, groups):
        """Test switching the diff mode re-runs the comparison."""
        executor = FakeDiffExecutor()
        dialog = make_dialog(groups, executor)
        dialog.select_files(0, 1)

        dialog.mode_combo.setCurrentText(MODE_UNIFIED)

        assert dialog.diff_text() == "unified /data/report.txt /data/report-1.txt"
        assert executor.calls[-1][0] == "unified"

    def test_one_file_selected(self, make_dialog, groups):
        """Test that one file alone does not run a diff."""
        executor = FakeDiffExecutor()
        dialog = make_dialog(groups, executor)

        dialog.file_list.item(0).setSelected(True)

        assert executor.calls == []
        assert dialog.status_label.text() == HINT_SELECT_FILES

    def test_too_many_selected(self, make_dialog, groups):
        """Test the hint when more than two files are selected."""
        dialog = make_dialog(groups)
        dialog.select_files(0, 1)

        dialog.file_list.item(2).setSelected(True)

        assert dialog.status_label.text() == HINT_TOO_MANY
        assert dialog.diff_text() == ""

    def test_diff_error_shown(self, make_dialog, groups):
        """Test that a failing diff is reported in the pane."""
        dialog = make_dialog(groups, FakeDiffExecutor(error=DiffError("diff missing")))

        dialog.select_files(0, 1)

        assert dialog.diff_text() == "Error generating diff: diff missing"
        assert dialog.status_label.text() == "Diff failed"
