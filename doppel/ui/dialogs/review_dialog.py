"""Module: review_dialog.py

Author: Michael Economou
Date: 2026-10-02

Window for browsing groups of similar files and diffing pairs of them.

Layout:
- Left: one entry per group (number, size, member filenames)
- Right: the members of the selected group; picking two of them runs the
  diff and shows it in a read-only monospace pane
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFontDatabase
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QComboBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from doppel.config import (
    DIFF_FONT_SIZE,
    GROUP_PANEL_WIDTH,
    REVIEW_WINDOW_MIN_HEIGHT,
    REVIEW_WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from doppel.core.diff.diff_executor import DiffExecutor
from doppel.core.errors import DiffError
from doppel.models.file_entry import base_filename
from doppel.models.file_group import FileGroup
from doppel.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

MODE_SIDE_BY_SIDE = "Side by side"
MODE_UNIFIED = "Unified"

HINT_SELECT_FILES = "Select two files to compare."
HINT_TOO_MANY = "Select exactly two files to compare."


class ReviewDialog(QDialog):
    """Group browser with an embedded diff view."""

    def __init__(
        self,
        groups: Sequence[FileGroup],
        diff_executor: DiffExecutor,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize dialog.

        Args:
            groups: Groups to review
            diff_executor: Executor used for every comparison
            parent: Parent widget

        """
        super().__init__(parent)
        self.groups = list(groups)
        self.diff_executor = diff_executor
        self._setup_ui()
        self._populate_groups()

    def _setup_ui(self) -> None:
        """Setup dialog UI."""
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(REVIEW_WINDOW_MIN_WIDTH)
        self.setMinimumHeight(REVIEW_WINDOW_MIN_HEIGHT)

        layout = QVBoxLayout(self)

        self.header_label = QLabel()
        layout.addWidget(self.header_label)

        splitter = QSplitter(Qt.Horizontal)

        self.group_list = QListWidget()
        self.group_list.currentRowChanged.connect(self._on_group_changed)
        splitter.addWidget(self.group_list)

        right_panel = QWidget()
        right_layout = QVBoxLayout(right_panel)
        right_layout.setContentsMargins(0, 0, 0, 0)

        self.file_list = QListWidget()
        self.file_list.setSelectionMode(QAbstractItemView.MultiSelection)
        self.file_list.itemSelectionChanged.connect(self._on_file_selection_changed)
        right_layout.addWidget(self.file_list, 1)

        options_layout = QHBoxLayout()
        options_layout.addWidget(QLabel("Diff:"))
        self.mode_combo = QComboBox()
        self.mode_combo.addItems([MODE_SIDE_BY_SIDE, MODE_UNIFIED])
        self.mode_combo.currentIndexChanged.connect(self._on_file_selection_changed)
        options_layout.addWidget(self.mode_combo)
        options_layout.addStretch()
        self.status_label = QLabel(HINT_SELECT_FILES)
        options_layout.addWidget(self.status_label)
        right_layout.addLayout(options_layout)

        self.diff_view = QPlainTextEdit()
        self.diff_view.setReadOnly(True)
        self.diff_view.setLineWrapMode(QPlainTextEdit.NoWrap)
        diff_font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
        diff_font.setPointSize(DIFF_FONT_SIZE)
        self.diff_view.setFont(diff_font)
        right_layout.addWidget(self.diff_view, 3)

        splitter.addWidget(right_panel)
        splitter.setSizes([GROUP_PANEL_WIDTH, REVIEW_WINDOW_MIN_WIDTH - GROUP_PANEL_WIDTH])
        layout.addWidget(splitter, 1)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)
        button_layout.addWidget(close_button)
        layout.addLayout(button_layout)

    def _populate_groups(self) -> None:
        """Fill the group list and select the first group."""
        if not self.groups:
            self.header_label.setText("No groups of similar files found.")
            return

        self.header_label.setText(f"Found {len(self.groups)} group(s) of similar files")
        for number, group in enumerate(self.groups, start=1):
            item = QListWidgetItem(
                f"Group {number}: {group.file_count} files\n    {', '.join(group.filenames)}"
            )
            item.setToolTip("\n".join(group.files))
            self.group_list.addItem(item)

        self.group_list.setCurrentRow(0)

    @property
    def current_group(self) -> FileGroup | None:
        """Group selected in the group list, if any."""
        row = self.group_list.currentRow()
        if 0 <= row < len(self.groups):
            return self.groups[row]
        return None

    def select_group(self, index: int) -> None:
        """Select a group by position."""
        self.group_list.setCurrentRow(index)

    def select_files(self, first: int, second: int) -> None:
        """Select two members of the current group by position."""
        self.file_list.clearSelection()
        self.file_list.item(first).setSelected(True)
        self.file_list.item(second).setSelected(True)

    def diff_text(self) -> str:
        """Text currently shown in the diff pane."""
        return self.diff_view.toPlainText()

    def _on_group_changed(self, row: int) -> None:
        """Show the members of the selected group."""
        self.file_list.clear()
        self.diff_view.clear()
        self.status_label.setText(HINT_SELECT_FILES)

        group = self.current_group
        if group is None:
            return

        for file_path in group.files:
            item = QListWidgetItem(base_filename(file_path))
            item.setToolTip(file_path)
            self.file_list.addItem(item)

        logger.debug("[ReviewDialog] Showing group %d", row + 1, extra={"dev_only": True})

    def _on_file_selection_changed(self, *_args) -> None:
        """Compare as soon as exactly two files are selected."""
        group = self.current_group
        rows = sorted(self.file_list.row(item) for item in self.file_list.selectedItems())

        if group is None or len(rows) < 2:
            self.diff_view.clear()
            self.status_label.setText(HINT_SELECT_FILES)
            return
        if len(rows) > 2:
            self.diff_view.clear()
            self.status_label.setText(HINT_TOO_MANY)
            return

        self.compare(group.files[rows[0]], group.files[rows[1]])

    def compare(self, file1: str, file2: str) -> None:
        """Diff two files and show the result."""
        try:
            if self.mode_combo.currentText() == MODE_UNIFIED:
                output = self.diff_executor.diff_unified(file1, file2)
            else:
                output = self.diff_executor.diff_side_by_side(file1, file2)
            identical = self.diff_executor.files_identical(file1, file2)
        except DiffError as e:
            logger.warning("[ReviewDialog] Diff failed: %s", e)
            self.diff_view.setPlainText(f"Error generating diff: {e}")
            self.status_label.setText("Diff failed")
            return

        self.diff_view.setPlainText(output)
        self.status_label.setText(
            f"{base_filename(file1)} vs {base_filename(file2)}: "
            + ("identical" if identical else "different")
        )


def show_review_dialog(groups: Sequence[FileGroup], diff_executor: DiffExecutor) -> int:
    """Open the review window, creating the QApplication when needed.

    Returns:
        The dialog result code

    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
        app.setStyle("Fusion")

    dialog = ReviewDialog(groups, diff_executor)
    dialog.show()
    return dialog.exec_()
