"""UI Dialogs package."""

from doppel.ui.dialogs.review_dialog import ReviewDialog

__all__ = [
    "ReviewDialog",
]
