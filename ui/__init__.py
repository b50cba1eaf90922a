"""Terminal UI for the Greek quiz validator."""

from ui.app import QuizUI
from ui.components import BlankResultsTable, ValidationPanel
from ui.styles import (
    AEGEAN_BLUE,
    OLIVE_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "QuizUI",
    "ValidationPanel",
    "BlankResultsTable",
    "AEGEAN_BLUE",
    "OLIVE_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
