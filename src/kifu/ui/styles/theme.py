"""Visual theme constants and QSS styles for Kifu."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class TreeTheme:
    """Colours used by the game tree rows."""

    move_black: QColor
    move_white: QColor
    setup: QColor
    variation: QColor

    @classmethod
    def default(cls) -> TreeTheme:
        return cls(
            move_black=QColor(230, 230, 230),
            move_white=QColor(190, 190, 190),
            setup=QColor(140, 140, 140),  # nodes without a move
            variation=QColor(92, 139, 176),  # "Variation n" rows
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QTreeWidget, QTableWidget, QPlainTextEdit {
    background: #1e1e1e;
    alternate-background-color: #252526;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QTreeWidget::item:selected, QTableWidget::item:selected {
    background: #264f78;
}

QHeaderView::section {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    padding: 4px;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
