"""GameInfoPanel: table of header properties."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from kifu.core.sgf import GameInfo, property_label
from kifu.ui.i18n import t


class GameInfoPanel(QWidget):
    """Shows the game header as label/value rows."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._info = GameInfo()
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._table = QTableWidget(0, 2)
        self._table.setAlternatingRowColors(True)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        vertical = self._table.verticalHeader()
        if vertical is not None:
            vertical.setVisible(False)
        horizontal = self._table.horizontalHeader()
        if horizontal is not None:
            horizontal.setStretchLastSection(True)
            horizontal.setSectionResizeMode(
                0, QHeaderView.ResizeMode.ResizeToContents
            )
        layout.addWidget(self._table)

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.game_info_header)
        self._table.setHorizontalHeaderLabels([s.col_property, s.col_value])

    def clear(self) -> None:
        self._info = GameInfo()
        self._table.setRowCount(0)

    def set_game_info(self, info: GameInfo) -> None:
        """Replace the displayed header with *info*."""
        self._info = GameInfo(info)
        self._table.setRowCount(len(self._info))
        for row, (code, value) in enumerate(self._info.items()):
            name_item = QTableWidgetItem(property_label(code))
            name_item.setToolTip(code)
            self._table.setItem(row, 0, name_item)
            self._table.setItem(row, 1, QTableWidgetItem(value))
