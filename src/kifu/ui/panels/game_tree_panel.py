"""GameTreePanel: main line and variations of a parsed record."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import (
    QLabel,
    QPlainTextEdit,
    QSplitter,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from kifu.core.sgf import GameRecord, Node, property_label
from kifu.ui.i18n import t
from kifu.ui.styles.theme import TreeTheme

_NODE_ROLE = Qt.ItemDataRole.UserRole


def _node_label(node: Node, number: int) -> str:
    move = str(node.move) if node.move is not None else t().setup_node
    return f"{number}. {move}"


def _node_details(node: Node) -> str:
    props = [node.move] if node.move is not None else []
    props.extend(node.properties)
    if not props:
        return t().node_details_empty
    return "\n".join(
        f"{property_label(prop.name)} ({prop.name}): {prop.value}" for prop in props
    )


class GameTreePanel(QWidget):
    """Tree view of the game: main line rows with nested variation rows."""

    node_selected = pyqtSignal(object)

    def __init__(
        self,
        parent: QWidget | None = None,
        theme: TreeTheme | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or TreeTheme.default()
        self._record: GameRecord | None = None
        self._show_variations = True
        self._expand_variations = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        splitter = QSplitter(Qt.Orientation.Vertical)
        self._tree = QTreeWidget()
        self._tree.setHeaderHidden(True)
        self._tree.setAlternatingRowColors(True)
        self._tree.setFont(QFont("AdwaitaMono Nerd Font", 12))
        self._tree.currentItemChanged.connect(self._on_current_item_changed)
        splitter.addWidget(self._tree)

        self._details = QPlainTextEdit()
        self._details.setReadOnly(True)
        splitter.addWidget(self._details)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter)

    def retranslate_ui(self) -> None:
        self._header.setText(t().game_tree_header)
        self._rebuild_tree()

    def clear(self) -> None:
        self._record = None
        self._tree.clear()
        self._details.clear()

    def set_record(self, record: GameRecord) -> None:
        """Display the tree of *record*."""
        self._record = record
        self._rebuild_tree()

    def set_show_variations(self, enabled: bool) -> None:
        if self._show_variations == enabled:
            return
        self._show_variations = enabled
        self._rebuild_tree()

    def set_expand_variations(self, enabled: bool) -> None:
        if self._expand_variations == enabled:
            return
        self._expand_variations = enabled
        self._rebuild_tree()

    def _rebuild_tree(self) -> None:
        self._tree.clear()
        self._details.clear()
        if self._record is None or self._record.root is None:
            return

        # (parent row or None for top level, first node of the line, number)
        pending: list[tuple[QTreeWidgetItem | None, Node, int]] = [
            (None, self._record.root, 0)
        ]
        while pending:
            parent, start, number = pending.pop()
            for node in start.main_line():
                item = QTreeWidgetItem([_node_label(node, number)])
                item.setData(0, _NODE_ROLE, node)
                item.setForeground(0, QBrush(self._node_color(node)))
                if parent is None:
                    self._tree.addTopLevelItem(item)
                else:
                    parent.addChild(item)

                if self._show_variations:
                    for index, variation in enumerate(node.variations, start=1):
                        var_item = QTreeWidgetItem(
                            [t().variation_label.format(n=index)]
                        )
                        var_item.setForeground(0, QBrush(self._theme.variation))
                        item.addChild(var_item)
                        pending.append((var_item, variation, number + 1))
                number += 1

        if self._expand_variations:
            self._tree.expandAll()

    def _node_color(self, node: Node) -> QColor:
        if node.move is None:
            return self._theme.setup
        if node.move.name == "W":
            return self._theme.move_white
        return self._theme.move_black

    def _on_current_item_changed(
        self,
        current: QTreeWidgetItem | None,
        _previous: QTreeWidgetItem | None,
    ) -> None:
        node = current.data(0, _NODE_ROLE) if current is not None else None
        if not isinstance(node, Node):
            self._details.clear()
            return
        self._details.setPlainText(_node_details(node))
        self.node_selected.emit(node)
