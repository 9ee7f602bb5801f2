"""MainWindow: top-level viewer window assembling all UI components."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStatusBar,
)

from kifu.core.sgf import GameRecord
from kifu.ui.i18n import LANGUAGES, set_language, t
from kifu.ui.panels.game_info_panel import GameInfoPanel
from kifu.ui.panels.game_tree_panel import GameTreePanel
from kifu.ui.parse_worker import ParseWorker
from kifu.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Kifu."""

    parse_request = pyqtSignal(str, int)
    encoding_changed = pyqtSignal(str)

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(720, 480)
        self.resize(980, 680)

        self._settings = settings if settings is not None else AppSettings()
        set_language(self._settings.language)
        self._parse_thread = QThread(self)
        self._parse_worker = ParseWorker(encoding=self._settings.encoding)
        self._parse_request_id = 0
        self._pending_path: Path | None = None
        self._record: GameRecord | None = None
        self._record_name = ""

        self._setup_ui()
        self._setup_menu()
        self._setup_worker()
        self.apply_settings(self._settings)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        self._info_panel = GameInfoPanel()
        splitter.addWidget(self._info_panel)

        self._tree_panel = GameTreePanel()
        splitter.addWidget(self._tree_panel)
        splitter.setStretchFactor(0, 2)
        splitter.setStretchFactor(1, 3)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # File menu
        self._menu_file = menu_bar.addMenu("")
        assert self._menu_file is not None

        self._act_open_sgf = QAction(self)
        self._act_open_sgf.setShortcut("Ctrl+O")
        self._act_open_sgf.triggered.connect(self._on_open_sgf)
        self._menu_file.addAction(self._act_open_sgf)

        self._menu_file.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu("")
        assert self._menu_settings is not None

        self._menu_language = self._menu_settings.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        self._language_group.setExclusive(True)
        self._act_languages: dict[str, QAction] = {}
        for language in LANGUAGES:
            action = QAction(language, self)
            action.setCheckable(True)
            action.triggered.connect(
                lambda _checked=False, name=language: self._on_language_selected(
                    name
                )
            )
            self._language_group.addAction(action)
            self._menu_language.addAction(action)
            self._act_languages[language] = action

        self._act_show_variations = QAction(self)
        self._act_show_variations.setCheckable(True)
        self._act_show_variations.toggled.connect(self._on_show_variations_toggled)
        self._menu_settings.addAction(self._act_show_variations)

    def _setup_worker(self) -> None:
        """Run the parse worker in a dedicated QThread."""
        self._parse_worker.moveToThread(self._parse_thread)
        self.parse_request.connect(self._parse_worker.request_parse)
        self.encoding_changed.connect(self._parse_worker.set_encoding)
        self._parse_worker.record_ready.connect(self._on_record_ready)
        self._parse_worker.parse_failed.connect(self._on_parse_failed)
        self._parse_thread.start()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.app_title)
        assert self._menu_file is not None
        assert self._menu_settings is not None
        assert self._menu_language is not None
        self._menu_file.setTitle(s.menu_file)
        self._act_open_sgf.setText(s.menu_open_sgf)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._menu_language.setTitle(s.menu_language)
        self._act_show_variations.setText(s.menu_show_variations)
        self._info_panel.retranslate_ui()
        self._tree_panel.retranslate_ui()
        self._update_status()

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def apply_settings(self, settings: AppSettings) -> None:
        """Apply *settings* to every component of the window."""
        previous = self._settings
        self._settings = settings
        set_language(settings.language)

        self._act_languages[settings.language].setChecked(True)
        self._act_show_variations.blockSignals(True)
        self._act_show_variations.setChecked(settings.show_variations)
        self._act_show_variations.blockSignals(False)

        self._tree_panel.set_show_variations(settings.show_variations)
        self._tree_panel.set_expand_variations(settings.expand_variations)
        if settings.encoding != previous.encoding:
            self.encoding_changed.emit(settings.encoding)
        self.retranslate_ui()

    def _on_language_selected(self, language: str) -> None:
        if language == self._settings.language:
            return
        self.apply_settings(replace(self._settings, language=language))

    def _on_show_variations_toggled(self, checked: bool) -> None:
        self.apply_settings(replace(self._settings, show_variations=checked))

    # ── Loading ──────────────────────────────────────────────────────────

    def _on_open_sgf(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            t().open_sgf_title,
            "",
            f"{t().sgf_filter};;{t().sgf_all_files}",
        )
        if not file_path:
            return
        self.open_file(Path(file_path))

    def open_file(self, file_path: Path) -> int:
        """Queue *file_path* for parsing; returns the request id."""
        self._parse_request_id += 1
        self._pending_path = file_path
        self._status_label.setText(t().status_loading.format(name=file_path.name))
        _LOGGER.debug("Parse request %d: %s", self._parse_request_id, file_path)
        self.parse_request.emit(str(file_path), self._parse_request_id)
        return self._parse_request_id

    def _is_stale(self, request_id: int) -> bool:
        return request_id != self._parse_request_id or self._pending_path is None

    def _on_record_ready(self, request_id: int, record: object) -> None:
        if self._is_stale(request_id) or not isinstance(record, GameRecord):
            return
        assert self._pending_path is not None
        name = self._pending_path.name
        self._pending_path = None
        self.show_record(record, name)

    def _on_parse_failed(self, request_id: int, message: str) -> None:
        if self._is_stale(request_id):
            return
        self._pending_path = None
        self._update_status()
        QMessageBox.warning(
            self,
            t().open_sgf_title,
            t().open_sgf_failed.format(exc=message),
        )

    def show_record(self, record: GameRecord, name: str) -> None:
        """Display *record*; parse errors are reported but not fatal."""
        self._record = record
        self._record_name = name
        self._info_panel.set_game_info(record.game_info)
        self._tree_panel.set_record(record)
        self._update_status()

        error = record.first_error
        if error is not None:
            QMessageBox.warning(
                self,
                t().parse_error_title,
                t().parse_error_message.format(name=name, msg=error.message),
            )

    def _update_status(self) -> None:
        s = t()
        record = self._record
        if record is None:
            self._status_label.setText(s.status_ready)
            return
        error = record.first_error
        if error is not None:
            self._status_label.setText(s.status_parse_error.format(msg=error.message))
        else:
            self._status_label.setText(
                s.status_loaded_sgf.format(
                    name=self._record_name, nodes=record.node_count()
                )
            )

    # ── Shutdown ─────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._parse_thread.quit()
        self._parse_thread.wait(2000)
        super().closeEvent(event)
