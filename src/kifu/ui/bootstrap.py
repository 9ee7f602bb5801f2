"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from kifu.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from kifu.ui.styles.theme import APP_STYLE

    app.setApplicationName("Kifu")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    *,
    settings: AppSettings | None = None,
    file_path: Path | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from kifu.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    if file_path is not None:
        _LOGGER.info("Opening %s", file_path)
        window.open_file(file_path)

    return app.exec()
