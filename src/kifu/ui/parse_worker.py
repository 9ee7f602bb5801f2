"""Qt worker that loads and parses SGF files off the UI thread."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from kifu.ui.sgf_io import load_sgf_file

_LOGGER = logging.getLogger(__name__)


class ParseWorker(QObject):
    """Thread-affine worker that parses documents on demand."""

    record_ready = pyqtSignal(int, object)
    parse_failed = pyqtSignal(int, str)

    __slots__ = ("_encoding",)

    def __init__(self, *, encoding: str = "utf-8") -> None:
        super().__init__()
        self._encoding = encoding

    @pyqtSlot(str, int)
    def request_parse(self, file_path: str, request_id: int) -> None:
        """Load *file_path* and emit the parsed record."""
        try:
            record = load_sgf_file(Path(file_path), self._encoding)
        except OSError as exc:
            self.parse_failed.emit(request_id, str(exc))
            return
        except Exception as exc:
            _LOGGER.exception("Unexpected failure while parsing %s", file_path)
            self.parse_failed.emit(request_id, str(exc))
            return

        self.record_ready.emit(request_id, record)

    @pyqtSlot(str)
    def set_encoding(self, encoding: str) -> None:
        """Change the preferred text encoding for subsequent requests."""
        self._encoding = encoding
