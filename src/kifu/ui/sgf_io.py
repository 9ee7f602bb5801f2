"""SGF file loading helpers used by the viewer."""

from __future__ import annotations

import logging
from pathlib import Path

from kifu.core.sgf import GameRecord, parse_sgf

_LOGGER = logging.getLogger(__name__)
_FALLBACK_ENCODING = "latin-1"


def read_sgf_text(file_path: Path, encoding: str = "utf-8") -> str:
    """Read *file_path*, falling back to Latin-1 when *encoding* fails.

    A UTF-8 byte order mark is dropped. ``OSError`` propagates to the caller.
    """
    data = file_path.read_bytes()
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        _LOGGER.warning(
            "Cannot decode %s as %s; falling back to %s",
            file_path,
            encoding,
            _FALLBACK_ENCODING,
        )
        return data.decode(_FALLBACK_ENCODING)


def load_sgf_file(file_path: Path, encoding: str = "utf-8") -> GameRecord:
    """Load and parse an SGF document from disk."""
    record = parse_sgf(read_sgf_text(file_path, encoding))
    if not record.ok:
        _LOGGER.info("%s: %s", file_path.name, record.errors[0].message)
    return record
