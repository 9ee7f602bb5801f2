"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kifu.ui.i18n import LANGUAGES

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kifu", description="View SGF game records."
    )
    parser.add_argument("file", nargs="?", type=Path, help="SGF file to open")
    parser.add_argument(
        "--language", choices=LANGUAGES, default="English", help="UI language"
    )
    parser.add_argument(
        "--encoding", default="utf-8", help="preferred text encoding of SGF files"
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the Kifu viewer."""
    from kifu.ui.bootstrap import run_application
    from kifu.ui.settings import AppSettings

    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = AppSettings(language=args.language, encoding=args.encoding)
    sys.exit(run_application([sys.argv[0]], settings=settings, file_path=args.file))


if __name__ == "__main__":
    main()
