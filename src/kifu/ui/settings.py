"""User-configurable viewer settings."""

from __future__ import annotations

from dataclasses import dataclass

from kifu.ui.i18n import LANGUAGES


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Game tree
    show_variations: bool = True
    expand_variations: bool = False

    # Files
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.language not in LANGUAGES:
            raise ValueError(f"Unknown language: {self.language}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")
