"""Well-known SGF property codes and their display labels."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

BLACK_MOVE: Final = "B"
WHITE_MOVE: Final = "W"

BLACK_PLAYER_NAME: Final = "PB"
BLACK_PLAYER_RANK: Final = "BR"
BLACK_PLAYER_TEAM: Final = "BT"
WHITE_PLAYER_NAME: Final = "PW"
WHITE_PLAYER_RANK: Final = "WR"
WHITE_PLAYER_TEAM: Final = "WT"
ANNOTATOR: Final = "AN"
COPYRIGHT: Final = "CP"
DATE: Final = "DT"
EVENT: Final = "EV"
GAME_COMMENT: Final = "GC"
COMMENT: Final = "C"
GAME_NAME: Final = "GN"
HANDICAP: Final = "HA"
OPENING: Final = "ON"
OVERTIME: Final = "OT"
PLACE: Final = "PC"
RESULT: Final = "RE"
ROUND: Final = "RO"
RULES: Final = "RU"
SOURCE: Final = "SO"
TIME_LIMITS: Final = "TM"
USER: Final = "US"
CHARSET: Final = "CA"
BOARD_SIZE: Final = "SZ"
KOMI: Final = "KM"

PROPERTY_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        BLACK_MOVE: "Black move",
        WHITE_MOVE: "White move",
        BLACK_PLAYER_NAME: "Black player",
        BLACK_PLAYER_RANK: "Black rank",
        BLACK_PLAYER_TEAM: "Black team",
        WHITE_PLAYER_NAME: "White player",
        WHITE_PLAYER_RANK: "White rank",
        WHITE_PLAYER_TEAM: "White team",
        ANNOTATOR: "Annotator",
        COPYRIGHT: "Copyright",
        DATE: "Date",
        EVENT: "Event",
        GAME_COMMENT: "Game comment",
        COMMENT: "Comment",
        GAME_NAME: "Game name",
        HANDICAP: "Handicap",
        OPENING: "Opening",
        OVERTIME: "Overtime",
        PLACE: "Place",
        RESULT: "Result",
        ROUND: "Round",
        RULES: "Rules",
        SOURCE: "Source",
        TIME_LIMITS: "Time limits",
        USER: "User",
        CHARSET: "Charset",
        BOARD_SIZE: "Board size",
        KOMI: "Komi",
    }
)


def property_label(code: str) -> str:
    """Human-readable label for *code*; unknown codes are returned as-is."""
    return PROPERTY_LABELS.get(code.upper(), code)
