"""Tests for the game info panel."""

from __future__ import annotations

from kifu.core.sgf import GameInfo, parse_sgf
from kifu.ui.i18n import set_language
from kifu.ui.panels.game_info_panel import GameInfoPanel


def test_header_rows_follow_document_order(sample_sgf: str) -> None:
    panel = GameInfoPanel()
    panel.set_game_info(parse_sgf(sample_sgf).game_info)

    table = panel._table
    assert table.rowCount() == 7
    assert [table.item(row, 0).toolTip() for row in range(7)] == [
        "GM",
        "FF",
        "SZ",
        "PB",
        "PW",
        "KM",
        "RE",
    ]
    assert table.item(3, 0).text() == "Black player"
    assert table.item(3, 1).text() == "Honinbo Shusaku"


def test_unknown_codes_are_shown_verbatim() -> None:
    info = GameInfo({"GM": "1"})
    panel = GameInfoPanel()
    panel.set_game_info(info)

    assert panel._table.item(0, 0).text() == "GM"
    assert panel._table.item(0, 1).text() == "1"


def test_panel_keeps_its_own_copy() -> None:
    info = GameInfo({"PB": "Lee"})
    panel = GameInfoPanel()
    panel.set_game_info(info)
    info["PW"] = "Cho"

    assert panel._info == {"PB": "Lee"}


def test_clear_and_retranslate() -> None:
    panel = GameInfoPanel()
    panel.set_game_info(GameInfo({"PB": "Lee"}))
    panel.clear()
    assert panel._table.rowCount() == 0

    set_language("Russian")
    panel.retranslate_ui()
    assert panel._table.horizontalHeaderItem(0).text() == "Свойство"
    assert panel._header.text() == "Сведения о партии"
