"""Internationalisation strings for the Kifu viewer.

Usage::

    from kifu.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_open_sgf)   # "&Открыть SGF..."
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    app_title: str
    menu_file: str
    menu_open_sgf: str
    menu_quit: str
    menu_settings: str
    menu_language: str
    menu_show_variations: str

    status_ready: str
    status_loading: str  # e.g. "Loading {name}..."
    status_loaded_sgf: str  # e.g. "Loaded {name}: {nodes} moves"
    status_parse_error: str  # e.g. "Parse error: {msg}"

    # SGF dialogs
    sgf_filter: str
    sgf_all_files: str
    open_sgf_title: str
    open_sgf_failed: str  # "Failed to load SGF:\n{exc}"
    parse_error_title: str
    parse_error_message: str  # "{name} is malformed:\n{msg}"

    # ── GameInfoPanel ────────────────────────────────────────────────────
    game_info_header: str
    col_property: str
    col_value: str

    # ── GameTreePanel ────────────────────────────────────────────────────
    game_tree_header: str
    setup_node: str
    variation_label: str  # "Variation {n}"
    node_details_empty: str


_EN = Strings(
    app_title="Kifu",
    menu_file="&File",
    menu_open_sgf="&Open SGF...",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_language="&Language",
    menu_show_variations="Show &variations",
    status_ready="Ready",
    status_loading="Loading {name}...",
    status_loaded_sgf="Loaded {name}: {nodes} moves",
    status_parse_error="Parse error: {msg}",
    sgf_filter="SGF Files (*.sgf)",
    sgf_all_files="All Files (*)",
    open_sgf_title="Open SGF",
    open_sgf_failed="Failed to load SGF:\n{exc}",
    parse_error_title="Malformed SGF",
    parse_error_message="{name} is malformed:\n{msg}",
    game_info_header="Game info",
    col_property="Property",
    col_value="Value",
    game_tree_header="Moves",
    setup_node="(setup)",
    variation_label="Variation {n}",
    node_details_empty="No properties",
)

_RU = Strings(
    app_title="Kifu",
    menu_file="&Файл",
    menu_open_sgf="&Открыть SGF...",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_language="&Язык",
    menu_show_variations="Показывать &варианты",
    status_ready="Готово",
    status_loading="Загрузка {name}...",
    status_loaded_sgf="Загружен {name}: ходов {nodes}",
    status_parse_error="Ошибка разбора: {msg}",
    sgf_filter="Файлы SGF (*.sgf)",
    sgf_all_files="Все файлы (*)",
    open_sgf_title="Открыть SGF",
    open_sgf_failed="Не удалось загрузить SGF:\n{exc}",
    parse_error_title="Повреждённый SGF",
    parse_error_message="Файл {name} повреждён:\n{msg}",
    game_info_header="Сведения о партии",
    col_property="Свойство",
    col_value="Значение",
    game_tree_header="Ходы",
    setup_node="(расстановка)",
    variation_label="Вариант {n}",
    node_details_empty="Нет свойств",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
