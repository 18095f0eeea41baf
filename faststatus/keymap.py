"""Keyboard layout name from an XKB symbols string."""

from __future__ import annotations

import re

_INVALID_PREFIXES = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether ``sym`` names a layout rather than a rules component."""
    return not sym.startswith(_INVALID_PREFIXES)


def get_layout(symbols: str, group: int) -> str | None:
    """Return the layout for XKB ``group`` from a symbols string like ``pc+us+ru:2``."""
    layout = None
    found = 0
    for token in filter(None, _SEPARATORS.split(symbols)):
        if found > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    return layout


def keymap(symbols: str, group: int) -> str:
    """Return the active layout name, or ``"NULL"`` when none is found."""
    return get_layout(symbols, group) or "NULL"