"""Status bar blocks and their default configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from faststatus.keymap import keymap
from faststatus.music import music_spotify
from faststatus.shell import command
from faststatus.sysinfo import datetime_string, loadavg, memory, temp_sensor

_XKB_SYMBOLS = re.compile(r'xkb_symbols\s*\{\s*include\s*"([^"]*)"')


@dataclass(frozen=True)
class Func:
    """One status block: what to call, its argument, format and refresh rate."""

    func: Callable[..., str | None]
    arg: str | None
    fmt: str
    interval_ms: int

    def call(self) -> str | None:
        """Run the block's function, passing the argument when there is one."""
        if self.arg is None:
            return self.func()
        return self.func(self.arg)

    def render(self, value: str) -> str:
        """Insert ``value`` into the block's printf-style format."""
        return self.fmt % value


def _x_keymap() -> str:
    """Return the layout of the first XKB group of the running X server."""
    output = command("setxkbmap -print 2> /dev/null")
    if output is None:
        return "NULL"
    match = _XKB_SYMBOLS.search(output)
    if match is None:
        return "NULL"
    return keymap(match.group(1), 0)


def default_funcs() -> list[Func]:
    """Return the blocks shown by default, left to right."""
    return [
        Func(music_spotify, None, "[%s]", 300),
        Func(_x_keymap, None, "[%s", 600),
        Func(command, "pipewire-volume", "|🔊 %s", 400),
        Func(temp_sensor, "/tmp/cpu_temp", "|%s", 800),
        Func(loadavg, "1", "|%s", 600),
        Func(memory, None, "|%sMiB]", 200),
        Func(datetime_string, "%a %b %d %I:%M:%S %p", "[%s]", 100),
    ]