"""System information elements: time, load, memory, uptime and sensors."""

from __future__ import annotations

import math
import os
import re
import time
from typing import Sequence

_STRFTIME_LIMIT = 512
_MEMINFO_READ_LIMIT = 4095
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def datetime_string(fmt: str) -> str:
    """Format the local time with ``fmt``; ``"ERR"`` if empty or too long."""
    text = time.strftime(fmt, time.localtime())
    if not text or len(text.encode("utf-8")) >= _STRFTIME_LIMIT:
        return "ERR"
    return text


def format_loadavg(which: str, averages: Sequence[float]) -> str:
    """Format load averages; ``which`` is ``"1"``, ``"5"``, ``"15"`` or ``"all"``."""
    one, five, fifteen = averages[:3]
    choices = {"1": one, "5": five, "15": fifteen}
    if which in choices:
        return f"{choices[which]:.2f}"
    if which == "all":
        return f"{one:.2f} {five:.2f} {fifteen:.2f}"
    return "invalid format"


def loadavg(which: str) -> str:
    """Return the system load average selected by ``which``."""
    return format_loadavg(which, os.getloadavg())


def meminfo_lookup(key: str, contents: str) -> int:
    """Return the kB value of the first line of ``contents`` starting with ``key``."""
    pattern = re.compile(re.escape(key) + r":\s*([+-]?\d+)")
    for line in contents.split("\n"):
        if line and line.startswith(key):
            match = pattern.match(line)
            return int(match.group(1)) if match else 0
    return 0


def memory_used_mib(contents: str) -> int:
    """Compute used memory plus swap in MiB from meminfo text."""
    used = (
        meminfo_lookup("MemTotal", contents)
        + meminfo_lookup("SwapTotal", contents)
        - meminfo_lookup("MemFree", contents)
        - meminfo_lookup("SwapFree", contents)
        - meminfo_lookup("Buffers", contents)
        - meminfo_lookup("Cached", contents)
        - meminfo_lookup("SReclaimable", contents)
    )
    return _round_half_away(used / 1024)


def memory(path: str = "/proc/meminfo") -> str:
    """Return used memory in MiB, or ``"NULL"`` if meminfo cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            contents = fh.read(_MEMINFO_READ_LIMIT)
    except OSError:
        return "NULL"
    return str(memory_used_mib(contents))


def format_uptime(seconds: float) -> str:
    """Format an uptime in seconds as ``up [N day(s), ]HH:MM``."""
    secs_in_hour = 60 * 60
    total_hours = math.floor(seconds / secs_in_hour)
    days = math.floor(total_hours / 24)
    remaining = int(seconds - total_hours * secs_in_hour)
    minutes = math.floor(remaining / 60)
    hours = total_hours - 24 * days
    if days > 1:
        return f"up {days} days, {hours:02d}:{minutes:02d}"
    if days == 1:
        return f"up {days} day, {hours:02d}:{minutes:02d}"
    return f"up {hours:02d}:{minutes:02d}"


def uptime(path: str = "/proc/uptime") -> str:
    """Return the formatted system uptime, or ``"NULL"`` if unavailable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            fields = fh.read().split()
        seconds = float(fields[0])
    except (OSError, IndexError, ValueError):
        return "NULL"
    return format_uptime(seconds)


def portage(db_path: str = "/var/db/pkg") -> str | None:
    """Count installed packages in a category/package database directory."""
    try:
        with os.scandir(db_path) as it:
            categories = [entry.path for entry in it]
    except OSError:
        return None
    count = 0
    for category in categories:
        try:
            with os.scandir(category) as it:
                count += sum(1 for _ in it)
        except OSError:
            break
    return str(count)


def _read_millidegrees(path: str) -> int | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            line = fh.readline()
    except OSError:
        return None
    if not line:
        return None
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else 0


def _fit_sensor(text: str) -> str:
    return text.encode("utf-8")[:8].decode("utf-8", errors="ignore")


def temp_sensor(hwmon_path: str) -> str | None:
    """Read a millidegree sensor file and return degrees Celsius."""
    raw = _read_millidegrees(hwmon_path)
    if raw is None:
        return None
    return _fit_sensor(f"{_round_half_away(raw / 1000)}°C")


def temp_sensor_f(hwmon_path: str) -> str | None:
    """Read a millidegree sensor file and return degrees Fahrenheit."""
    raw = _read_millidegrees(hwmon_path)
    if raw is None:
        return None
    return _fit_sensor(f"{_round_half_away(raw / 1000 * 9 / 5 + 32)}°F")


def separator(s: str) -> str:
    """Return a copy of the separator text; raise TypeError if it is not text."""
    if not isinstance(s, str):
        raise TypeError(f"separator must be a string, not {type(s).__name__}")
    return "".join(s)