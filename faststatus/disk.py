"""Disk read/write throughput from /proc/diskstats."""

from __future__ import annotations

import time
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

_SECTOR_DIVISOR = 2 * 1024


@dataclass(frozen=True)
class DiskSample:
    """Sector counters for a device at a point in time."""

    timestamp: int
    read: int
    written: int


def read_cache(path: str) -> DiskSample | None:
    """Read a cached sample; missing numbers default to zero."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    values = [0, 0, 0]
    for position, token in enumerate(text.split()[:3]):
        try:
            values[position] = int(token)
        except ValueError:
            break
    return DiskSample(*values)


def write_cache(path: str, sample: DiskSample) -> None:
    """Store ``sample`` in the cache file."""
    Path(path).write_text(
        f"{sample.timestamp} {sample.read} {sample.written}", encoding="utf-8"
    )


def parse_diskstats(text: str, dev: str) -> tuple[int, int] | None:
    """Return (sectors read, sectors written) of ``dev``; the last match wins."""
    result = None
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 14:
            continue
        try:
            numbers = [int(f) for f in fields[:2] + fields[3:14]]
        except ValueError:
            continue
        if fields[2] != dev:
            continue
        result = (numbers[4], numbers[8])
    return result


def current_disk_rw(
    dev: str, diskstats_path: str = "/proc/diskstats"
) -> tuple[int, int] | None:
    """Read the current sector counters of ``dev``."""
    try:
        text = Path(diskstats_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    return parse_diskstats(text, dev)


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def format_disk_rw(previous: DiskSample, current: DiskSample) -> str:
    """Format throughput in MB/s between two samples."""
    interval = current.timestamp - previous.timestamp
    if interval == 0:
        raise ZeroDivisionError("no time elapsed between disk samples")
    mbr = _cdiv(_cdiv(current.read - previous.read, interval), _SECTOR_DIVISOR)
    mbw = _cdiv(_cdiv(current.written - previous.written, interval), _SECTOR_DIVISOR)
    return f"R:{mbr}MB/s W:{mbw}MB/s"


def get_disk_rw(
    dev: str,
    cache_path: str = "/tmp/.diskstat-cache",
    diskstats_path: str = "/proc/diskstats",
) -> str:
    """Return throughput of ``dev`` since the previous call, updating the cache."""
    previous = read_cache(cache_path) or DiskSample(0, 0, 0)
    read, written = current_disk_rw(dev, diskstats_path) or (0, 0)
    current = DiskSample(int(time.time()), read, written)
    with suppress(OSError):
        write_cache(cache_path, current)
    return format_disk_rw(previous, current)