import re
import time

import pytest

from faststatus.disk import (
    DiskSample,
    current_disk_rw,
    format_disk_rw,
    get_disk_rw,
    parse_diskstats,
    read_cache,
    write_cache,
)


def _line(name, sectors_read, sectors_written, major=8, minor=0):
    fields = [major, minor, name, 100, 2, sectors_read, 30, 40, 5,
              sectors_written, 60, 0, 70, 80, 0, 0, 0, 0, 0, 0]
    return " ".join(str(f) for f in fields)


def test_cache_round_trip(tmp_path):
    path = str(tmp_path / "cache")
    sample = DiskSample(1700000000, 123, 456)
    write_cache(path, sample)
    assert read_cache(path) == sample


def test_read_cache_missing(tmp_path):
    assert read_cache(str(tmp_path / "nope")) is None


def test_read_cache_partial(tmp_path):
    path = tmp_path / "cache"
    path.write_text("42 x 9")
    assert read_cache(str(path)) == DiskSample(42, 0, 0)


def test_parse_diskstats_selects_device():
    text = "\n".join([_line("sda", 1000, 2000), _line("dm-0", 3000, 4000, 253)])
    assert parse_diskstats(text, "dm-0") == (3000, 4000)
    assert parse_diskstats(text, "sda") == (1000, 2000)


def test_parse_diskstats_short_line_ignored():
    assert parse_diskstats("8 0 sda 1 2 3", "sda") is None


def test_parse_diskstats_unknown_device():
    assert parse_diskstats(_line("sda", 1, 2), "sdb") is None


def test_current_disk_rw_reads_file(tmp_path):
    path = tmp_path / "diskstats"
    path.write_text(_line("nvme0n1", 777, 888) + "\n")
    assert current_disk_rw("nvme0n1", str(path)) == (777, 888)


def test_current_disk_rw_missing_file(tmp_path):
    assert current_disk_rw("sda", str(tmp_path / "nope")) is None


def test_format_disk_rw_rates():
    previous = DiskSample(0, 0, 0)
    current = DiskSample(1, 2 * 1024 * 5, 2 * 1024 * 3)
    assert format_disk_rw(previous, current) == "R:5MB/s W:3MB/s"


def test_format_disk_rw_zero_interval():
    sample = DiskSample(10, 0, 0)
    with pytest.raises(ZeroDivisionError):
        format_disk_rw(sample, sample)


def test_get_disk_rw_updates_cache(tmp_path):
    cache = str(tmp_path / "cache")
    stats = tmp_path / "diskstats"
    stats.write_text(_line("sda", 50000, 60000) + "\n")
    write_cache(cache, DiskSample(int(time.time()) - 10, 0, 0))
    result = get_disk_rw("sda", cache, str(stats))
    assert re.fullmatch(r"R:-?\d+MB/s W:-?\d+MB/s", result)
    stored = read_cache(cache)
    assert (stored.read, stored.written) == (50000, 60000)