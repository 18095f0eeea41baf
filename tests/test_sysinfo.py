import re
import time

import pytest

from faststatus.sysinfo import (
    datetime_string,
    format_loadavg,
    format_uptime,
    loadavg,
    meminfo_lookup,
    memory,
    memory_used_mib,
    portage,
    separator,
    temp_sensor,
    temp_sensor_f,
    uptime,
)


def test_datetime_year():
    assert datetime_string("%Y") == str(time.localtime().tm_year)


def test_datetime_empty_is_err():
    assert datetime_string("") == "ERR"


def test_datetime_too_long_is_err():
    assert datetime_string("x" * 600) == "ERR"


AVERAGES = (0.5, 1.25, 2.75)


@pytest.mark.parametrize("which,index", [("1", 0), ("5", 1), ("15", 2)])
def test_format_loadavg_single(which, index):
    text = format_loadavg(which, AVERAGES)
    assert float(text) == AVERAGES[index]
    assert len(text.split(".")[1]) == 2


def test_format_loadavg_all():
    parts = format_loadavg("all", AVERAGES).split(" ")
    assert [float(p) for p in parts] == list(AVERAGES)


def test_format_loadavg_invalid():
    assert format_loadavg("bogus", AVERAGES) == "invalid format"


def test_loadavg_all_has_three_values():
    parts = loadavg("all").split(" ")
    assert len(parts) == 3
    assert all(float(p) >= 0 for p in parts)


def _meminfo(total=0, free=0, swap_total=0, swap_free=0, buffers=0,
             cached=0, reclaim=0):
    return (
        f"MemTotal:       {total} kB\n"
        f"MemFree:        {free} kB\n"
        f"Buffers:        {buffers} kB\n"
        f"Cached:         {cached} kB\n"
        f"SwapCached:     0 kB\n"
        f"SwapTotal:      {swap_total} kB\n"
        f"SwapFree:       {swap_free} kB\n"
        f"SReclaimable:   {reclaim} kB\n"
    )


def test_meminfo_lookup_found():
    contents = _meminfo(total=16000000, free=123456)
    assert meminfo_lookup("MemTotal", contents) == 16000000
    assert meminfo_lookup("MemFree", contents) == 123456


def test_meminfo_lookup_tab_separator():
    assert meminfo_lookup("Cached", "Cached:\t4096 kB\n") == 4096


def test_meminfo_lookup_missing_is_zero():
    assert meminfo_lookup("Hugepagesize", _meminfo(total=10)) == 0


def test_memory_used_whole_mib():
    mib = 7
    assert memory_used_mib(_meminfo(total=1024 * mib)) == mib


def test_memory_used_decreases_with_free():
    low = memory_used_mib(_meminfo(total=8000000, free=1000000))
    high = memory_used_mib(_meminfo(total=8000000, free=100000))
    assert high > low


def test_memory_reads_file(tmp_path):
    contents = _meminfo(total=4000000, free=1000000, cached=500000)
    path = tmp_path / "meminfo"
    path.write_text(contents)
    assert memory(str(path)) == str(memory_used_mib(contents))


def test_memory_missing_file(tmp_path):
    assert memory(str(tmp_path / "nope")) == "NULL"


def test_format_uptime_zero():
    assert format_uptime(0) == "up 00:00"


@pytest.mark.parametrize("days,hours,minutes", [
    (0, 5, 7), (1, 0, 59), (3, 23, 0), (12, 1, 30),
])
def test_format_uptime_round_trip(days, hours, minutes):
    text = format_uptime(days * 86400 + hours * 3600 + minutes * 60 + 12.5)
    match = re.fullmatch(r"up (?:(\d+) (day|days), )?(\d{2}):(\d{2})", text)
    assert match is not None
    assert int(match.group(1) or 0) == days
    assert int(match.group(3)) == hours
    assert int(match.group(4)) == minutes
    if days == 1:
        assert match.group(2) == "day"
    elif days > 1:
        assert match.group(2) == "days"


def test_uptime_reads_file(tmp_path):
    path = tmp_path / "uptime"
    path.write_text("12345.67 999.00\n")
    assert uptime(str(path)) == format_uptime(12345.67)


def test_uptime_missing_file(tmp_path):
    assert uptime(str(tmp_path / "nope")) == "NULL"


def test_portage_counts_packages(tmp_path):
    layout = {"app-misc": 3, "sys-apps": 2, "dev-lang": 0}
    for category, count in layout.items():
        (tmp_path / category).mkdir()
        for i in range(count):
            (tmp_path / category / f"pkg-{i}").mkdir()
    assert portage(str(tmp_path)) == str(sum(layout.values()))


def test_portage_empty_db(tmp_path):
    assert portage(str(tmp_path)) == "0"


def test_portage_missing_db(tmp_path):
    assert portage(str(tmp_path / "missing")) is None


@pytest.mark.parametrize("degrees", [0, 45, 87])
def test_temp_sensor_celsius(tmp_path, degrees):
    path = tmp_path / "temp"
    path.write_text(f"{degrees * 1000}\n")
    assert temp_sensor(str(path)) == f"{degrees}°C"


def test_temp_sensor_fahrenheit_freezing(tmp_path):
    path = tmp_path / "temp"
    path.write_text("0\n")
    assert temp_sensor_f(str(path)) == "32°F"


def test_temp_sensor_fahrenheit_boiling(tmp_path):
    path = tmp_path / "temp"
    path.write_text("100000\n")
    assert temp_sensor_f(str(path)) == "212°F"


def test_temp_sensor_missing(tmp_path):
    assert temp_sensor(str(tmp_path / "nope")) is None
    assert temp_sensor_f(str(tmp_path / "nope")) is None


def test_temp_sensor_empty_file(tmp_path):
    path = tmp_path / "temp"
    path.write_text("")
    assert temp_sensor(str(path)) is None


def test_separator_identity():
    assert separator(" | ") == " | "