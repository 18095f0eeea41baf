# faststatus

faststatus builds a status line for dwm and similar window managers. Each
block of the line is refreshed on its own background thread at its own
interval. Every 100 ms the latest block outputs are put together into one line.
By default that line becomes the name of the X root window, which dwm shows as
its status. The name is set by running `xsetroot -name`.

## Running

```
pip install .
faststatus
```

To print each status line to standard output instead of setting the root
window name, use this option:

```
faststatus --stdout
```

Stop it with Ctrl-C. If `xsetroot` cannot be run or fails, `faststatus` prints
an error and exits with status 1.

The default blocks call these programs, which must be on `PATH`:

- `xsetroot` sets the status, unless `--stdout` is given.
- `setxkbmap` is used for the keyboard layout block.
- `faststatus-spotify.sh` is used for the music block.
- `pipewire-volume` is used for the volume block.

A block whose program is missing or fails stays empty.

## Blocks

A block is a function that returns text, or `None` when it has nothing to
show. If a block returns `None` or raises, its slot is left empty until the
next time it produces output.

`faststatus.sysinfo`:

- `datetime_string(fmt)` returns the local time formatted with `strftime`. It
  returns `"ERR"` if the result is empty or too long.
- `loadavg(which)` returns the load average. `which` is `"1"`, `"5"`, `"15"`
  or `"all"`; any other value gives `"invalid format"`.
- `memory(path="/proc/meminfo")` returns the used memory plus swap, in MiB.
- `uptime(path="/proc/uptime")` returns the uptime in a form such as
  `up 2 days, 03:14`.
- `portage(db_path="/var/db/pkg")` returns the number of installed Gentoo
  packages.
- `temp_sensor(hwmon_path)` and `temp_sensor_f(hwmon_path)` read a file that
  holds millidegrees and return the temperature in °C or °F.
- `separator(s)` returns `s` unchanged.

`faststatus.disk`:

- `get_disk_rw(dev, cache_path="/tmp/.diskstat-cache", diskstats_path="/proc/diskstats")`
  returns the read and write speed of a device, for example `R:3MB/s W:0MB/s`.
  The speed is measured since the previous call, and the previous sample is
  kept in the cache file. Two calls within the same second raise
  `ZeroDivisionError`.

`faststatus.keymap`:

- `keymap(symbols, group)` picks the layout for an XKB group out of a symbols
  string such as `pc+us+ru:2+inet(evdev)`. It returns `"NULL"` if there is
  none.

`faststatus.music`:

- `music_cmus()` gives the state of cmus. It reads `cmus-remote -Q` and shows
  play/pause, position, duration, volume, and the artist, album and title. If
  those tags are missing, it shows the file name instead. It returns `None`
  when cmus is stopped.
- `music_spotify()` and `music_tidal()` return the output of
  `faststatus-spotify.sh` and `faststatus-tidal.sh`.

`faststatus.shell`:

- `command(cmd)` runs `cmd` through the shell and returns its output without
  the trailing newline. It returns `None` if the command exits with a non-zero
  status.

## Configuration

The default blocks come from `faststatus.config.default_funcs()`. From left to
right they are:

- music (Spotify)
- keyboard layout
- volume
- CPU temperature (from `/tmp/cpu_temp`)
- 1-minute load
- memory
- date and time

Each entry is a `Func`, which holds four things:

- a function
- its argument, or `None`
- a printf-style format in which `%s` stands for the output
- a refresh interval in milliseconds

There is no configuration file. To get a different bar, build your own list of
`Func` objects and pass it to `StatusBar` from `faststatus.status`, together
with a sink that receives each line:

```python
from faststatus.config import Func
from faststatus.status import StatusBar
from faststatus.sysinfo import datetime_string, memory

bar = StatusBar(
    [
        Func(memory, None, "[%sMiB]", 1000),
        Func(datetime_string, "%H:%M:%S", "[%s]", 100),
    ],
    print,
    100,
    256,
)
bar.run()
```

`StatusBar.run()` keeps going until `StatusBar.stop()` is called.
`StatusBar.render()` returns the current line without running the loop.

Limits on the line:

- Block output longer than 127 bytes is cut.
- A block whose rendered text is cut prints a warning to standard error.
- If the next block would push the line past the maximum length less 4 bytes,
  `...` is appended and the remaining blocks are dropped. `build_status`
  assembles a line this way from a list of `Func` objects and their outputs.

## Tests

```
pip install .[test]
pytest
```