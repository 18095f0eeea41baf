"""Now-playing information from cmus and helper scripts."""

from __future__ import annotations

import re

from faststatus.shell import command
from faststatus.util import format_secs, get_basename

_BUFFER_LIMIT = 1023
_VOLUME_LIMIT = 127
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WANTED = (
    "status",
    "duration",
    "position",
    "artist",
    "title",
    "date",
    "vol_left",
    "vol_right",
    "album",
    "file",
)


def _atoi(text: str | None) -> int:
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_cmus_attr(line: str) -> tuple[str, str]:
    """Split a ``cmus-remote -Q`` line into its key and value.

    A leading ``tag `` or ``set `` is skipped. When the line ends right
    after the key's separating whitespace, both parts are empty.
    """
    offset = 4 if line.startswith(("tag ", "set ")) else 0
    end = len(line)
    for position in range(offset, len(line)):
        if line[position].isspace():
            end = position
            break
    if end == len(line) - 1:
        return "", ""
    return line[offset:end], line[end + 1:]


def format_cmus(output: str) -> str | None:
    """Build the status text from ``cmus-remote -Q`` output.

    ``None`` is returned when nothing is playing or paused.
    """
    fields: dict[str, str] = {}
    for line in filter(None, output.split("\n")):
        attr, value = parse_cmus_attr(line)
        if attr in _WANTED:
            fields[attr] = value

    status = fields.get("status")
    if status is None or status == "stopped":
        return None

    play_pause = ">" if status == "playing" else "|"
    position = format_secs(_atoi(fields.get("position")))
    duration = format_secs(_atoi(fields.get("duration")))

    vol_left = fields.get("vol_left", "")
    vol_right = fields.get("vol_right", "")
    if vol_left == vol_right:
        volume = vol_left[:_VOLUME_LIMIT]
    else:
        volume = f"{vol_left},{vol_right}"[:_VOLUME_LIMIT]

    head = f"{play_pause} {position} / {duration} vol: {volume}%"
    artist, album, title = (fields.get(k) for k in ("artist", "album", "title"))
    path = fields.get("file")

    if artist is not None and album is not None and title is not None:
        text = f"{head} - {artist} - {album} - {title}"
    elif path is not None:
        text = f"{head} - {get_basename(path)[:255]}"
    else:
        text = "?"
    return text[:_BUFFER_LIMIT]


def music_cmus() -> str | None:
    """Return the cmus track information, or ``None`` if unavailable."""
    output = command("cmus-remote -Q 2> /dev/null")
    if output is None:
        return None
    return format_cmus(output)


def music_tidal() -> str | None:
    """Return the output of the tidal helper script."""
    return command("faststatus-tidal.sh")


def music_spotify() -> str | None:
    """Return the output of the spotify helper script."""
    return command("faststatus-spotify.sh")