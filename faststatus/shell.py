"""Running shell commands for status output."""

from __future__ import annotations

import subprocess


def command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return its standard output.

    One trailing newline is removed. ``None`` is returned when the command
    cannot be started or exits with a non-zero status.
    """
    try:
        proc = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    output = proc.stdout.decode("utf-8", errors="replace")
    if output.endswith("\n"):
        output = output[:-1]
    return output