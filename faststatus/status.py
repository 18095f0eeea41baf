"""The status bar: block workers, status assembly and the main loop."""

from __future__ import annotations

import argparse
import subprocess
import sys
import threading
import time
from typing import Callable, Iterable, Sequence

from faststatus.config import Func, default_funcs

BUFSZ = 128
STATUS_MAXLEN = 256
UPDATE_INTERVAL_MS = 100


def _fit(text: str, limit: int) -> tuple[str, bool]:
    """Cut ``text`` to at most ``limit`` UTF-8 bytes; report whether it was cut."""
    data = text.encode("utf-8")
    if len(data) <= limit:
        return text, False
    return data[:limit].decode("utf-8", errors="ignore"), True


def build_status(
    funcs: Sequence[Func],
    outputs: Iterable[str | None],
    maxlen: int = STATUS_MAXLEN,
) -> str:
    """Join the rendered outputs of the blocks into one status line.

    Empty outputs are skipped. When the next block would not fit, ``...``
    is appended and the rest is dropped.
    """
    parts: list[str] = []
    length = 0
    for func, output in zip(funcs, outputs):
        if not output:
            continue
        piece, truncated = _fit(func.render(output), BUFSZ - 1)
        if truncated:
            print("warning: output truncated", file=sys.stderr)
        size = len(piece.encode("utf-8"))
        if length + size > maxlen - 4:
            parts.append("...")
            break
        parts.append(piece)
        length += size
    return "".join(parts)


def set_root_name(text: str) -> None:
    """Set the X root window name, which dwm shows as its status."""
    subprocess.run(["xsetroot", "-name", text], check=True)


class BlockWorker:
    """Refreshes the output of one block in a background thread."""

    def __init__(self, func: Func) -> None:
        self.func = func
        self._output = ""
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def output(self) -> str:
        """Return the most recent output, empty if the block failed."""
        with self._lock:
            return self._output

    def _set_output(self, value: str) -> None:
        with self._lock:
            self._output = value

    def run_once(self) -> int:
        """Refresh the output once and return how long to wait, in ms."""
        start = time.process_time()
        try:
            value = self.func.call()
        except Exception:
            value = None
        if value is None:
            self._set_output("")
            return self.func.interval_ms
        self._set_output(_fit(value, BUFSZ - 1)[0])
        elapsed_ms = int((time.process_time() - start) * 1000)
        return max(0, self.func.interval_ms - elapsed_ms)

    def _loop(self) -> None:
        while not self._stop_event.is_set():
            delay = self.run_once()
            self._stop_event.wait(delay / 1000)

    def start(self) -> None:
        """Start refreshing in a background thread."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop refreshing and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None


class StatusBar:
    """Collects block outputs and hands the status line to a sink."""

    def __init__(
        self,
        funcs: Sequence[Func],
        sink: Callable[[str], None] = set_root_name,
        update_interval_ms: int = UPDATE_INTERVAL_MS,
        maxlen: int = STATUS_MAXLEN,
    ) -> None:
        self.funcs = tuple(funcs)
        self.sink = sink
        self.update_interval_ms = update_interval_ms
        self.maxlen = maxlen
        self.workers = tuple(BlockWorker(func) for func in self.funcs)
        self._stopped = threading.Event()

    def render(self) -> str:
        """Build the current status line."""
        outputs = [worker.output() for worker in self.workers]
        return build_status(self.funcs, outputs, self.maxlen)

    def start(self) -> None:
        """Start all block workers."""
        for worker in self.workers:
            worker.start()

    def stop(self) -> None:
        """Stop the main loop and all block workers."""
        self._stopped.set()
        for worker in self.workers:
            worker.stop()

    def run(self) -> None:
        """Update the sink every interval until :meth:`stop` is called."""
        self._stopped.clear()
        self.start()
        try:
            while not self._stopped.wait(self.update_interval_ms / 1000):
                self.sink(self.render())
        finally:
            for worker in self.workers:
                worker.stop()


def _print_line(text: str) -> None:
    print(text, flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status bar until interrupted."""
    parser = argparse.ArgumentParser(
        prog="faststatus", description="Status line for dwm."
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="print the status line instead of setting the root window name",
    )
    args = parser.parse_args(argv)
    sink = _print_line if args.stdout else set_root_name
    bar = StatusBar(default_funcs(), sink)
    try:
        bar.run()
    except KeyboardInterrupt:
        return 0
    except (OSError, subprocess.SubprocessError) as exc:
        print(f"faststatus: cannot set status: {exc}", file=sys.stderr)
        return 1
    return 0