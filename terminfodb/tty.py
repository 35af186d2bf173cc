"""A terminal device backed by standard input and output."""

from __future__ import annotations

import os
import signal
import sys
import termios
import threading
from typing import IO, Any, Callable

__all__ = ["StdIoTty"]

_DEFAULT_WIDTH = 80
_DEFAULT_HEIGHT = 25


def _env_int(name: str) -> int:
    try:
        return int(os.environ.get(name, ""))
    except ValueError:
        return 0


def _make_raw(attrs: list[Any]) -> list[Any]:
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    cc = list(cc)
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]


class StdIoTty:
    """Raw-mode access to a terminal through standard input and output."""

    def __init__(self, stdin: IO[Any] | None = None, stdout: IO[Any] | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._fd = self._in.fileno()
        self._out_fd = self._out.fileno()
        if not os.isatty(self._fd):
            raise OSError("not a terminal")
        try:
            self._saved = termios.tcgetattr(self._fd)
        except termios.error as exc:
            raise OSError(f"failed to get state: {exc}") from exc
        self._lock = threading.RLock()
        self._cb: Callable[[], None] | None = None
        self._old_handler: Any = None
        self._started = False

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the terminal."""
        return os.read(self._fd, size)

    def write(self, data: bytes) -> int:
        """Write ``data`` to the terminal and return the count written."""
        return os.write(self._out_fd, data)

    def close(self) -> None:
        """Release the device; standard streams stay open."""

    def start(self) -> None:
        """Enter raw mode and begin watching for window size changes."""
        with self._lock:
            if not os.isatty(self._fd):
                raise OSError("device is not a terminal")
            saved = termios.tcgetattr(self._fd)
            termios.tcsetattr(self._fd, termios.TCSANOW, _make_raw(saved))
            self._saved = saved
            self._old_handler = signal.signal(signal.SIGWINCH, self._on_resize)
            self._started = True

    def _on_resize(self, signum: int, frame: Any) -> None:
        with self._lock:
            cb = self._cb
        if cb is not None:
            cb()

    def drain(self) -> None:
        """Make pending and further reads return at once."""
        attrs = termios.tcgetattr(self._fd)
        cc = list(attrs[6])
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 0
        attrs[6] = cc
        termios.tcsetattr(self._fd, termios.TCSANOW, attrs)

    def stop(self) -> None:
        """Restore the saved terminal mode and stop watching for resizes."""
        with self._lock:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            if self._started:
                handler = self._old_handler if self._old_handler is not None else signal.SIG_DFL
                signal.signal(signal.SIGWINCH, handler)
                self._old_handler = None
                self._started = False

    def window_size(self) -> tuple[int, int]:
        """Return the terminal size as ``(width, height)``."""
        width, height = os.get_terminal_size(self._fd)
        if width == 0:
            width = _env_int("COLUMNS")
        if width == 0:
            width = _DEFAULT_WIDTH
        if height == 0:
            height = _env_int("LINES")
        if height == 0:
            height = _DEFAULT_HEIGHT
        return width, height

    def notify_resize(self, cb: Callable[[], None] | None) -> None:
        """Set the callback run when the window size changes."""
        with self._lock:
            self._cb = cb