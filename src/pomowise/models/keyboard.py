"""Keyboard input for the full-screen timer (Unix terminals)."""

from __future__ import annotations

import os
import re
import select
import sys
import termios
import tty
from collections import deque

# Longest first so "\x1b[A" wins over a lone Esc.
ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}

# Any other complete CSI or SS3 sequence (Home, F-keys, shifted arrows).
CONTROL_SEQUENCE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|O.)", re.DOTALL)
UNKNOWN_KEY = "unknown"

SPECIAL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\t": "tab",
    "\x1b": "esc",
    "\x7f": "backspace",
}


class TerminalError(RuntimeError):
    """The terminal could not be put into, or restored from, cbreak mode."""


def decode_keys(data: str) -> list[str]:
    """Split raw terminal input into symbolic key names.

    Arrow keys, Enter, Esc, Tab and Space get names. Other escape sequences
    decode to ``"unknown"`` so they are never mistaken for Esc. Every other
    character is returned as itself, case preserved.
    """
    keys = []
    i = 0
    while i < len(data):
        if data[i] == "\x1b":
            seq = data[i : i + 3]
            if seq in ESCAPE_SEQUENCES:
                keys.append(ESCAPE_SEQUENCES[seq])
                i += 3
                continue
            match = CONTROL_SEQUENCE.match(data, i)
            if match:
                keys.append(UNKNOWN_KEY)
                i = match.end()
                continue
        ch = data[i]
        keys.append(SPECIAL_KEYS.get(ch, ch))
        i += 1
    return keys


class KeyboardHandler:
    """Bounded-wait key reader in cbreak mode.

    Use as a context manager so the terminal is always restored.
    """

    def __init__(self, fd: int | None = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None
        self._pending: deque[str] = deque()

    def __enter__(self) -> "KeyboardHandler":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        """Put the terminal into cbreak mode."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot configure terminal: {e}") from e

    def read_key(self, timeout: float) -> str | None:
        """Wait up to *timeout* seconds for a key.

        Returns the key name, or None if the wait timed out.
        """
        if self._pending:
            return self._pending.popleft()
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(self.fd, 64)
        self._pending.extend(decode_keys(data.decode("utf-8", errors="ignore")))
        return self._pending.popleft() if self._pending else None

    def stop(self) -> None:
        """Restore the terminal settings saved by :meth:`start`."""
        if self.old_settings is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except (termios.error, OSError) as e:
            raise TerminalError(f"cannot restore terminal: {e}") from e
        finally:
            self.old_settings = None
