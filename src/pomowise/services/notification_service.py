"""Desktop notifications when an interval ends.

Uses ``notify-send`` on Linux and ``osascript`` on macOS. Notifications are
fire-and-forget: failures are logged and dropped.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

TITLE = "Pomodoro"


def _command(title: str, message: str) -> list[str] | None:
    if sys.platform == "darwin":
        script = f"display notification {_quote(message)} with title {_quote(title)}"
        return ["osascript", "-e", script]
    if sys.platform.startswith("linux"):
        return ["notify-send", title, message]
    return None


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def notify(title: str, message: str) -> bool:
    """Show a desktop notification without waiting for it.

    Returns True if a notifier process was launched.
    """
    cmd = _command(title, message)
    if cmd is None or shutil.which(cmd[0]) is None:
        logger.debug("no desktop notifier available on %s", sys.platform)
        return False
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.debug("notification failed: %s", e)
        return False
    return True


def notify_session_end(session_type: str) -> bool:
    """Announce that an interval of *session_type* has finished."""
    return notify(TITLE, f"{session_type} complete!")
