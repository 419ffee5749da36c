"""Status file shared with other processes.

The running timer overwrites a small JSON file with the current
:class:`StatusSnapshot`; other processes (``pomowise status``, a tray icon)
poll it. There is no locking, so readers must expect torn or missing files
and simply try again on the next poll.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from pomowise.models.timer.snapshot import StatusSnapshot

logger = logging.getLogger(__name__)


class StatusService:
    """Read and write the status file at *path*."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def write(self, snapshot: StatusSnapshot) -> bool:
        """Overwrite the status file. I/O errors are logged and skipped.

        Returns True when the file was written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(f".{self.path.name}.{os.getpid()}.tmp")
            tmp.write_text(snapshot.model_dump_json(), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.warning("could not write status file %s: %s", self.path, e)
            return False
        return True

    def read(self) -> StatusSnapshot:
        """Read the status file.

        Raises:
            FileNotFoundError: If no timer is publishing status
            ValueError: If the file is torn or does not match the schema
        """
        text = self.path.read_text(encoding="utf-8")
        try:
            return StatusSnapshot.model_validate_json(text)
        except ValidationError as e:
            raise ValueError(f"Invalid status file {self.path}: {e}") from e

    def poll(self) -> StatusSnapshot | None:
        """Read the status file, returning None if it is missing or unreadable."""
        try:
            return self.read()
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.debug("status poll skipped: %s", e)
            return None

    def cleanup(self) -> None:
        """Remove the status file on clean exit."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not remove status file %s: %s", self.path, e)


class StatusPublisher:
    """Writes snapshots through a :class:`StatusService` only when they change."""

    def __init__(self, service: StatusService):
        self.service = service
        self._last: StatusSnapshot | None = None

    def publish(self, snapshot: StatusSnapshot) -> bool:
        """Write *snapshot* if it differs from the last one written."""
        if snapshot == self._last:
            return False
        if self.service.write(snapshot):
            self._last = snapshot
            return True
        return False

    def close(self) -> None:
        self.service.cleanup()
        self._last = None
