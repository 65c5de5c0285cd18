"""
Save-game persistence.

Snapshots are stored as one JSON document per key inside a directory; the
document is :meth:`ProgressState.to_dict` plus a ``lastSaveTime`` field.
Storage failures are logged and reported through the return value, never
raised.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path

from tycoonengine.state import ProgressState

__all__ = ["DEFAULT_SAVE_KEY", "SaveStore"]

log = logging.getLogger(__name__)

DEFAULT_SAVE_KEY = "budongsan-tycoon-save"

_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


@dataclass(slots=True)
class SaveStore:
    """Directory-backed key → snapshot store."""

    directory: Path

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)

    def path_for(self, key: str) -> Path:
        if not _KEY_RE.fullmatch(key):
            raise ValueError(
                f"Invalid save key {key!r}: use letters, digits, '.', '_' or '-'"
            )
        return self.directory / f"{key}.json"

    def save(self, key: str, state: ProgressState, now: float | None = None) -> bool:
        """
        Write *state* under *key*.

        The file is replaced atomically so an interrupted write never leaves
        a truncated snapshot behind.

        Returns
        -------
        bool
            True on success, False if the snapshot could not be written.
        """
        payload = state.to_dict()
        payload["lastSaveTime"] = time.time() if now is None else now
        try:
            path = self.path_for(key)
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(payload, fh, ensure_ascii=False)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            log.error("Failed to save game '%s': %s", key, exc)
            return False
        log.debug("Game saved to %s", path)
        return True

    def load(self, key: str, now: float | None = None) -> ProgressState | None:
        """
        Read the snapshot stored under *key*.

        ``game_start_time`` is reset to *now*: play time restarts with every
        session while cumulative totals carry over.

        Returns
        -------
        ProgressState or None
            None when there is no snapshot or it cannot be read.
        """
        try:
            path = self.path_for(key)
            if not path.exists():
                log.info("No saved game '%s'; starting fresh", key)
                return None
            with path.open("rt", encoding="utf-8") as fh:
                data = json.load(fh)
            if not isinstance(data, dict):
                raise TypeError(f"snapshot root must be an object, got {type(data).__name__}")
            state = ProgressState.from_dict(data)
        except (OSError, TypeError, ValueError) as exc:
            log.error("Failed to load game '%s': %s", key, exc)
            return None

        state.game_start_time = time.time() if now is None else now
        log.info("Saved game '%s' loaded", key)
        return state

    def delete(self, key: str) -> bool:
        """Remove the snapshot under *key*; True if nothing is left behind."""
        try:
            self.path_for(key).unlink(missing_ok=True)
        except (OSError, ValueError) as exc:
            log.error("Failed to delete saved game '%s': %s", key, exc)
            return False
        return True
