"""
storage.py
──────────
JSON file persistence for reminders.

The whole reminder list lives in one file as a JSON array.

  - threading.RLock serialises every file access (and whole
    read-modify-write sequences through ReminderStore.transaction)
  - Atomic writes: dump to "<file>.tmp", then os.replace() it over the
    old file, falling back to an in-place overwrite when rename fails
  - A missing file is created as "[]"; a corrupt or non-array file is
    read as an empty list
"""

import os
import json
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def parse_json(raw: Union[str, bytes]) -> Tuple[Any, Optional[str]]:
    """
    Parse JSON text without raising.

    Returns (value, None) on success and (None, reason) on malformed input,
    leaving the caller to decide between failing soft and reporting it.
    NaN and Infinity count as malformed.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant), None
    except ValueError as e:   # JSONDecodeError, UnicodeDecodeError
        return None, str(e)


class ReminderStore:
    """
    Owns the reminders file. Build one per data file at startup and hand it
    to whatever needs it; two stores on the same path do not share a lock.
    """

    def __init__(self, path: str):
        self.path = path
        self.tmp_path = path + ".tmp"
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["ReminderStore"]:
        """
        Hold the store lock across several load()/save() calls.

        Without it, two writers can load the same snapshot and the second
        save() silently drops the first one's change.
        """
        with self._lock:
            yield self

    # ── Read ──────────────────────────────────────────────────────────────────

    def load(self) -> List[Dict[str, Any]]:
        with self._lock:
            if not os.path.exists(self.path):
                self._create_empty()
                return []

            try:
                with open(self.path, "rb") as f:
                    raw = f.read()
            except OSError as e:
                logger.warning("Cannot read %s, treating as empty: %s", self.path, e)
                return []

            records, error = parse_json(raw)
            if error is not None:
                logger.warning("Corrupt JSON in %s, treating as empty: %s", self.path, error)
                return []
            if not isinstance(records, list):
                logger.warning("%s does not hold a JSON array, treating as empty", self.path)
                return []
            return records

    def _create_empty(self):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write("[]")
            logger.info("Initialized empty reminder storage at %s", self.path)
        except OSError as e:
            logger.warning("Cannot create %s: %s", self.path, e)

    # ── Write ─────────────────────────────────────────────────────────────────

    def save(self, records: List[Dict[str, Any]]) -> bool:
        """Replace the stored array with `records`. Returns False if nothing could be written."""
        try:
            content = json.dumps(records, indent=2, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            logger.error("Refusing to write non-JSON value to %s: %s", self.path, e)
            return False

        with self._lock:
            try:
                with open(self.tmp_path, "w", encoding="utf-8") as f:
                    f.write(content)
            except OSError as e:
                logger.error("Cannot write %s: %s", self.tmp_path, e)
                return False

            try:
                os.replace(self.tmp_path, self.path)   # Atomic on POSIX; near-atomic on Windows
            except OSError as e:
                logger.warning("Rename onto %s failed (%s), overwriting in place", self.path, e)
                return self._overwrite(content)
            return True

    def _overwrite(self, content: str) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error("Cannot overwrite %s: %s", self.path, e)
            return False

        try:
            os.remove(self.tmp_path)
        except OSError as e:
            logger.warning("Could not remove leftover %s: %s", self.tmp_path, e)
        return True
