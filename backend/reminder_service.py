"""
reminder_service.py
───────────────────
List / add / delete semantics on top of a ReminderStore.

Add and delete each run their load-modify-save sequence inside one store
transaction, so requests served from different threads cannot overwrite
each other's changes.
"""

import logging
from typing import Any, Dict, List

import pydantic

from errors import NotFoundError, StorageError, ValidationError
from ids import make_id
from models import ReminderIn, ReminderRef
from storage import ReminderStore

logger = logging.getLogger(__name__)


def _checked_id(body: Dict[str, Any]) -> str:
    try:
        return ReminderRef.model_validate(body).id
    except pydantic.ValidationError as e:
        # Same answer a client gets for an unparseable body
        raise ValidationError("invalid json", detail=e.errors()[0]["msg"])


class ReminderService:

    def __init__(self, store: ReminderStore):
        self._store = store

    def list(self) -> List[Dict[str, Any]]:
        return self._store.load()

    def add(self, candidate: Any) -> Dict[str, Any]:
        """
        Store a new reminder and return it with its id.

        A missing, null or empty id is replaced by a generated one. A supplied
        id is kept as is, even if another reminder already uses it.
        """
        try:
            ReminderIn.model_validate(candidate)
        except pydantic.ValidationError:
            raise ValidationError("invalid reminder shape")

        reminder = dict(candidate)
        if reminder.get("id") is not None:
            _checked_id(reminder)
        if not reminder.get("id"):
            reminder["id"] = make_id()

        with self._store.transaction() as store:
            reminders = store.load()
            reminders.append(reminder)
            if not store.save(reminders):
                raise StorageError("failed to save")

        logger.info("Added reminder %s", reminder["id"])
        return reminder

    def delete(self, body: Any) -> None:
        """Remove the first reminder whose id equals body["id"]."""
        if not isinstance(body, dict) or "id" not in body:
            raise ValidationError("missing id")
        reminder_id = _checked_id(body)

        with self._store.transaction() as store:
            reminders = store.load()
            # Entries that are not objects or carry no string id never match
            for i, reminder in enumerate(reminders):
                if isinstance(reminder, dict) and reminder.get("id") == reminder_id:
                    del reminders[i]
                    break
            else:
                raise NotFoundError("id not found")

            if not store.save(reminders):
                raise StorageError("failed to save after delete")

        logger.info("Deleted reminder %s", reminder_id)
