"""Exam schedule and admit card access, each kept as one JSON value in a key-value store."""

import json
import logging
from datetime import datetime, timezone

from backend.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

EXAM_SCHEDULE_KEY = 'examSchedule'
ADMIT_CARD_ACCESS_KEY = 'admitCardAccess'

PERSISTENCE_ERRORS = (OSError, ValueError, TypeError)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def _access_entry(student_id: str, allowed: bool) -> dict:
    entry = {'studentId': student_id, 'allowed': allowed}
    if allowed:
        entry['allowedDate'] = _utc_timestamp()
    return entry


class ExamScheduleStore:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get_schedule(self) -> dict | None:
        try:
            stored = self.store.get(EXAM_SCHEDULE_KEY)
            return json.loads(stored) if stored else None
        except PERSISTENCE_ERRORS:
            logger.exception('Error loading exam schedule.')
            return None

    def save_schedule(self, schedule: dict) -> None:
        try:
            self.store.set(EXAM_SCHEDULE_KEY, json.dumps(schedule, ensure_ascii=False))
        except PERSISTENCE_ERRORS:
            logger.exception('Error saving exam schedule.')


class AdmitCardAccessTracker:
    """Per-student admit card download permission.

    The whole list is read and rewritten on every change, so lookups are a linear scan.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def _load(self) -> list[dict]:
        stored = self.store.get(ADMIT_CARD_ACCESS_KEY)
        return json.loads(stored) if stored else []

    def _save(self, access: list[dict]) -> None:
        self.store.set(ADMIT_CARD_ACCESS_KEY, json.dumps(access))

    def get_access(self, student_id: str) -> bool:
        try:
            access = self._load()
            for entry in access:
                if entry.get('studentId') == student_id:
                    return bool(entry.get('allowed'))
        except PERSISTENCE_ERRORS + (AttributeError,):
            logger.exception('Error loading admit card access.')
        return False

    def set_access(self, student_id: str, allowed: bool) -> None:
        try:
            access = self._load()
            entry = _access_entry(student_id, allowed)
            for index, existing in enumerate(access):
                if existing.get('studentId') == student_id:
                    access[index] = entry
                    break
            else:
                access.append(entry)
            self._save(access)
        except PERSISTENCE_ERRORS + (AttributeError,):
            logger.exception('Error saving admit card access.')

    def allow_all(self, student_ids: list[str]) -> None:
        """Replace the whole list with a grant for each given student."""
        try:
            self._save([_access_entry(student_id, True) for student_id in student_ids])
        except PERSISTENCE_ERRORS:
            logger.exception('Error allowing all students.')

    def get_all(self) -> list[dict]:
        try:
            return self._load()
        except PERSISTENCE_ERRORS:
            logger.exception('Error loading all admit card access.')
            return []
