import json

from backend.storage.exam_management import (
    ADMIT_CARD_ACCESS_KEY,
    AdmitCardAccessTracker,
    ExamScheduleStore,
)
from backend.storage.kv_store import InMemoryStore

SCHEDULE = {
    'examName': 'Half Yearly',
    'examDate': '2024-09-16',
    'classname': '5',
    'subjects': [{'subject': 'Maths', 'date': '2024-09-16', 'time': '09:00', 'duration': '2h'}],
    'allowStudentDownload': True,
}


class _FailingStore:
    def get(self, key):
        raise OSError('disk unavailable')

    def set(self, key, value):
        raise OSError('disk unavailable')


def test_access_defaults_to_false_when_nothing_stored() -> None:
    tracker = AdmitCardAccessTracker(InMemoryStore())

    assert tracker.get_access('S1') is False
    assert tracker.get_all() == []


def test_set_access_grants_with_timestamp_and_revokes_without() -> None:
    tracker = AdmitCardAccessTracker(InMemoryStore())

    tracker.set_access('S1', True)
    granted = tracker.get_all()
    tracker.set_access('S1', False)
    revoked = tracker.get_all()

    assert tracker.get_access('S1') is False
    assert granted[0]['allowed'] is True
    assert granted[0]['allowedDate']
    assert revoked == [{'studentId': 'S1', 'allowed': False}]


def test_set_access_appends_new_students() -> None:
    tracker = AdmitCardAccessTracker(InMemoryStore())

    tracker.set_access('S1', True)
    tracker.set_access('S2', False)

    assert [entry['studentId'] for entry in tracker.get_all()] == ['S1', 'S2']
    assert tracker.get_access('S1') is True
    assert tracker.get_access('S2') is False


def test_allow_all_replaces_previous_grants() -> None:
    tracker = AdmitCardAccessTracker(InMemoryStore())
    tracker.set_access('S1', True)

    tracker.allow_all(['S2', 'S3'])

    assert tracker.get_access('S1') is False
    assert tracker.get_access('S2') is True
    assert [entry['studentId'] for entry in tracker.get_all()] == ['S2', 'S3']


def test_corrupt_access_list_reads_as_denied() -> None:
    store = InMemoryStore({ADMIT_CARD_ACCESS_KEY: 'not json'})
    tracker = AdmitCardAccessTracker(store)

    assert tracker.get_access('S1') is False
    assert tracker.get_all() == []


def test_access_failures_are_swallowed() -> None:
    tracker = AdmitCardAccessTracker(_FailingStore())

    tracker.set_access('S1', True)
    tracker.allow_all(['S1'])

    assert tracker.get_access('S1') is False
    assert tracker.get_all() == []


def test_exam_schedule_round_trip_and_absent_value() -> None:
    store = InMemoryStore()
    schedules = ExamScheduleStore(store)

    assert schedules.get_schedule() is None

    schedules.save_schedule(SCHEDULE)

    assert schedules.get_schedule() == SCHEDULE
    assert json.loads(store.get('examSchedule'))['examName'] == 'Half Yearly'
