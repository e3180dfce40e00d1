from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from backend.core import config
from backend.storage.exam_management import AdmitCardAccessTracker, ExamScheduleStore
from backend.storage.kv_store import JsonFileStore, KeyValueStore
from backend.storage.landing_content import LandingPageContentStore

landing_router = APIRouter(tags=['landing-content'])
admit_card_router = APIRouter(tags=['admit-cards'])
exam_schedule_router = APIRouter(tags=['exam-schedule'])


@lru_cache
def get_kv_store() -> KeyValueStore:
    return JsonFileStore(config.CONTENT_STORE_PATH)


class AdmitCardAccessRequest(BaseModel):
    allowed: bool


class AllowAllRequest(BaseModel):
    student_ids: list[str]


class AdmitCardAccessResponse(BaseModel):
    student_id: str
    allowed: bool


@landing_router.get('')
def get_landing_content(store: KeyValueStore = Depends(get_kv_store)):
    return LandingPageContentStore(store).get()


@landing_router.put('')
def save_landing_content(content: dict[str, Any] = Body(...), store: KeyValueStore = Depends(get_kv_store)):
    LandingPageContentStore(store).save(content)
    return content


@landing_router.post('/reset')
def reset_landing_content(store: KeyValueStore = Depends(get_kv_store)):
    content_store = LandingPageContentStore(store)
    content_store.reset()
    return content_store.get()


@admit_card_router.get('')
def list_admit_card_access(store: KeyValueStore = Depends(get_kv_store)):
    return AdmitCardAccessTracker(store).get_all()


@admit_card_router.post('/allow-all')
def allow_all_admit_cards(data: AllowAllRequest, store: KeyValueStore = Depends(get_kv_store)):
    tracker = AdmitCardAccessTracker(store)
    tracker.allow_all(data.student_ids)
    return tracker.get_all()


@admit_card_router.get('/{student_id}', response_model=AdmitCardAccessResponse)
def get_admit_card_access(student_id: str, store: KeyValueStore = Depends(get_kv_store)):
    allowed = AdmitCardAccessTracker(store).get_access(student_id)
    return AdmitCardAccessResponse(student_id=student_id, allowed=allowed)


@admit_card_router.put('/{student_id}', response_model=AdmitCardAccessResponse)
def set_admit_card_access(
    student_id: str,
    data: AdmitCardAccessRequest,
    store: KeyValueStore = Depends(get_kv_store),
):
    tracker = AdmitCardAccessTracker(store)
    tracker.set_access(student_id, data.allowed)
    return AdmitCardAccessResponse(student_id=student_id, allowed=tracker.get_access(student_id))


@exam_schedule_router.get('')
def get_exam_schedule(store: KeyValueStore = Depends(get_kv_store)):
    return ExamScheduleStore(store).get_schedule()


@exam_schedule_router.put('')
def save_exam_schedule(schedule: dict[str, Any] = Body(...), store: KeyValueStore = Depends(get_kv_store)):
    ExamScheduleStore(store).save_schedule(schedule)
    return schedule
