import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_identity, require_admin
from backend.database import get_db
from backend.models.teacher import Teacher

router = APIRouter(tags=['teachers'], dependencies=[Depends(get_current_identity)])

logger = logging.getLogger(__name__)


class TeacherRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    teacher_name: str | None = None
    email: str | None = None
    contact_no: str | None = None
    qualification: str | None = None
    subjects_to_teach: list[str] = Field(default_factory=list, alias='subjectsToTeach')
    class_teacher_of: str | None = Field(default=None, alias='classTeacherOf')
    joining_date: str | None = None
    image: str | None = None


class TeacherResponse(BaseModel):
    id: str = Field(serialization_alias='_id')
    teacher_name: str | None = None
    email: str | None = None
    contact_no: str | None = None
    qualification: str | None = None
    subjects_to_teach: list[str] = Field(default_factory=list, serialization_alias='subjectsToTeach')
    class_teacher_of: str | None = Field(default=None, serialization_alias='classTeacherOf')
    joining_date: str | None = None
    image: str | None = None


def parse_subjects(raw: str | None) -> list[str]:
    """Decode the stored subject list, accepting JSON or a plain comma-separated string."""
    if not raw:
        return []
    try:
        subjects = json.loads(raw)
    except ValueError:
        cleaned = raw
        for character in '[]"\'':
            cleaned = cleaned.replace(character, '')
        return [subject.strip() for subject in cleaned.split(',') if subject.strip()]
    if isinstance(subjects, list):
        return [str(subject) for subject in subjects]
    return [str(subjects)]


def to_teacher_response(teacher: Teacher) -> TeacherResponse:
    return TeacherResponse(
        id=str(teacher.id),
        teacher_name=teacher.teacher_name,
        email=teacher.email,
        contact_no=teacher.contact_no,
        qualification=teacher.qualification,
        subjects_to_teach=parse_subjects(teacher.subjects_to_teach),
        class_teacher_of=teacher.class_teacher_of,
        joining_date=teacher.joining_date,
        image=teacher.image or teacher.image_url,
    )


def apply_teacher_fields(teacher: Teacher, data: TeacherRequest) -> None:
    teacher.teacher_name = data.teacher_name
    teacher.email = data.email
    teacher.contact_no = data.contact_no
    teacher.qualification = data.qualification
    teacher.subjects_to_teach = json.dumps(data.subjects_to_teach)
    teacher.class_teacher_of = data.class_teacher_of
    teacher.image = data.image


def store_failure(message: str) -> JSONResponse:
    logger.exception(message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Server error'},
    )


@router.get('', response_model=list[TeacherResponse])
def list_teachers(db: Session = Depends(get_db)):
    try:
        teachers = db.query(Teacher).all()
    except SQLAlchemyError:
        return store_failure('Listing teachers failed.')

    return [to_teacher_response(teacher) for teacher in teachers]


@router.post(
    '',
    response_model=TeacherResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def register_teacher(data: TeacherRequest, db: Session = Depends(get_db)):
    # Registered without a password; the account signs in with the default password until one is set.
    teacher = Teacher(joining_date=data.joining_date or datetime.now(timezone.utc).isoformat())
    apply_teacher_fields(teacher, data)

    try:
        db.add(teacher)
        db.commit()
        db.refresh(teacher)
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Registering teacher failed.')

    return to_teacher_response(teacher)


@router.put('/{teacher_id}', response_model=TeacherResponse, dependencies=[Depends(require_admin)])
def update_teacher(teacher_id: int, data: TeacherRequest, db: Session = Depends(get_db)):
    try:
        teacher = db.query(Teacher).filter(Teacher.id == teacher_id).first()
        if teacher is None:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={'message': 'Teacher not found'})
        apply_teacher_fields(teacher, data)
        db.commit()
        db.refresh(teacher)
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Updating teacher failed.')

    return to_teacher_response(teacher)


@router.delete('/{teacher_id}', dependencies=[Depends(require_admin)])
def delete_teacher(teacher_id: int, db: Session = Depends(get_db)):
    try:
        db.query(Teacher).filter(Teacher.id == teacher_id).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Deleting teacher failed.')

    return {'message': 'Deleted', 'id': str(teacher_id)}
