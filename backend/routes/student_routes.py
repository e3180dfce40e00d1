import logging
import datetime as dt

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_identity, require_admin
from backend.database import get_db
from backend.models.student import Student

router = APIRouter(tags=['students'], dependencies=[Depends(get_current_identity)])

logger = logging.getLogger(__name__)


class StudentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admission_no: str | None = None
    roll_no: str | None = None
    student_name: str | None = None
    classname: str | None = None
    email: str | None = None
    contact_no: str | None = None
    gender: str | None = None
    dob: dt.date | None = None
    uses_bus: bool = Field(default=False, alias='usesBus')
    image: str | None = None


class StudentResponse(BaseModel):
    id: str = Field(serialization_alias='_id')
    admission_no: str | None = None
    roll_no: str | None = None
    student_name: str | None = None
    classname: str | None = None
    email: str | None = None
    contact_no: str | None = None
    gender: str | None = None
    dob: dt.date | None = None
    uses_bus: bool = Field(default=False, serialization_alias='usesBus')
    image: str | None = None


def to_student_response(student: Student) -> StudentResponse:
    return StudentResponse(
        id=str(student.id),
        admission_no=student.admission_no,
        roll_no=student.roll_no,
        student_name=student.student_name,
        classname=student.classname,
        email=student.email,
        contact_no=student.contact_no,
        gender=student.gender,
        dob=student.dob,
        uses_bus=bool(student.uses_bus),
        image=student.image or student.image_url,
    )


def apply_student_fields(student: Student, data: StudentRequest) -> None:
    for field_name in StudentRequest.model_fields:
        setattr(student, field_name, getattr(data, field_name))


def store_failure(message: str) -> JSONResponse:
    logger.exception(message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Server error'},
    )


@router.get('', response_model=list[StudentResponse])
def list_students(db: Session = Depends(get_db)):
    try:
        students = db.query(Student).all()
    except SQLAlchemyError:
        return store_failure('Listing students failed.')

    return [to_student_response(student) for student in students]


@router.post(
    '',
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def register_student(data: StudentRequest, db: Session = Depends(get_db)):
    # No password is set here; see backend.auth.authenticator.check_password.
    student = Student()
    apply_student_fields(student, data)

    try:
        db.add(student)
        db.commit()
        db.refresh(student)
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Registering student failed.')

    return to_student_response(student)


@router.put('/{student_id}', response_model=StudentResponse, dependencies=[Depends(require_admin)])
def update_student(student_id: int, data: StudentRequest, db: Session = Depends(get_db)):
    try:
        student = db.query(Student).filter(Student.id == student_id).first()
        if student is None:
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={'message': 'Student not found'})
        apply_student_fields(student, data)
        db.commit()
        db.refresh(student)
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Updating student failed.')

    return to_student_response(student)


@router.delete('/{student_id}', dependencies=[Depends(require_admin)])
def delete_student(student_id: int, db: Session = Depends(get_db)):
    try:
        db.query(Student).filter(Student.id == student_id).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Deleting student failed.')

    return {'message': 'Deleted', 'id': str(student_id)}
