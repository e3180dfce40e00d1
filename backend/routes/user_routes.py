import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth import authenticator
from backend.database import get_db
from backend.models.user import SystemUser

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)

SYSTEM_USER_ROLES = ('admin', 'finance', 'studentManager')
AVATAR_URL_TEMPLATE = 'https://ui-avatars.com/api/?name={name}'


class CreateSystemUserRequest(BaseModel):
    name: str
    email: str
    password: str
    role: str


class SystemUserResponse(BaseModel):
    id: str = Field(serialization_alias='_id')
    name: str | None = None
    email: str
    role: str
    image: str | None = None


def build_avatar_url(name: str) -> str:
    return AVATAR_URL_TEMPLATE.format(name=quote(name))


def store_failure(message: str) -> JSONResponse:
    logger.exception(message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': 'Server error'},
    )


@router.get('', response_model=list[SystemUserResponse])
def list_system_users(db: Session = Depends(get_db)):
    try:
        users = db.query(SystemUser).filter(SystemUser.role.in_(SYSTEM_USER_ROLES)).all()
    except SQLAlchemyError:
        return store_failure('Listing system users failed.')

    return [
        SystemUserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            image=user.image_url,
        )
        for user in users
    ]


@router.post('', response_model=SystemUserResponse, status_code=status.HTTP_201_CREATED)
def create_system_user(data: CreateSystemUserRequest, db: Session = Depends(get_db)):
    try:
        user = authenticator.register_system_user(
            db,
            data.name,
            data.email,
            data.password,
            data.role,
            image_url=build_avatar_url(data.name),
        )
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Creating system user failed.')

    return SystemUserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        image=user.image_url,
    )


@router.delete('/{user_id}')
def delete_system_user(user_id: int, db: Session = Depends(get_db)):
    try:
        db.query(SystemUser).filter(SystemUser.id == user_id).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Deleting system user failed.')

    return {'id': str(user_id)}
