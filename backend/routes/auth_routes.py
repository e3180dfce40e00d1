import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth import authenticator
from backend.auth.dependencies import get_current_identity
from backend.database import get_db

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    id: str = Field(serialization_alias='_id')
    name: str | None = None
    email: str
    role: str | None = None
    token: str
    image: str | None = None


class RegisterAdminRequest(BaseModel):
    name: str
    email: str
    password: str
    role: str = 'admin'


@router.post('/login', response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        result = authenticator.authenticate(db, data.email, data.password)
    except authenticator.InvalidCredentials:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={'message': 'Invalid credentials'},
        )
    except SQLAlchemyError:
        logger.exception('Login lookup failed.')
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'message': 'Server error'},
        )

    identity = result.identity
    return LoginResponse(
        id=str(identity.id),
        name=identity.name,
        email=identity.email,
        role=identity.role,
        token=result.token,
        image=identity.image,
    )


@router.post('/register-admin')
def register_admin(data: RegisterAdminRequest, db: Session = Depends(get_db)):
    try:
        authenticator.register_system_user(db, data.name, data.email, data.password, data.role)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Admin registration failed.')
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'error': str(exc.orig) if getattr(exc, 'orig', None) else str(exc)},
        )
    return {'message': 'Admin registered'}


@router.get('/me')
def me(current_identity: dict = Depends(get_current_identity)):
    return current_identity
