"""Email/password authentication across the system user, teacher and student tables."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from backend.auth import jwt_handler, passwords
from backend.core import config
from backend.models.student import Student
from backend.models.teacher import Teacher
from backend.models.user import SystemUser

logger = logging.getLogger(__name__)

SYSTEM_KIND = 'system'
TEACHER_ROLE = 'teacher'
STUDENT_ROLE = 'student'


class InvalidCredentials(Exception):
    """Raised for an unknown email or a wrong password alike."""


@dataclass(frozen=True)
class Identity:
    """A resolved account, tagged by the table it was found in."""

    kind: str
    record: SystemUser | Teacher | Student

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def email(self) -> str:
        return self.record.email

    @property
    def name(self) -> str | None:
        if self.kind == TEACHER_ROLE:
            return self.record.teacher_name
        if self.kind == STUDENT_ROLE:
            return self.record.student_name
        return self.record.name

    @property
    def role(self) -> str | None:
        if self.kind == SYSTEM_KIND:
            return self.record.role
        return self.kind

    @property
    def password_hash(self) -> str | None:
        return self.record.password_hash

    @property
    def image(self) -> str | None:
        return self.record.image_url or getattr(self.record, 'image', None)


@dataclass(frozen=True)
class AuthResult:
    identity: Identity
    token: str


def resolve_identity(db: Session, email: str) -> Identity | None:
    """Return the first account matching ``email``: system users, then teachers, then students."""
    system_user = db.query(SystemUser).filter(SystemUser.email == email).first()
    if system_user is not None:
        return Identity(kind=SYSTEM_KIND, record=system_user)

    teacher = db.query(Teacher).filter(Teacher.email == email).first()
    if teacher is not None:
        return Identity(kind=TEACHER_ROLE, record=teacher)

    student = db.query(Student).filter(Student.email == email).first()
    if student is not None:
        return Identity(kind=STUDENT_ROLE, record=student)

    return None


def check_password(identity: Identity, password: str) -> bool:
    if identity.password_hash:
        return passwords.verify_password(password, identity.password_hash)

    if not config.ALLOW_DEFAULT_PASSWORD:
        return False

    if password != config.DEFAULT_PASSWORD:
        return False

    logger.warning(
        'Default password accepted for %s account %s with no password set.',
        identity.kind,
        identity.id,
    )
    return True


def authenticate(db: Session, email: str, password: str) -> AuthResult:
    identity = resolve_identity(db, email)
    if identity is None or not check_password(identity, password):
        raise InvalidCredentials()

    token = jwt_handler.create_access_token(identifier=identity.id, role=identity.role)
    return AuthResult(identity=identity, token=token)


def register_system_user(db: Session, name: str, email: str, password: str, role: str, image_url: str | None = None) -> SystemUser:
    """Insert a system user with a hashed password. Duplicate emails are left to the table constraint."""
    user = SystemUser(
        name=name,
        email=email,
        password_hash=passwords.hash_password(password),
        role=role,
        image_url=image_url,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
