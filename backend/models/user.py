"""System user model definitions."""

from sqlalchemy import Column, Integer, String
from backend.database import Base


class SystemUser(Base):
    """Represents an administrative account (admin, finance, studentManager)."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    email = Column(String, unique=True, index=True)
    password_hash = Column(String, nullable=True)
    role = Column(String)  # admin/finance/studentManager
    image_url = Column(String, nullable=True)
