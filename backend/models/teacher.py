"""Teacher model definitions."""

from sqlalchemy import Column, Integer, String, Text
from backend.database import Base


class Teacher(Base):
    """Represents a teacher account."""
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True)
    teacher_name = Column(String)
    email = Column(String, index=True)
    password_hash = Column(String, nullable=True)
    contact_no = Column(String)
    qualification = Column(String)
    subjects_to_teach = Column(Text)  # JSON-encoded list of subject names
    class_teacher_of = Column(String)
    joining_date = Column(String)
    image = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
