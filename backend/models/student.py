"""Student model definitions."""

from sqlalchemy import Boolean, Column, Date, Integer, String
from backend.database import Base


class Student(Base):
    """Represents a student account."""
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    admission_no = Column(String)
    roll_no = Column(String)
    student_name = Column(String)
    classname = Column(String)
    email = Column(String, index=True)
    password_hash = Column(String, nullable=True)
    contact_no = Column(String)
    gender = Column(String)
    dob = Column(Date)
    uses_bus = Column(Boolean, default=False)
    image = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
