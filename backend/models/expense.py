"""Expense model definitions."""

from sqlalchemy import Column, Integer, Date, Float, String, Text
from backend.database import Base


class Expense(Base):
    """Represents a single entry in the school expense ledger."""
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    title = Column(String)
    amount = Column(Float)
    category = Column(String)
    description = Column(Text)
    date = Column(Date, index=True)
