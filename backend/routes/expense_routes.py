import logging
import datetime as dt
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.models.expense import Expense

router = APIRouter(tags=['expenses'])

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Server error'


class CreateExpenseRequest(BaseModel):
    # No validation: ISO dates and numeric strings are coerced, anything else
    # reaches the store as sent and fails there.
    title: Any = None
    amount: float | Any = Field(default=None, union_mode='left_to_right')
    category: Any = None
    description: Any = None
    date: dt.date | Any = Field(default=None, union_mode='left_to_right')


class ExpenseResponse(BaseModel):
    id: str = Field(serialization_alias='_id')
    title: str | None = None
    amount: float | None = None
    category: str | None = None
    description: str | None = None
    date: dt.date | None = None


def to_expense_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=str(expense.id),
        title=expense.title,
        amount=expense.amount,
        category=expense.category,
        description=expense.description,
        date=expense.date,
    )


def store_failure(message: str) -> JSONResponse:
    logger.exception(message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'message': SERVER_ERROR_MESSAGE},
    )


@router.get('', response_model=list[ExpenseResponse])
def list_expenses(db: Session = Depends(get_db)):
    try:
        expenses = db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc()).all()
    except SQLAlchemyError:
        return store_failure('Listing expenses failed.')

    return [to_expense_response(expense) for expense in expenses]


@router.post('', response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(data: CreateExpenseRequest, db: Session = Depends(get_db)):
    expense = Expense(
        title=data.title,
        amount=data.amount,
        category=data.category,
        description=data.description,
        date=data.date,
    )

    try:
        db.add(expense)
        db.commit()
        db.refresh(expense)
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Creating expense failed.')

    return to_expense_response(expense)


@router.delete('/{expense_id}')
def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    # No existence check: deleting an unknown id still succeeds.
    try:
        db.query(Expense).filter(Expense.id == expense_id).delete()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        return store_failure('Deleting expense failed.')

    return {'id': str(expense_id)}
