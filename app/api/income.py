from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.income import IncomeCreateRequest, IncomeUpdateRequest
from app.schemas.common import ERROR_RESPONSES, MessageResponse, message_response
from app.services.income_service import income_service

router = APIRouter(prefix="/income", responses=ERROR_RESPONSES)


@router.get("", summary="List all daily income records")
def list_incomes(db: Session = Depends(get_db)):
    return income_service.list_incomes(db)


@router.get("/{year}", summary="Income for a year, grouped by month name")
def income_for_year(year: int, db: Session = Depends(get_db)):
    return income_service.income_for_year(db, year)


@router.get("/{year}/{month}", summary="Monthly total and daily breakdown")
def income_for_month(year: int, month: str, db: Session = Depends(get_db)):
    """`month` is 1-12 or an English month name, e.g. `march`."""
    return income_service.income_for_month(db, year, month)


@router.get("/{year}/{month}/{day}", summary="Income for a single day")
def income_for_day(
    year:  int,
    month: str,
    day:   int = Path(ge=1, le=31),
    db:    Session = Depends(get_db),
):
    return income_service.income_for_day(db, year, month, day)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Record daily income")
def create_income(body: IncomeCreateRequest, db: Session = Depends(get_db)):
    return income_service.create_income(db, body)


@router.put("/{income_id}", summary="Update income record")
def update_income(income_id: int, body: IncomeUpdateRequest, db: Session = Depends(get_db)):
    return income_service.update_income(db, income_id, body)


@router.delete("/{income_id}", response_model=MessageResponse, summary="Delete income record")
def delete_income(income_id: int, db: Session = Depends(get_db)):
    income_service.delete_income(db, income_id)
    return message_response("Income deleted successfully")
