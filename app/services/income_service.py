import logging
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.income import Income
from app.schemas.income import IncomeCreateRequest, IncomeUpdateRequest
from app.utils.exceptions import NotFoundException, DuplicateDateException
from app.utils.months import normalize_month, month_name

logger = logging.getLogger(__name__)


def _serialize(i: Income) -> dict:
    return {
        "id":          i.id,
        "year":        i.year,
        "month":       i.month,
        "monthName":   month_name(i.month),
        "day":         i.day,
        "totalIncome": float(i.totalIncome),
        "createdAt":   i.createdAt.isoformat(),
    }


class IncomeService:
    """
    Daily income records. One row per (year, month, day), enforced by the
    uq_income_date constraint; month is accepted as a name or number and
    stored as 1-12.
    """

    def _get_or_404(self, db: Session, income_id: int) -> Income:
        i = db.query(Income).filter(Income.id == income_id).first()
        if not i:
            raise NotFoundException("Income")
        return i

    def _commit_unique(self, db: Session, income: Income) -> None:
        """Commit, translating a unique-date violation into DuplicateDateException."""
        # Read before commit; rollback expires the instance
        year, month, day = income.year, income.month, income.day
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Duplicate income for {year}-{month:02d}-{day:02d}: {e.orig}")
            raise DuplicateDateException(year, month, day)

    def list_incomes(self, db: Session) -> list[dict]:
        items = db.query(Income).order_by(Income.year, Income.month, Income.day).all()
        return [_serialize(i) for i in items]

    def create_income(self, db: Session, data: IncomeCreateRequest) -> dict:
        income = Income(
            year=data.year,
            month=normalize_month(data.month),
            day=data.day,
            totalIncome=data.totalIncome,
        )
        db.add(income)
        # No pre-check: concurrent creates are settled by the constraint
        self._commit_unique(db, income)
        db.refresh(income)
        logger.info(f"Income recorded for {income.year}-{income.month:02d}-{income.day:02d}")
        return _serialize(income)

    def income_for_year(self, db: Session, year: int) -> dict[str, list[dict]]:
        items = db.query(Income)\
                  .filter(Income.year == year)\
                  .order_by(Income.month, Income.day).all()
        if not items:
            raise NotFoundException(f"Income for {year}")

        grouped: dict[str, list[dict]] = {}
        for i in items:
            grouped.setdefault(month_name(i.month), []).append(_serialize(i))
        return grouped

    def income_for_month(self, db: Session, year: int, month: int | str) -> dict:
        number = normalize_month(month)
        items = db.query(Income)\
                  .filter(Income.year == year, Income.month == number)\
                  .order_by(Income.day).all()
        if not items:
            raise NotFoundException(f"Income for {month_name(number)} {year}")

        total = sum((Decimal(i.totalIncome) for i in items), Decimal("0"))
        return {
            "year":               year,
            "month":              number,
            "monthName":          month_name(number),
            "totalMonthlyIncome": float(total),
            "dailyIncomes":       [_serialize(i) for i in items],
        }

    def income_for_day(self, db: Session, year: int, month: int | str, day: int) -> dict:
        number = normalize_month(month)
        i = db.query(Income).filter(
            Income.year == year,
            Income.month == number,
            Income.day == day,
        ).first()
        if not i:
            raise NotFoundException("Income")
        return _serialize(i)

    def update_income(self, db: Session, income_id: int, data: IncomeUpdateRequest) -> dict:
        i = self._get_or_404(db, income_id)

        changes = data.model_dump(exclude_none=True)
        if "month" in changes:
            changes["month"] = normalize_month(changes["month"])
        for field, val in changes.items():
            setattr(i, field, val)

        self._commit_unique(db, i)
        db.refresh(i)
        return _serialize(i)

    def delete_income(self, db: Session, income_id: int) -> None:
        i = self._get_or_404(db, income_id)
        db.delete(i)
        db.commit()
        logger.info(f"Income #{income_id} deleted")


income_service = IncomeService()
