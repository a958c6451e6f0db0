from sqlalchemy import Column, Integer, Numeric, TIMESTAMP, UniqueConstraint, CheckConstraint
from sqlalchemy.sql import func
from app.database import Base


class Income(Base):
    """One row per calendar day; month is always stored as 1-12."""
    __tablename__ = "incomes"
    __table_args__ = (
        UniqueConstraint("year", "month", "day", name="uq_income_date"),
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_income_month"),
        CheckConstraint("day BETWEEN 1 AND 31", name="ck_income_day"),
    )

    id          = Column(Integer, primary_key=True, index=True)
    year        = Column(Integer, nullable=False, index=True)
    month       = Column(Integer, nullable=False)
    day         = Column(Integer, nullable=False)
    totalIncome = Column(Numeric(14, 2), default=0, nullable=False)
    createdAt   = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Income {self.year}-{self.month:02d}-{self.day:02d} total={self.totalIncome}>"
