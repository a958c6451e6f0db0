from pydantic import BaseModel, field_validator
from typing import Optional, Union
from decimal import Decimal
from app.utils.exceptions import InvalidMonthException


def _reject_bool_month(v):
    # JSON true/false would otherwise be coerced to 1/0 by the int branch
    if isinstance(v, bool):
        raise InvalidMonthException(v)
    return v


class IncomeCreateRequest(BaseModel):
    """month may be a number (1-12) or an English month name; the service normalizes it."""
    year:        int
    month:       Union[int, str]
    day:         int
    totalIncome: Decimal

    @field_validator("month", mode="before")
    @classmethod
    def check_month_type(cls, v):
        return _reject_bool_month(v)

    @field_validator("year")
    @classmethod
    def check_year(cls, v):
        if not (1900 <= v <= 2100): raise ValueError("Year must be between 1900 and 2100")
        return v

    @field_validator("day")
    @classmethod
    def check_day(cls, v):
        if not (1 <= v <= 31): raise ValueError("Day must be between 1 and 31")
        return v

    @field_validator("totalIncome")
    @classmethod
    def check_total(cls, v):
        if v < 0: raise ValueError("totalIncome cannot be negative")
        return v


class IncomeUpdateRequest(BaseModel):
    year:        Optional[int] = None
    month:       Optional[Union[int, str]] = None
    day:         Optional[int] = None
    totalIncome: Optional[Decimal] = None

    @field_validator("month", mode="before")
    @classmethod
    def check_month_type(cls, v):
        return _reject_bool_month(v)

    @field_validator("day")
    @classmethod
    def check_day(cls, v):
        if v is not None and not (1 <= v <= 31): raise ValueError("Day must be between 1 and 31")
        return v

    @field_validator("totalIncome")
    @classmethod
    def check_total(cls, v):
        if v is not None and v < 0: raise ValueError("totalIncome cannot be negative")
        return v
