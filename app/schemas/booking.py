from pydantic import BaseModel, field_validator, model_validator
from typing import Optional
from datetime import datetime, timezone


def as_utc(dt: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class BookingCreateRequest(BaseModel):
    carType:       int
    placeOfRental: str
    placeOfReturn: str
    rentalDate:    datetime
    returnDate:    datetime
    phoneNumber:   str

    @field_validator("placeOfRental", "placeOfReturn", "phoneNumber")
    @classmethod
    def check_not_empty(cls, v):
        if not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("rentalDate", "returnDate")
    @classmethod
    def to_utc(cls, v):
        return as_utc(v)

    @model_validator(mode="after")
    def check_dates(self) -> "BookingCreateRequest":
        if self.returnDate < self.rentalDate:
            raise ValueError("returnDate must not be before rentalDate")
        return self


class BookingUpdateRequest(BaseModel):
    carType:       Optional[int] = None
    placeOfRental: Optional[str] = None
    placeOfReturn: Optional[str] = None
    rentalDate:    Optional[datetime] = None
    returnDate:    Optional[datetime] = None
    phoneNumber:   Optional[str] = None

    @field_validator("placeOfRental", "placeOfReturn", "phoneNumber")
    @classmethod
    def check_not_empty(cls, v):
        if v is not None and not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip() if v is not None else v

    @field_validator("rentalDate", "returnDate")
    @classmethod
    def to_utc(cls, v):
        return as_utc(v) if v is not None else v
