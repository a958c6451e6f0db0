import logging
from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.car import Car
from app.schemas.booking import BookingCreateRequest, BookingUpdateRequest, as_utc
from app.utils.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)


def _serialize(b: Booking) -> dict:
    return {
        "id":            b.id,
        "carType":       b.carType,
        "carName":       b.carName,
        "placeOfRental": b.placeOfRental,
        "placeOfReturn": b.placeOfReturn,
        "rentalDate":    b.rentalDate.isoformat(),
        "returnDate":    b.returnDate.isoformat(),
        "phoneNumber":   b.phoneNumber,
        "createdAt":     b.createdAt.isoformat(),
    }


def _resolve_car(db: Session, car_id: int) -> Car:
    """Raise NotFoundException("Car") if the referenced car does not exist."""
    car = db.query(Car).filter(Car.id == car_id).first()
    if not car:
        raise NotFoundException("Car")
    return car


class BookingService:

    def _get_or_404(self, db: Session, booking_id: int) -> Booking:
        b = db.query(Booking).filter(Booking.id == booking_id).first()
        if not b:
            raise NotFoundException("Booking")
        return b

    def list_bookings(self, db: Session) -> list[dict]:
        items = db.query(Booking).order_by(Booking.createdAt.desc(), Booking.id.desc()).all()
        return [_serialize(b) for b in items]

    def get_booking(self, db: Session, booking_id: int) -> dict:
        return _serialize(self._get_or_404(db, booking_id))

    def create_booking(self, db: Session, data: BookingCreateRequest) -> dict:
        car = _resolve_car(db, data.carType)

        booking = Booking(**data.model_dump(), carName=car.name)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        logger.info(f"Booking #{booking.id} created for car #{car.id} ({car.name})")
        return _serialize(booking)

    def update_booking(self, db: Session, booking_id: int, data: BookingUpdateRequest) -> dict:
        b = self._get_or_404(db, booking_id)

        changes = data.model_dump(exclude_none=True)
        if "carType" in changes:
            # carName follows the car only at write time
            changes["carName"] = _resolve_car(db, changes["carType"]).name

        rental = changes.get("rentalDate", b.rentalDate)
        ret    = changes.get("returnDate", b.returnDate)
        if as_utc(ret) < as_utc(rental):
            raise ValidationException("returnDate must not be before rentalDate", field="returnDate")

        for field, val in changes.items():
            setattr(b, field, val)

        db.commit()
        db.refresh(b)
        return _serialize(b)

    def delete_booking(self, db: Session, booking_id: int) -> None:
        b = self._get_or_404(db, booking_id)
        db.delete(b)
        db.commit()
        logger.info(f"Booking #{booking_id} deleted")


booking_service = BookingService()
