import logging
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.car import Car
from app.schemas.car import CarCreateRequest, CarUpdateRequest
from app.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


def _serialize(c: Car) -> dict:
    return {
        "id":             c.id,
        "name":           c.name,
        "brand":          c.brand,
        "category":       c.category,
        "pricePerDay":    float(c.pricePerDay),
        "imageUrl":       c.imageUrl,
        "gallery":        list(c.gallery or []),
        "gearBox":        c.gearBox,
        "fuel":           c.fuel,
        "doors":          c.doors,
        "seats":          c.seats,
        "airConditioner": c.airConditioner,
        "distance":       c.distance,
        "equipment":      list(c.equipment or []),
        "available":      c.available,
        "createdAt":      c.createdAt.isoformat(),
    }


class CarService:

    def _get_or_404(self, db: Session, car_id: int) -> Car:
        c = db.query(Car).filter(Car.id == car_id).first()
        if not c:
            raise NotFoundException("Car")
        return c

    def list_cars(self, db: Session, brand: str | None = None, available: bool | None = None) -> list[dict]:
        q = db.query(Car)
        if brand:
            q = q.filter(func.lower(Car.brand) == brand.strip().lower())
        if available is not None:
            q = q.filter(Car.available == available)
        return [_serialize(c) for c in q.order_by(Car.id).all()]

    def list_by_category(self, db: Session, category: str) -> list[dict]:
        cars = db.query(Car)\
                 .filter(func.lower(Car.category) == category.strip().lower())\
                 .order_by(Car.id).all()
        if not cars:
            raise NotFoundException(f"Cars in category '{category}'")
        return [_serialize(c) for c in cars]

    def get_car(self, db: Session, car_id: int) -> dict:
        return _serialize(self._get_or_404(db, car_id))

    def create_car(self, db: Session, data: CarCreateRequest) -> dict:
        fields = data.model_dump()
        fields["category"] = data.category.value
        car = Car(**fields)
        db.add(car)
        db.commit()
        db.refresh(car)
        logger.info(f"Created car #{car.id} {car.brand} {car.name}")
        return _serialize(car)

    def update_car(self, db: Session, car_id: int, data: CarUpdateRequest) -> dict:
        c = self._get_or_404(db, car_id)

        for field, val in data.model_dump(exclude_unset=True).items():
            if val is None and field != "imageUrl":
                continue
            if field == "category":
                val = data.category.value
            setattr(c, field, val)

        db.commit()
        db.refresh(c)
        return _serialize(c)

    def delete_car(self, db: Session, car_id: int) -> None:
        c = self._get_or_404(db, car_id)
        db.delete(c)
        db.commit()
        logger.info(f"Deleted car #{car_id}")


car_service = CarService()
