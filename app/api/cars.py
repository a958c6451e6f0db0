from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.schemas.car import CarCreateRequest, CarUpdateRequest
from app.schemas.common import ERROR_RESPONSES, MessageResponse, message_response
from app.services.car_service import car_service

router = APIRouter(prefix="/cars", responses=ERROR_RESPONSES)


@router.get("", summary="List cars")
def list_cars(
    brand:     Optional[str]  = Query(None, description="Case-insensitive exact brand"),
    available: Optional[bool] = Query(None),
    db:        Session        = Depends(get_db),
):
    return car_service.list_cars(db, brand, available)


@router.get("/category/{category}", summary="List cars in a category (case-insensitive)")
def list_by_category(category: str, db: Session = Depends(get_db)):
    return car_service.list_by_category(db, category)


@router.get("/{car_id}", summary="Get car by ID")
def get_car(car_id: int, db: Session = Depends(get_db)):
    return car_service.get_car(db, car_id)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create car")
def create_car(body: CarCreateRequest, db: Session = Depends(get_db)):
    return car_service.create_car(db, body)


@router.put("/{car_id}", summary="Update car")
def update_car(car_id: int, body: CarUpdateRequest, db: Session = Depends(get_db)):
    return car_service.update_car(db, car_id, body)


@router.delete("/{car_id}", response_model=MessageResponse, summary="Delete car")
def delete_car(car_id: int, db: Session = Depends(get_db)):
    car_service.delete_car(db, car_id)
    return message_response("Car deleted successfully")
