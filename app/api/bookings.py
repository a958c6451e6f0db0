from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.booking import BookingCreateRequest, BookingUpdateRequest
from app.schemas.common import ERROR_RESPONSES, MessageResponse, message_response
from app.services.booking_service import booking_service

router = APIRouter(prefix="/bookings", responses=ERROR_RESPONSES)


@router.get("", summary="List bookings (newest first)")
def list_bookings(db: Session = Depends(get_db)):
    return booking_service.list_bookings(db)


@router.get("/{booking_id}", summary="Get booking by ID")
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    return booking_service.get_booking(db, booking_id)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create booking (copies car name)")
def create_booking(body: BookingCreateRequest, db: Session = Depends(get_db)):
    return booking_service.create_booking(db, body)


@router.put("/{booking_id}", summary="Update booking")
def update_booking(booking_id: int, body: BookingUpdateRequest, db: Session = Depends(get_db)):
    return booking_service.update_booking(db, booking_id, body)


@router.delete("/{booking_id}", response_model=MessageResponse, summary="Delete booking")
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    booking_service.delete_booking(db, booking_id)
    return message_response("Booking deleted successfully")
