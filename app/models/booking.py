from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id            = Column(Integer, primary_key=True, index=True)
    # Nulled when the car is deleted; carName keeps the booking readable
    carType       = Column(Integer, ForeignKey("cars.id", ondelete="SET NULL"), nullable=True, index=True)
    carName       = Column(String(200), nullable=False)
    placeOfRental = Column(String(255), nullable=False)
    placeOfReturn = Column(String(255), nullable=False)
    rentalDate    = Column(TIMESTAMP(timezone=True), nullable=False)
    returnDate    = Column(TIMESTAMP(timezone=True), nullable=False)
    phoneNumber   = Column(String(30), nullable=False)
    createdAt     = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    car = relationship("Car", back_populates="bookings")

    def __repr__(self):
        return f"<Booking id={self.id} carType={self.carType} carName={self.carName}>"
