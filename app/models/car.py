import enum
from sqlalchemy import Column, Integer, String, Numeric, Boolean, JSON, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class CarCategory(str, enum.Enum):
    SEDAN     = "Sedan"
    CABRIOLET = "Cabriolet"
    PICKUP    = "Pickup"
    SUV       = "SUV"
    MINIVAN   = "Minivan"


class Car(Base):
    __tablename__ = "cars"

    id             = Column(Integer, primary_key=True, index=True)
    name           = Column(String(200), nullable=False)
    brand          = Column(String(100), nullable=False)
    # Stored as the display value ("SUV", "Sedan") so lookups can lower() it
    category       = Column(String(20), nullable=False, index=True)
    pricePerDay    = Column(Numeric(12, 2), nullable=False)
    imageUrl       = Column(String(500), nullable=True)
    gallery        = Column(JSON, nullable=False, default=list)
    gearBox        = Column(String(50), default="Automatic", nullable=False)
    fuel           = Column(String(50), default="Petrol", nullable=False)
    doors          = Column(Integer, default=4, nullable=False)
    seats          = Column(Integer, default=5, nullable=False)
    airConditioner = Column(Boolean, default=True, nullable=False)
    distance       = Column(Integer, default=0, nullable=False)
    equipment      = Column(JSON, nullable=False, default=list)
    available      = Column(Boolean, default=True, nullable=False)
    createdAt      = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    comments = relationship("Comment", back_populates="car",
                            cascade="all, delete-orphan", passive_deletes=True)
    bookings = relationship("Booking", back_populates="car", passive_deletes=True)

    def __repr__(self):
        return f"<Car id={self.id} name={self.name} category={self.category}>"
