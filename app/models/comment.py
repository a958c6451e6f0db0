from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Comment(Base):
    __tablename__ = "comments"

    id        = Column(Integer, primary_key=True, index=True)
    carId     = Column(Integer, ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True)
    name      = Column(String(100), nullable=False)
    text      = Column(Text, nullable=False)
    createdAt = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    car = relationship("Car", back_populates="comments")

    def __repr__(self):
        return f"<Comment id={self.id} carId={self.carId} name={self.name}>"
