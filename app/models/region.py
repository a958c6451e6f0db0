from sqlalchemy import Column, Integer, String
from app.database import Base


class Region(Base):
    __tablename__ = "regions"

    id   = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<Region id={self.id} name={self.name}>"
