"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters — import parent tables before child tables.
"""

from app.models.car import Car, CarCategory
from app.models.comment import Comment
from app.models.booking import Booking
from app.models.region import Region
from app.models.income import Income

__all__ = [
    "Car",
    "CarCategory",
    "Comment",
    "Booking",
    "Region",
    "Income",
]
