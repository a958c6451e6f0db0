from pydantic import BaseModel, field_validator
from typing import Optional
from decimal import Decimal
from app.models.car import CarCategory


MIN_GALLERY_IMAGES = 4


def _check_gallery(v: list[str]) -> list[str]:
    images = [url.strip() for url in v if url and url.strip()]
    if len(images) < MIN_GALLERY_IMAGES:
        raise ValueError(f"At least {MIN_GALLERY_IMAGES} images are required in the gallery.")
    return images


# ─── Requests ─────────────────────────────────────────────────────────────────
class CarCreateRequest(BaseModel):
    name:           str
    brand:          str
    category:       CarCategory
    pricePerDay:    Decimal
    imageUrl:       Optional[str] = None
    gallery:        list[str]
    gearBox:        str = "Automatic"
    fuel:           str = "Petrol"
    doors:          int = 4
    seats:          int = 5
    airConditioner: bool = True
    distance:       int = 0
    equipment:      list[str] = []
    available:      bool = True

    @field_validator("name", "brand")
    @classmethod
    def check_not_empty(cls, v):
        if not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("pricePerDay")
    @classmethod
    def check_price(cls, v):
        if v <= 0: raise ValueError("pricePerDay must be greater than 0")
        return v

    @field_validator("gallery")
    @classmethod
    def check_gallery(cls, v):
        return _check_gallery(v)

    @field_validator("doors", "seats", "distance")
    @classmethod
    def check_non_negative(cls, v):
        if v < 0: raise ValueError("Value cannot be negative")
        return v


class CarUpdateRequest(BaseModel):
    name:           Optional[str] = None
    brand:          Optional[str] = None
    category:       Optional[CarCategory] = None
    pricePerDay:    Optional[Decimal] = None
    imageUrl:       Optional[str] = None
    gallery:        Optional[list[str]] = None
    gearBox:        Optional[str] = None
    fuel:           Optional[str] = None
    doors:          Optional[int] = None
    seats:          Optional[int] = None
    airConditioner: Optional[bool] = None
    distance:       Optional[int] = None
    equipment:      Optional[list[str]] = None
    available:      Optional[bool] = None

    @field_validator("name", "brand")
    @classmethod
    def check_not_empty(cls, v):
        if v is not None and not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip() if v is not None else v

    @field_validator("pricePerDay")
    @classmethod
    def check_price(cls, v):
        if v is not None and v <= 0: raise ValueError("pricePerDay must be greater than 0")
        return v

    @field_validator("gallery")
    @classmethod
    def check_gallery(cls, v):
        return _check_gallery(v) if v is not None else v

    @field_validator("doors", "seats", "distance")
    @classmethod
    def check_non_negative(cls, v):
        if v is not None and v < 0: raise ValueError("Value cannot be negative")
        return v
