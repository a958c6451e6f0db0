from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Optional


class CommentCreateRequest(BaseModel):
    carId: int
    # Older clients send the author as "author"
    name:  str = Field(validation_alias=AliasChoices("name", "author"))
    text:  str

    @field_validator("name", "text")
    @classmethod
    def check_not_empty(cls, v):
        if not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip()


class CommentUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "author"))
    text: Optional[str] = None

    @field_validator("name", "text")
    @classmethod
    def check_not_empty(cls, v):
        if v is not None and not v.strip(): raise ValueError("Field cannot be empty")
        return v.strip() if v is not None else v
