from pydantic import BaseModel, field_validator


class RegionRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if not v.strip(): raise ValueError("Region name cannot be empty")
        return v.strip()
