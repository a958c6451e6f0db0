from pydantic import BaseModel


# ─── Error Detail (per field) ──────────────────────────────────────────────────
class ErrorDetail(BaseModel):
    field: str
    message: str


# ─── Error Body ───────────────────────────────────────────────────────────────
class ErrorBody(BaseModel):
    code: str
    details: list[ErrorDetail] | None = None
    field: str | None = None


# ─── Error Response ───────────────────────────────────────────────────────────
class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: ErrorBody


# ─── Message Response ─────────────────────────────────────────────────────────
class MessageResponse(BaseModel):
    success: bool = True
    message: str


def message_response(message: str) -> dict:
    """Return a standardized body for endpoints that have no entity to send back."""
    return {"success": True, "message": message}


# Shared `responses=` map for routes that can fail with 400/404
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation or uniqueness error"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
}
