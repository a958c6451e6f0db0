from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES — Machine-readable constants for frontend switch/case
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR        = "VALIDATION_ERROR"
    NOT_FOUND               = "NOT_FOUND"
    DUPLICATE_ENTRY         = "DUPLICATE_ENTRY"
    DUPLICATE_NAME          = "DUPLICATE_NAME"
    DUPLICATE_DATE          = "DUPLICATE_DATE"
    INVALID_MONTH           = "INVALID_MONTH"
    METHOD_NOT_ALLOWED      = "METHOD_NOT_ALLOWED"
    HTTP_ERROR              = "HTTP_ERROR"
    DATABASE_ERROR          = "DATABASE_ERROR"
    INTERNAL_SERVER_ERROR   = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base exception for all application-level errors.
    Carries a machine-readable error_code for frontend handling.
    """
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str,
        details: list | None = None,
        field: str | None = None,
    ):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "error": {
                "code": error_code,
                "details": details,
                "field": field,
            }
        })

    @property
    def error_code(self) -> str:
        return self.detail["error"]["code"]


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class ValidationException(AppException):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, ErrorCode.VALIDATION_ERROR, field=field)


class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found", ErrorCode.NOT_FOUND)


class DuplicateNameException(AppException):
    def __init__(self, name: str):
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            f"Region '{name}' already exists",
            ErrorCode.DUPLICATE_NAME,
            field="name",
        )


class DuplicateDateException(AppException):
    def __init__(self, year: int, month: int, day: int):
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            f"Income exists for this date ({year}-{month:02d}-{day:02d})",
            ErrorCode.DUPLICATE_DATE,
        )


class InvalidMonthException(AppException):
    def __init__(self, value):
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            f"Invalid month: {value!r}. Use 1-12 or an English month name",
            ErrorCode.INVALID_MONTH,
            field="month",
        )
