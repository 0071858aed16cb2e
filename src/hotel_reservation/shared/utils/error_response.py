from pydantic import BaseModel, ValidationError

from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    CustomerNotFoundException,
    DomainException,
    DuplicateCustomerEmailException,
    DuplicateResourceException,
    ResourceNotFoundException,
    RoomNotFoundException,
    RoomUnavailableException,
    ValidationException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


# 具体的な例外を先に並べる（先に一致したものを採用）
_ERROR_CODES: list[tuple[type[Exception], str, int]] = [
    (CustomerNotFoundException, "CUSTOMER_NOT_FOUND", 404),
    (RoomNotFoundException, "ROOM_NOT_FOUND", 404),
    (ResourceNotFoundException, "NOT_FOUND", 404),
    (RoomUnavailableException, "ROOM_UNAVAILABLE", 409),
    (BusinessRuleViolationException, "BUSINESS_RULE_VIOLATION", 409),
    (DuplicateCustomerEmailException, "DUPLICATE_CUSTOMER", 409),
    (DuplicateResourceException, "DUPLICATE_RESOURCE", 409),
    (ValidationException, "VALIDATION_ERROR", 400),
]


def is_client_error(e: Exception) -> bool:
    """呼び出し側の入力に起因するエラーかどうか"""
    return isinstance(e, (DomainException, ValidationError))


def error_status(e: Exception) -> tuple[int, str]:
    """例外を (HTTPステータス, エラーコード) に変換する"""
    if isinstance(e, ValidationError):
        return 400, "VALIDATION_ERROR"
    for exc_type, error_code, status_code in _ERROR_CODES:
        if isinstance(e, exc_type):
            return status_code, error_code
    return 500, "INTERNAL_ERROR"


def error_response(e: Exception) -> dict:
    """例外からエラーレスポンスを生成"""
    _, error_code = error_status(e)
    details = None
    if isinstance(e, ValidationError):
        details = e.errors(include_url=False, include_context=False)
    message = str(e) if error_code != "INTERNAL_ERROR" else "Internal server error"
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
