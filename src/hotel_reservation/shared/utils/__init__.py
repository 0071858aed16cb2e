from .error_response import ErrorResponse, error_response, error_status, is_client_error
from .http_response import api_response
from .logger import get_logger

__all__ = [
    "ErrorResponse",
    "api_response",
    "error_response",
    "error_status",
    "get_logger",
    "is_client_error",
]
