from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "validation"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    SERVER_ERROR = "server_error"
