from enum import Enum
from typing import Any, Dict, Optional

from app.core.config import settings

GENERIC_FAILURE_MESSAGE = "Failed to process chain request"
UNCLASSIFIED_FAILURE_MESSAGE = "An unexpected error occurred"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    UNCLASSIFIED = "unclassified"


class CCIPError(Exception):
    """
    Failure surfaced to API callers.
    `kind` discriminates client mistakes from server-side problems and
    `status_code` is the HTTP status the response is sent with.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    @classmethod
    def validation(
        cls, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "CCIPError":
        return cls(ErrorKind.VALIDATION, message, 400, details)

    @classmethod
    def upstream(
        cls, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "CCIPError":
        return cls(ErrorKind.UPSTREAM, message, 500, details)

    @classmethod
    def unclassified(cls) -> "CCIPError":
        return cls(ErrorKind.UNCLASSIFIED, UNCLASSIFIED_FAILURE_MESSAGE, 500)

    def __repr__(self) -> str:
        return (
            f"CCIPError(kind={self.kind.value!r}, status_code={self.status_code}, "
            f"message={self.message!r})"
        )


def to_ccip_error(exc: BaseException) -> CCIPError:
    """
    Classify any raised failure.
    - CCIPError is returned unchanged.
    - An exception carrying a message becomes an upstream error with a
      fixed public message; the raw message only goes into `details`
      when EXPOSE_ERROR_DETAILS is set.
    - Anything else becomes an unclassified error with no details.
    """
    if isinstance(exc, CCIPError):
        return exc
    raw_message = str(exc).strip()
    if raw_message:
        details = {"message": raw_message} if settings.EXPOSE_ERROR_DETAILS else None
        return CCIPError.upstream(GENERIC_FAILURE_MESSAGE, details)
    return CCIPError.unclassified()
