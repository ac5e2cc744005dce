"""
errors.py
- Purpose: AppError used across services/repos/codecs for consistent errors.
- Pattern: raise AppError(...) in service/codec, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status
from skillframe.core.error_codes import ErrorCode
from skillframe.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str = ErrorReason.UNKNOWN.value
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.message or self.reason

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


# Convenience constructors (keeps services and codecs terse)
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, message: str | None = None, details: dict | None = None) -> AppError:
    reason = reason.value if isinstance(reason, ErrorReason) else str(reason)
    return AppError(code=code, reason=reason, status_code=http_status.HTTP_400_BAD_REQUEST, details=details, message=message)


def unprocessable(message: str, *, code: ErrorCode, reason: str = ErrorReason.INVALID_DOCUMENT, details: dict | None = None) -> AppError:
    return AppError(
        code=code,
        reason=reason.value if isinstance(reason, ErrorReason) else str(reason),
        status_code=http_status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=details,
        message=message,
    )


def not_found(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(code=ErrorCode.NOT_FOUND, reason=ErrorReason.RESOURCE_NOT_FOUND.value, status_code=http_status.HTTP_404_NOT_FOUND, details=details, message=message)

