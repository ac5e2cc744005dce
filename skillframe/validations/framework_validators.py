"""
framework_validators.py
- Purpose: Boundary checks for framework documents before they reach a codec.
- Design: Raise AppError with stable error codes for UI + logs.
"""

from skillframe.core import ErrorCode, ErrorReason
from skillframe.core.config import settings
from skillframe.core.errors import unprocessable


def validate_import_content(content: str) -> None:
    if not content or not content.strip():
        raise unprocessable("Document is empty", code=ErrorCode.IMPORT_EMPTY_DOCUMENT)

    size = len(content.encode("utf-8"))
    if size > settings.IMPORT_MAX_BYTES:
        raise unprocessable(
            "Document exceeds the import size limit",
            code=ErrorCode.IMPORT_TOO_LARGE,
            reason=ErrorReason.DOCUMENT_TOO_LARGE,
            details={"size_bytes": size, "max_bytes": settings.IMPORT_MAX_BYTES},
        )
