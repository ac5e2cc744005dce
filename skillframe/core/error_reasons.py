"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; they may be surfaced in the framework editor UI.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    RESOURCE_NOT_FOUND = "Resource not found"

    DATABASE_UNAVAILABLE = "Database unavailable"
    INVALID_DOCUMENT = "Invalid framework document"
    DOCUMENT_TOO_LARGE = "Framework document too large"
    UNSUPPORTED_FORMAT = "Unsupported format"
    INTERNAL_ERROR = "Internal server error"
