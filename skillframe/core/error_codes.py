# skillframe/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DB_ERROR = "DB_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Framework import
    IMPORT_EMPTY_DOCUMENT = "IMPORT_EMPTY_DOCUMENT"
    IMPORT_TOO_LARGE = "IMPORT_TOO_LARGE"
    IMPORT_INVALID_JSON = "IMPORT_INVALID_JSON"
    IMPORT_MISSING_COMPETENCIES = "IMPORT_MISSING_COMPETENCIES"
    IMPORT_INVALID_STRUCTURE = "IMPORT_INVALID_STRUCTURE"
    IMPORT_NO_COMPETENCIES = "IMPORT_NO_COMPETENCIES"

    # Export
    EXPORT_UNSUPPORTED_FORMAT = "EXPORT_UNSUPPORTED_FORMAT"
