# skillframe/core/__init__.py
from skillframe.core.errors import AppError
from skillframe.core.error_codes import ErrorCode
from skillframe.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
