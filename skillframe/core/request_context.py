"""
Request/Task context helpers.

We keep a small context (request_id, task_id, role_id, operation) in
ContextVars. FastAPI middleware and Celery migration tasks both set these
values so logs from one import or one migration run are correlatable.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_task_id: ContextVar[Optional[str]] = ContextVar("task_id", default=None)
_role_id: ContextVar[Optional[str]] = ContextVar("role_id", default=None)
_operation: ContextVar[Optional[str]] = ContextVar("operation", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    task_id: Optional[str] = None,
    role_id: Optional[str] = None,
    operation: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if task_id is not None:
        _task_id.set(task_id)
    if role_id is not None:
        _role_id.set(role_id)
    if operation is not None:
        _operation.set(operation)


def clear_context() -> None:
    _request_id.set(None)
    _task_id.set(None)
    _role_id.set(None)
    _operation.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    tid = _task_id.get()
    role = _role_id.get()
    op = _operation.get()

    if rid:
        ctx["request_id"] = rid
    if tid:
        ctx["task_id"] = tid
    if role:
        ctx["role_id"] = role
    if op:
        ctx["operation"] = op
    return ctx
