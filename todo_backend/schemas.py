"""Request/response shapes for the todo API.

Holds the field checks applied to create/update payloads and the
helpers that build the ``{success, ...}`` JSON envelopes.
"""

from __future__ import annotations

from typing import Any, Dict

from todo_backend.errors import ValidationError

INVALID_TITLE = "Invalid title"
INVALID_COMPLETED = "Invalid completed field"


def check_title(title: Any) -> str:
    if not isinstance(title, str) or not title:
        raise ValidationError(INVALID_TITLE)
    return title


def check_completed(completed: Any) -> bool:
    # bool only; JSON 0/1 arrive as int and are rejected
    if not isinstance(completed, bool):
        raise ValidationError(INVALID_COMPLETED)
    return completed


def ok(**fields: Any) -> Dict[str, Any]:
    return {"success": True, **fields}


def error(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}
