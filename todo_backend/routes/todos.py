"""Todo routes: GET/POST /todos, PUT/DELETE /todos/<id>

Thin handlers over the app's TodoStore. Every response carries a
``success`` flag; domain errors become ``{success: false, message}``.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request

from todo_backend.errors import TodoError, ValidationError
from todo_backend.schemas import error, ok
from todo_backend.services.todo_store import TodoStore


todos_bp = Blueprint("todos", __name__)

MALFORMED_BODY = "Malformed JSON body"
_ID_RE = re.compile(r"([+-]?[0-9]+)(?:\.0*)?", re.ASCII)


def get_store() -> TodoStore:
    return current_app.extensions["todo_store"]


def _json_body() -> Dict[str, Any]:
    """Parse the request body; only bytes that are not JSON are rejected.

    Valid JSON that is not an object (``[]``, ``"x"``, ``3``) carries no
    fields, so it reads as ``{}``.
    """
    raw = request.get_data(cache=True)
    if not raw or not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError(MALFORMED_BODY) from None
    if not isinstance(payload, dict):
        return {}
    return payload


def _parse_id(raw: str) -> Optional[int]:
    # ASCII decimal integers, optionally signed or with a zero fraction ("12.0")
    match = _ID_RE.fullmatch(raw)
    if match is None:
        return None
    return int(match.group(1))


@todos_bp.errorhandler(TodoError)
def handle_todo_error(e: TodoError):
    return jsonify(error(e.message)), e.status


@todos_bp.get("/todos")
def list_todos():
    return jsonify(ok(todos=get_store().list()))


@todos_bp.post("/todos")
def create_todo():
    payload = _json_body()
    todo = get_store().create(payload.get("title"), payload.get("completed", False))
    return jsonify(ok(todo=todo)), 201


@todos_bp.put("/todos/<todo_id>")
def update_todo(todo_id: str):
    payload = _json_body()
    todo = get_store().update(_parse_id(todo_id), payload)
    return jsonify(ok(todo=todo))


@todos_bp.delete("/todos/<todo_id>")
def delete_todo(todo_id: str):
    get_store().delete(_parse_id(todo_id))
    return jsonify(ok(message="Todo deleted"))
