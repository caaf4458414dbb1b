"""TodoStore: whole-collection persistence for todo items.

Every operation loads the full collection, applies at most one mutation,
and saves the full collection back. Nothing is cached between calls.

- ``JsonFileTodoStore``: the collection is a pretty-printed JSON array on disk.
- ``MemoryTodoStore``: keeps the collection in process; used by tests.

Each store serializes its read-modify-write cycles with a lock so threaded
servers do not lose updates. Writers in other processes are not covered.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, List, Mapping, Optional

from todo_backend.errors import NotFoundError, StoreError
from todo_backend.schemas import check_completed, check_title
from todo_backend.utils.ids import new_todo_id
from todo_backend.utils.io_utils import read_json, write_json

Todo = Dict[str, Any]

NOT_FOUND = "Todo not found"


class TodoStore:
    """Base store; subclasses provide ``_load`` and ``_save``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    # -------- persistence hooks --------

    def _load(self) -> List[Todo]:
        raise NotImplementedError

    def _save(self, todos: List[Todo]) -> None:
        raise NotImplementedError

    def _exists(self) -> bool:
        raise NotImplementedError

    def ensure(self) -> None:
        """Create an empty collection if none exists yet."""
        with self._lock:
            if not self._exists():
                self._save([])
                logging.info(f"Initialized empty todo collection in {self!r}")

    # -------- operations --------

    def list(self) -> List[Todo]:
        with self._lock:
            return self._load()

    def create(self, title: Any, completed: Any = False) -> Todo:
        title = check_title(title)
        completed = check_completed(completed)
        with self._lock:
            todos = self._load()
            todo = {
                "id": new_todo_id(t["id"] for t in todos if isinstance(t.get("id"), int)),
                "title": title,
                "completed": completed,
            }
            todos.append(todo)
            self._save(todos)
        logging.info(f"Created todo {todo['id']}")
        return todo

    def update(self, todo_id: Optional[int], fields: Mapping[str, Any]) -> Todo:
        """Apply the ``title``/``completed`` keys present in ``fields``.

        Existence is checked before the fields are validated, so an unknown id
        is reported as not found whatever the payload holds.
        """
        with self._lock:
            todos = self._load()
            todo = _find(todos, todo_id)
            if todo is None:
                raise NotFoundError(NOT_FOUND)

            changes: Dict[str, Any] = {}
            if "title" in fields:
                changes["title"] = check_title(fields["title"])
            if "completed" in fields:
                changes["completed"] = check_completed(fields["completed"])

            todo.update(changes)
            self._save(todos)
        logging.info(f"Updated todo {todo_id}: {sorted(changes)}")
        return todo

    def delete(self, todo_id: Optional[int]) -> Todo:
        with self._lock:
            todos = self._load()
            todo = _find(todos, todo_id)
            if todo is None:
                raise NotFoundError(NOT_FOUND)
            self._save([t for t in todos if t is not todo])
        logging.info(f"Deleted todo {todo_id}")
        return todo


def _find(todos: List[Todo], todo_id: Optional[int]) -> Optional[Todo]:
    if todo_id is None:
        return None
    for t in todos:
        if t.get("id") == todo_id:
            return t
    return None


class JsonFileTodoStore(TodoStore):
    def __init__(self, path: str):
        super().__init__()
        self.path = os.path.abspath(path)

    def __repr__(self) -> str:
        return f"JsonFileTodoStore({self.path!r})"

    def _exists(self) -> bool:
        return os.path.exists(self.path)

    def _load(self) -> List[Todo]:
        try:
            data = read_json(self.path, default=[])
        except (OSError, json.JSONDecodeError) as e:
            logging.error(f"Failed to read todo collection {self.path}: {e}")
            raise StoreError("Todo storage is unreadable") from e
        if not isinstance(data, list) or not all(isinstance(t, dict) for t in data):
            logging.error(f"Todo collection {self.path} is not a JSON array of objects")
            raise StoreError("Todo storage is corrupted")
        return data

    def _save(self, todos: List[Todo]) -> None:
        write_json(self.path, todos)


class MemoryTodoStore(TodoStore):
    def __init__(self, todos: Optional[List[Todo]] = None):
        super().__init__()
        self._todos: Optional[List[Todo]] = copy.deepcopy(todos) if todos is not None else None

    def __repr__(self) -> str:
        return "MemoryTodoStore()"

    def _exists(self) -> bool:
        return self._todos is not None

    def _load(self) -> List[Todo]:
        return copy.deepcopy(self._todos or [])

    def _save(self, todos: List[Todo]) -> None:
        self._todos = copy.deepcopy(todos)
