"""Domain errors raised by the todo store and mapped to HTTP responses."""

from __future__ import annotations


class TodoError(Exception):
    """Base error; ``status`` is the HTTP status the router answers with."""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoError):
    """A request field is missing or has the wrong type."""

    status = 400


class NotFoundError(TodoError):
    """No todo matches the requested id."""

    status = 404


class StoreError(TodoError):
    """The persisted collection could not be read."""

    status = 500
