"""Typed errors raised by the stores.

The stores never know about HTTP. Each error carries an :class:`ErrorKind`
and the application maps kinds to transport status codes at the boundary.
"""
import enum


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


class TaskboardError(Exception):
    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """Malformed or missing required input."""

    kind = ErrorKind.VALIDATION


class NotFoundError(TaskboardError):
    """A referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(TaskboardError):
    """A unique name is already taken."""

    kind = ErrorKind.CONFLICT


class StorageError(TaskboardError):
    """The underlying store failed."""

    kind = ErrorKind.STORAGE
