"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Repository failures form a closed set: every ``RepositoryError`` carries an
``ErrorKind`` plus the offending key or quantity, so callers can branch on
the kind without parsing messages.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ErrorKind(Enum):
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"
    INVALID_QUANTITY = "INVALID_QUANTITY"


class RepositoryError(DomainException):
    """Base class for failures signalled by a keyed repository."""

    kind: ErrorKind


class DuplicateKeyError(RepositoryError, ValidationError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: int) -> None:
        super().__init__(f"Item with ID {key} already exists")
        self.key = key


class NotFoundError(RepositoryError, EntityNotFoundError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: int) -> None:
        super().__init__(f"Item with ID {key} not found")
        self.key = key


class InvalidQuantityError(RepositoryError, ValidationError):
    kind = ErrorKind.INVALID_QUANTITY

    def __init__(self, value: int) -> None:
        super().__init__(f"Quantity cannot be negative, got {value}")
        self.value = value


class SnapshotError(DomainException):
    """A saved snapshot could not be read back."""
