"""
Custom exception classes for the application.

Every exception carries an ``http_status`` so that handlers can turn it into
a response without inspecting messages. Field-level errors are collected by
the form layer and rendered next to their inputs; they never reach the
client as an error response.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for HTML responses.
    """

    http_status: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# Field-level errors
# ============================================================================


class FieldError(AppException):
    """
    A single form field failed validation.

    Recovered locally by re-rendering the form with the message.

    Attributes:
        field: Name of the offending form field.
    """

    http_status = 200

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (type(self), self.field, self.message) == (
            type(other),
            other.field,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.field, self.message))

    def __repr__(self) -> str:
        return f"{self.kind}(field={self.field!r}, message={self.message!r})"


class RequiredFieldError(FieldError):
    """Required field is empty after trimming."""


class FormatError(FieldError):
    """Field value has characters or a value outside the allowed set."""


class InvalidDateError(FieldError):
    """Optional date field is present but not a valid calendar date."""


# ============================================================================
# Request-level errors
# ============================================================================


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a well-formed identifier matches no record.

    HTTP Status: 404 Not Found
    """

    http_status = 404


class InvalidIdentifierError(AppException):
    """
    Identifier has an invalid lexical form.

    Raised before any lookup when an identifier cannot be parsed.

    HTTP Status: 422 Unprocessable Entity
    """

    http_status = 422

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{value} is an invalid ID")


class DependencyExistsError(AppException):
    """
    Delete blocked by dependent records.

    Recovered locally by re-rendering the delete confirmation view with
    the blocking records.

    HTTP Status: 409 Conflict
    """

    http_status = 409

    def __init__(self, entity: Any, dependents: list[Any]):
        self.entity = entity
        self.dependents = dependents
        super().__init__(
            f"{type(entity).__name__} {entity.id} is still referenced by "
            f"{len(dependents)} record(s)"
        )


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
