"""Tests for the application exception hierarchy."""

import pytest

from catalog.exceptions import (
    AppException,
    DatabaseError,
    DependencyExistsError,
    FieldError,
    FormatError,
    InvalidDateError,
    InvalidIdentifierError,
    NotFoundError,
    RequiredFieldError,
)
from catalog.models import Genre


@pytest.mark.parametrize(
    "exception, status",
    [
        (NotFoundError("Genre 1 not found"), 404),
        (InvalidIdentifierError("abc"), 422),
        (DatabaseError("Connection failed"), 500),
        (AppException("Something failed"), 500),
    ],
)
def test_http_status(exception, status):
    assert exception.http_status == status


def test_invalid_identifier_message():
    ex = InvalidIdentifierError("abc")

    assert ex.value == "abc"
    assert ex.message == "abc is an invalid ID"


def test_dependency_exists_carries_records():
    genre = Genre(name="Poetry")
    dependents = [object(), object()]

    ex = DependencyExistsError(genre, dependents)

    assert ex.http_status == 409
    assert ex.entity is genre
    assert ex.dependents == dependents
    assert "2 record(s)" in ex.message


class TestFieldError:
    def test_subclasses(self):
        for cls in (RequiredFieldError, FormatError, InvalidDateError):
            assert issubclass(cls, FieldError)
            assert issubclass(cls, AppException)

    def test_equality_by_kind_field_and_message(self):
        assert RequiredFieldError("title", "Title must not be empty.") == (
            RequiredFieldError("title", "Title must not be empty.")
        )
        assert RequiredFieldError("title", "x") != FormatError("title", "x")
        assert RequiredFieldError("title", "x") != RequiredFieldError("isbn", "x")

    def test_kind_and_repr(self):
        error = InvalidDateError("due_back", "Invalid date")

        assert error.kind == "InvalidDateError"
        assert repr(error) == (
            "InvalidDateError(field='due_back', message='Invalid date')"
        )
