"""
Field rules for HTML form input.

Every field validates the trimmed raw value and then sanitizes it,
whatever the outcome of validation, so a rejected form can be shown again
with the user's input intact but safe to embed in markup.
"""

import html
from enum import Enum
from typing import Any

from markupsafe import escape

from catalog.exceptions import (
    FieldError,
    FormatError,
    InvalidDateError,
    RequiredFieldError,
)
from catalog.utils.dates import parse_iso_date


def sanitize(value: Any) -> str:
    """
    Trim ``value`` and escape markup-significant characters.

    Entities already present are decoded first, so sanitizing an already
    sanitized value returns it unchanged.
    """
    text = "" if value is None else html.unescape(str(value)).strip()
    return str(escape(text))


def _first(raw: Any) -> Any:
    if isinstance(raw, (list, tuple)):
        return raw[0] if raw else None
    return raw


def _trimmed(raw: Any) -> str:
    raw = _first(raw)
    return "" if raw is None else html.unescape(str(raw)).strip()


class FormField:
    """
    A single named form input.

    Subclasses implement ``check`` which receives the raw value with its
    entities decoded and surrounding whitespace trimmed, and
    returns the cleaned value or raises a ``FieldError``.

    Attributes:
        name: Name of the form input.
    """

    def __init__(self, name: str):
        self.name = name

    def display(self, raw: Any) -> Any:
        """Sanitized value used to pre-fill the input."""
        return sanitize(_first(raw))

    def check(self, value: str) -> Any:
        raise NotImplementedError

    def process(self, raw: Any) -> tuple[Any, Any, FieldError | None]:
        """
        Validate and sanitize one raw value.

        Returns:
            Tuple of (display value, cleaned value, error or None).
        """
        display = self.display(raw)
        try:
            cleaned = self.check(_trimmed(raw))
        except FieldError as ex:
            return display, None, ex
        return display, cleaned, None


class TextField(FormField):
    """
    Required free text.

    Args:
        name: Name of the form input.
        required_message: Message when the value is empty after trimming.
        alphanumeric_message: When set, only ASCII letters and digits are
            accepted and this is the message otherwise.
        max_length: Optional upper bound on the trimmed length.
    """

    def __init__(
        self,
        name: str,
        required_message: str,
        alphanumeric_message: str | None = None,
        max_length: int | None = None,
    ):
        super().__init__(name)
        self.required_message = required_message
        self.alphanumeric_message = alphanumeric_message
        self.max_length = max_length

    def check(self, value: str) -> str:
        if not value:
            raise RequiredFieldError(self.name, self.required_message)
        if self.alphanumeric_message and not (
            value.isascii() and value.isalnum()
        ):
            raise FormatError(self.name, self.alphanumeric_message)
        if self.max_length is not None and len(value) > self.max_length:
            raise FormatError(
                self.name,
                f"{self.name.replace('_', ' ').capitalize()} must be at most "
                f"{self.max_length} characters.",
            )
        return str(escape(value))


class ReferenceField(TextField):
    """
    Required reference to another record, kept as the submitted string.

    Lexical validity of the identifier is checked when the draft is
    persisted, not here.
    """


class DateField(FormField):
    """Optional ISO-8601 date; empty means no date."""

    def __init__(self, name: str, invalid_message: str):
        super().__init__(name)
        self.invalid_message = invalid_message

    def check(self, value: str) -> Any:
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise InvalidDateError(self.name, self.invalid_message)


class ChoiceField(FormField):
    """
    One value of an Enum; empty selects ``default``.

    Args:
        name: Name of the form input.
        choices: Enum whose values are accepted.
        default: Member used when the input is absent or empty.
        invalid_message: Message for a value outside ``choices``.
    """

    def __init__(
        self,
        name: str,
        choices: type[Enum],
        default: Enum,
        invalid_message: str,
    ):
        super().__init__(name)
        self.choices = choices
        self.default = default
        self.invalid_message = invalid_message

    def display(self, raw: Any) -> str:
        return sanitize(_first(raw)) or self.default.value

    def check(self, value: str) -> Enum:
        if not value:
            return self.default
        try:
            return self.choices(value)
        except ValueError:
            raise FormatError(self.name, self.invalid_message)


class MultiValueField(FormField):
    """
    Zero or more values submitted under one name.

    Absent becomes an empty list, a single value a one-element list and a
    list is kept in order.
    """

    @staticmethod
    def normalize(raw: Any) -> list[Any]:
        if raw is None:
            return []
        if isinstance(raw, (list, tuple)):
            return list(raw)
        return [raw]

    def display(self, raw: Any) -> list[str]:
        return [sanitize(item) for item in self.normalize(raw)]

    def process(self, raw: Any) -> tuple[Any, Any, FieldError | None]:
        values = self.display(raw)
        return values, list(values), None
