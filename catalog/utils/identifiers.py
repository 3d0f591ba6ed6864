"""Parsing of canonical record identifiers."""

from typing import Any
from uuid import UUID

from catalog.exceptions import InvalidIdentifierError


def parse_identifier(value: Any) -> UUID:
    """
    Parse the lexical form of a record identifier.

    Lexical validity is checked independently of existence: a well-formed
    identifier may still match no record.

    Args:
        value: Identifier as received (path segment, form value or UUID).

    Returns:
        The identifier as a UUID.

    Raises:
        InvalidIdentifierError: If ``value`` is not a UUID string.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except (TypeError, ValueError, AttributeError) as ex:
        raise InvalidIdentifierError(value) from ex


def same_identifier(left: Any, right: Any) -> bool:
    """
    Compare two identifiers by their canonical string form.

    References can arrive as UUIDs, hex strings or upper-case strings
    depending on where they were loaded from.
    """
    return _canonical(left) == _canonical(right)


def _canonical(value: Any) -> str:
    try:
        return str(parse_identifier(value))
    except InvalidIdentifierError:
        return str(value)
