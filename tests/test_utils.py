"""Tests for identifier, date and concurrency helpers."""

import asyncio
from datetime import date
from uuid import UUID, uuid4

import pytest

from catalog.exceptions import InvalidIdentifierError
from catalog.utils.concurrency import join
from catalog.utils.dates import format_long_date, ordinal, parse_iso_date
from catalog.utils.identifiers import parse_identifier, same_identifier


class TestIdentifiers:
    """Tests for parse_identifier and same_identifier."""

    def test_parse_valid(self):
        value = uuid4()

        assert parse_identifier(str(value)) == value
        assert parse_identifier(value) is value

    @pytest.mark.parametrize("value", ["", "123", "not-an-id", None])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_identifier(value)

        assert exc_info.value.http_status == 422
        assert "is an invalid ID" in exc_info.value.message

    def test_same_identifier_ignores_representation(self):
        value = uuid4()

        assert same_identifier(value, str(value).upper())
        assert same_identifier(str(value), UUID(value.hex))
        assert not same_identifier(value, uuid4())

    def test_same_identifier_with_invalid_values(self):
        assert same_identifier("abc", "abc")
        assert not same_identifier("abc", uuid4())


class TestDates:
    """Tests for date parsing and formatting."""

    @pytest.mark.parametrize(
        "day, expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"),
         (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"), (31, "31st")],
    )
    def test_ordinal(self, day, expected):
        assert ordinal(day) == expected

    def test_format_long_date(self):
        assert format_long_date(date(1902, 6, 6)) == "June 6th, 1902"
        assert format_long_date(None) == ""

    def test_parse_date_and_datetime(self):
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
        assert parse_iso_date("2024-02-29T10:15:00") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value, expected",
        [("1775", date(1775, 1, 1)), ("1775-12", date(1775, 12, 1))],
    )
    def test_parse_reduced_precision(self, value, expected):
        assert parse_iso_date(value) == expected

    @pytest.mark.parametrize(
        "value", ["2023-02-29", "29/02/2024", "soon", "1775-13", "177"]
    )
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_iso_date(value)


class TestJoin:
    """Tests for joining concurrent lookups."""

    @pytest.mark.asyncio
    async def test_results_in_order(self):
        async def value(v, delay):
            await asyncio.sleep(delay)
            return v

        assert await join(value(1, 0.02), value(2, 0)) == [1, 2]

    @pytest.mark.asyncio
    async def test_failure_fails_join_after_all_ran(self):
        finished = []

        async def fail():
            raise LookupError("boom")

        async def slow():
            await asyncio.sleep(0.01)
            finished.append(True)
            return 1

        with pytest.raises(LookupError):
            await join(fail(), slow())

        assert finished == [True]

    @pytest.mark.asyncio
    async def test_first_failure_is_raised(self):
        async def fail(ex):
            raise ex

        with pytest.raises(KeyError):
            await join(fail(KeyError("a")), fail(ValueError("b")))
