# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from mensual.terminal.parse import parse_datetime


class TestParseDatetime:
    def test_none(self):
        assert parse_datetime(None) is None

    def test_date(self):
        assert parse_datetime("2024-02-04") == pendulum.datetime(2024, 2, 4, tz="local")

    def test_date_and_time(self):
        assert parse_datetime("2024-06-01 10:00") == pendulum.datetime(
            2024, 6, 1, 10, tz="local"
        )

    def test_time_only_is_today(self):
        parsed = parse_datetime("7:05")

        assert parsed is not None
        assert parsed.date() == pendulum.today("local").date()
        assert (parsed.hour, parsed.minute) == (7, 5)

    def test_day_offset(self):
        parsed = parse_datetime("1")

        assert parsed == pendulum.today("local").add(days=1)

    def test_integer_offset(self):
        assert parse_datetime(-1) == pendulum.today("local").subtract(days=1)

    @pytest.mark.parametrize("value", ["today", "t"])
    def test_today(self, value):
        assert parse_datetime(value) == pendulum.today("local")

    @pytest.mark.parametrize("value", ["tomorrow", "o"])
    def test_tomorrow(self, value):
        assert parse_datetime(value) == pendulum.tomorrow("local")

    @pytest.mark.parametrize("value", ["yesterday", "y"])
    def test_yesterday(self, value):
        assert parse_datetime(value) == pendulum.yesterday("local")

    @pytest.mark.parametrize("value", ["24:00", "12:60", "soon", "2024-13-01"])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter):
            parse_datetime(value)
