# SPDX-License-Identifier: MIT

import datetime

import pendulum
import pytest

from mensual.error import CalendarArithmeticError, InvalidArgumentError, MensualError
from mensual.model.aux_flags import AuxFlags
from mensual.model.granularity import Granularity
from mensual.model.refresh_policy import RefreshPolicy
from mensual.service.timeline import generate


class TestGenerateDays:
    def test_four_days_from_midnight(self):
        now = pendulum.datetime(2024, 2, 4, tz="local")

        entries, policy = generate(now, 4, Granularity.DAY)

        assert [e.date.format("YYYY-MM-DD") for e in entries] == [
            "2024-02-04",
            "2024-02-05",
            "2024-02-06",
            "2024-02-07",
        ]
        assert all(e.date == e.date.start_of("day") for e in entries)
        assert policy == RefreshPolicy.AT_END

    def test_truncates_time_of_day(self):
        now = pendulum.datetime(2024, 5, 30, 17, 45, 12, tz="Europe/Madrid")

        timeline = generate(now, 3, "day")

        for entry in timeline.entries:
            assert (entry.date.hour, entry.date.minute, entry.date.second) == (0, 0, 0)
            assert entry.date.timezone_name == "Europe/Madrid"
        assert [e.date.day for e in timeline.entries] == [30, 31, 1]
        assert timeline.entries[-1].date.month == 6

    def test_days_follow_civil_calendar_across_dst(self):
        # US clocks spring forward on 2024-03-10
        now = pendulum.datetime(2024, 3, 9, 12, tz="America/New_York")

        entries = generate(now, 3, Granularity.DAY).entries

        assert [e.date.day for e in entries] == [9, 10, 11]
        assert all(e.date.hour == 0 for e in entries)
        # the DST day is only 23 hours long
        assert entries[2].date.timestamp() - entries[1].date.timestamp() == 23 * 3600

    def test_leap_day(self):
        now = pendulum.datetime(2024, 2, 28, 8, tz="UTC")

        entries = generate(now, 3, Granularity.DAY).entries

        assert [e.date.format("MM-DD") for e in entries] == ["02-28", "02-29", "03-01"]

    def test_default_granularity_is_day(self):
        now = pendulum.datetime(2024, 7, 1, 9, tz="UTC")

        entries = generate(now, 2).entries

        assert entries[0].date == pendulum.datetime(2024, 7, 1, tz="UTC")


class TestGenerateHours:
    def test_five_hours(self):
        now = pendulum.datetime(2024, 6, 1, 10, tz="local")

        entries, policy = generate(now, 5, Granularity.HOUR)

        assert [e.date.hour for e in entries] == [10, 11, 12, 13, 14]
        assert all(e.date.format("YYYY-MM-DD") == "2024-06-01" for e in entries)
        assert policy == RefreshPolicy.AT_END

    def test_keeps_minutes_and_seconds(self):
        now = pendulum.datetime(2024, 6, 1, 10, 17, 33, tz="UTC")

        entries = generate(now, 3, Granularity.HOUR).entries

        for index, entry in enumerate(entries):
            assert (entry.date.minute, entry.date.second) == (17, 33)
            assert entry.date.timestamp() - now.timestamp() == index * 3600

    def test_exact_hours_across_dst(self):
        now = pendulum.datetime(2024, 3, 10, 0, 30, tz="America/New_York")

        entries = generate(now, 4, Granularity.HOUR).entries

        for index, entry in enumerate(entries):
            assert entry.date.timestamp() - now.timestamp() == index * 3600
        # 02:30 does not exist that night
        assert [e.date.hour for e in entries] == [0, 1, 3, 4]

    def test_naive_datetime_is_local(self):
        now = datetime.datetime(2024, 6, 1, 10)

        entries = generate(now, 2, Granularity.HOUR).entries

        assert entries[0].date.hour == 10
        assert entries[0].date.timezone_name == pendulum.local_timezone().name


class TestGenerateContract:
    @pytest.mark.parametrize("horizon", [1, 2, 7, 31, 48])
    def test_exact_count_and_ordering(self, horizon):
        now = pendulum.datetime(2024, 12, 30, 22, tz="Asia/Tokyo")

        for granularity in Granularity:
            entries = generate(now, horizon, granularity).entries
            assert len(entries) == horizon
            dates = [e.date for e in entries]
            assert dates == sorted(dates)

    def test_flags_are_copied_to_every_entry(self):
        flags = AuxFlags(fun_font=True)

        entries = generate(pendulum.datetime(2024, 1, 1, tz="UTC"), 3, flags=flags).entries

        assert all(e.flags is flags for e in entries)

    def test_default_flags(self):
        entries = generate(pendulum.datetime(2024, 1, 1, tz="UTC"), 1).entries

        assert entries[0].flags == AuxFlags(fun_font=False)

    def test_stale_after_is_last_entry(self):
        timeline = generate(pendulum.datetime(2024, 1, 1, tz="UTC"), 7)

        assert timeline.stale_after == pendulum.datetime(2024, 1, 7, tz="UTC")

    def test_entries_are_immutable(self):
        entry = generate(pendulum.datetime(2024, 1, 1, tz="UTC"), 1).entries[0]

        with pytest.raises(AttributeError):
            entry.date = pendulum.now()  # type: ignore[misc]

    @pytest.mark.parametrize("horizon", [0, -1, -30])
    def test_non_positive_horizon(self, horizon):
        with pytest.raises(InvalidArgumentError):
            generate(pendulum.now(), horizon)

    @pytest.mark.parametrize("horizon", [True, 2.5, "3", None])
    def test_non_integer_horizon(self, horizon):
        with pytest.raises(InvalidArgumentError):
            generate(pendulum.now(), horizon)

    def test_unknown_granularity(self):
        with pytest.raises(InvalidArgumentError):
            generate(pendulum.now(), 2, "week")

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            generate(pendulum.now(), 0)


class TestCalendarOverflow:
    def test_days_past_year_9999(self):
        now = pendulum.datetime(9999, 12, 30, 12, tz="UTC")

        with pytest.raises(CalendarArithmeticError) as excinfo:
            generate(now, 3, Granularity.DAY)

        assert excinfo.value.__cause__ is not None
        assert isinstance(excinfo.value, MensualError)

    def test_hours_past_year_9999(self):
        now = pendulum.datetime(9999, 12, 31, 22, tz="UTC")

        with pytest.raises(CalendarArithmeticError):
            generate(now, 3, Granularity.HOUR)

    def test_last_representable_day_is_fine(self):
        now = pendulum.datetime(9999, 12, 30, tz="UTC")

        entries = generate(now, 2, Granularity.DAY).entries

        assert entries[-1].date.format("YYYY-MM-DD") == "9999-12-31"
