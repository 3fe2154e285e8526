# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def python_to_pendulum(python_value: datetime.datetime) -> pendulum.DateTime:
    """Aware values keep their timezone; naive values are read as local time."""
    if isinstance(python_value, pendulum.DateTime):
        return python_value
    return pendulum.instance(python_value, tz="local")


def weekday_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("dddd")


def day_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("D")


def datetime_to_display_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd HH:mm")


def datetime_from_str_local(datetime: str) -> pendulum.DateTime:
    """Parse a date or date-time string, reading it as local wall-clock time."""
    return cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
