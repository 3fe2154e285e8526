# SPDX-License-Identifier: MIT

import pendulum

from mensual.model.entry import Entry


def date_to_display(month: int, day: int, year: int = 2024) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, tz="local")


DAY_ONE = Entry(date=date_to_display(2, 4))
DAY_TWO = Entry(date=date_to_display(2, 5))
DAY_THREE = Entry(date=date_to_display(2, 6))
DAY_FOUR = Entry(date=date_to_display(2, 7))

MOCK_ENTRIES = (DAY_ONE, DAY_TWO, DAY_THREE, DAY_FOUR)
