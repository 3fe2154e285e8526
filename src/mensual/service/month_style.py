# SPDX-License-Identifier: MIT

import datetime
from types import MappingProxyType
from typing import Mapping

from mensual.error import MonthLookupError
from mensual.model.style_config import StyleConfig

MONTH_STYLES: Mapping[int, StyleConfig] = MappingProxyType(
    {
        1: StyleConfig("gray70", "black", "white", "⛄️"),
        2: StyleConfig("pink1", "pink3", "red3", "❤️"),
        3: StyleConfig("green", "black", "white", "☘️"),
        4: StyleConfig("dark_blue", "white", "white", "🌧️"),
        5: StyleConfig("pink1", "gray50", "white", "🌺"),
        6: StyleConfig("cyan", "dark_blue", "white", "🌤️"),
        7: StyleConfig("blue", "black", "white", "🏖️"),
        8: StyleConfig("orange1", "gray39", "white", "☀️"),
        9: StyleConfig("dark_red", "white", "white", "🍂"),
        10: StyleConfig("orange1", "black", "white", "🎃"),
        11: StyleConfig("dark_orange", "black", "white", "🦃"),
        12: StyleConfig("red", "black", "white", "🎄"),
    }
)

if set(MONTH_STYLES) != set(range(1, 13)):
    raise MonthLookupError("Month style table must cover exactly months 1-12")


def style_for_month(month: int) -> StyleConfig:
    style = MONTH_STYLES.get(month)
    if style is None:
        raise MonthLookupError(f"Month must be between 1 and 12, got {month!r}")
    return style


def resolve(date: datetime.date) -> StyleConfig:
    """Return the style for the civil month of date, in date's own timezone."""
    return style_for_month(date.month)
