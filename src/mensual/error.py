# SPDX-License-Identifier: MIT


class MensualError(Exception):
    """Base class for recoverable errors raised by the timeline and style core."""


class InvalidArgumentError(MensualError, ValueError):
    """A caller passed an argument the core cannot work with (e.g. horizon < 1)."""


class CalendarArithmeticError(MensualError, ArithmeticError):
    """Advancing a date produced an instant the calendar cannot represent."""


class MonthLookupError(AssertionError):
    """
    A month outside 1-12 reached the style table.

    This is a defect in whatever extracted the month, so it is deliberately
    not a MensualError and should not be caught by callers.
    """
