# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

import pendulum

from mensual.error import CalendarArithmeticError, InvalidArgumentError
from mensual.model.aux_flags import AuxFlags
from mensual.model.entry import Entry
from mensual.model.granularity import Granularity
from mensual.model.refresh_policy import RefreshPolicy
from mensual.model.timeline import Timeline
from mensual.time import python_to_pendulum

logger = logging.getLogger(__name__)


def generate(
    now: datetime.datetime,
    horizon: int,
    granularity: Granularity | str = Granularity.DAY,
    flags: Optional[AuxFlags] = None,
) -> Timeline:
    """
    Build a forward timeline of entries starting at now.

    Entry i is now advanced by i days or i hours. Days are added on the civil
    calendar of now's timezone and then truncated to the start of the day;
    hours are exact elapsed hours and keep now's time of day.

    Args:
        now: Reference instant. Naive values are read as local time.
        horizon: Number of entries to produce, at least 1.
        granularity: Unit between successive entries.
        flags: Auxiliary flags copied unchanged into every entry.

    Raises:
        InvalidArgumentError: horizon < 1 or an unknown granularity.
        CalendarArithmeticError: an advanced date is out of calendar range.

    Returns:
        The entries and the policy telling the host when they become stale.
    """
    if isinstance(horizon, bool) or not isinstance(horizon, int):
        raise InvalidArgumentError(f"Horizon must be an integer, got {horizon!r}")
    if horizon < 1:
        raise InvalidArgumentError(f"Horizon must be at least 1, got {horizon}")
    try:
        granularity = Granularity(granularity)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown granularity: {granularity!r}") from e

    if flags is None:
        flags = AuxFlags()
    reference = python_to_pendulum(now)

    entries = tuple(
        Entry(date=_advance(reference, offset, granularity), flags=flags)
        for offset in range(horizon)
    )

    logger.debug(
        "Generated %d %s entries from %s to %s",
        horizon,
        granularity,
        entries[0].date.isoformat(),
        entries[-1].date.isoformat(),
    )
    return Timeline(entries=entries, policy=RefreshPolicy.AT_END)


def _advance(
    reference: pendulum.DateTime, offset: int, granularity: Granularity
) -> pendulum.DateTime:
    try:
        if granularity == Granularity.DAY:
            return reference.add(days=offset).start_of("day")
        return reference.add(hours=offset)
    except (OverflowError, ValueError) as e:
        raise CalendarArithmeticError(
            f"Cannot advance {reference.isoformat()} by {offset} {granularity}(s)"
        ) from e
