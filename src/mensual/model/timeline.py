# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum

from mensual.model.entry import Entry
from mensual.model.refresh_policy import RefreshPolicy


class Timeline(NamedTuple):
    entries: tuple[Entry, ...]
    policy: RefreshPolicy

    @property
    def stale_after(self) -> pendulum.DateTime:
        """The instant after which the host should ask for a new timeline."""
        return self.entries[-1].date
