# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

import pendulum

from mensual.model.aux_flags import AuxFlags
from mensual.model.entry import Entry
from mensual.model.granularity import Granularity
from mensual.model.timeline import Timeline
from mensual.repository.configuration import (
    CONFIGURATION_REPO,
    ConfigurationRepository,
)
from mensual.service.timeline import generate
from mensual.time import now_local, python_to_pendulum

logger = logging.getLogger(__name__)


class TimelineProvider:
    """Answers the three questions a widget host asks: placeholder, snapshot, timeline."""

    def __init__(self, repository: ConfigurationRepository = CONFIGURATION_REPO) -> None:
        self.repository = repository

    def placeholder(self, now: Optional[datetime.datetime] = None) -> Entry:
        return Entry(date=self.__reference(now))

    def snapshot(
        self,
        now: Optional[datetime.datetime] = None,
        flags: Optional[AuxFlags] = None,
    ) -> Entry:
        if flags is None:
            flags = self.configured_flags()
        return Entry(date=self.__reference(now), flags=flags)

    def timeline(
        self,
        now: Optional[datetime.datetime] = None,
        flags: Optional[AuxFlags] = None,
        granularity: Optional[Granularity | str] = None,
        horizon: Optional[int] = None,
    ) -> Timeline:
        config = self.repository.get_config()
        if granularity is None:
            granularity = config["granularity"]
        if flags is None:
            flags = self.configured_flags()

        if horizon is None:
            if granularity == Granularity.HOUR:
                horizon = config["timeline_hours"]
            else:
                horizon = config["timeline_days"]

        timeline = generate(self.__reference(now), horizon, granularity, flags)
        logger.debug("Provided %s timeline with horizon %s", granularity, horizon)
        return timeline

    def configured_flags(self) -> AuxFlags:
        return AuxFlags(fun_font=self.repository.get_config()["fun_font"])

    def __reference(self, now: Optional[datetime.datetime]) -> pendulum.DateTime:
        if now is None:
            return now_local()
        return python_to_pendulum(now)
