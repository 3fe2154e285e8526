# SPDX-License-Identifier: MIT

from enum import StrEnum


class Granularity(StrEnum):
    DAY = "day"
    HOUR = "hour"
