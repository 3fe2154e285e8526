# SPDX-License-Identifier: MIT

from enum import StrEnum


class RefreshPolicy(StrEnum):
    # request a new timeline once the last entry's date has passed
    AT_END = "at_end"
