# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum

from mensual.model.aux_flags import AuxFlags


class Entry(NamedTuple):
    date: pendulum.DateTime
    flags: AuxFlags = AuxFlags()
