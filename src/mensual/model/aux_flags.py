# SPDX-License-Identifier: MIT

from typing import NamedTuple


class AuxFlags(NamedTuple):
    fun_font: bool = False
