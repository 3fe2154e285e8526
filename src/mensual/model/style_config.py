# SPDX-License-Identifier: MIT

from typing import NamedTuple


class StyleConfig(NamedTuple):
    # Rich color names
    background_color: str
    weekday_text_color: str
    day_text_color: str
    emoji_text: str
