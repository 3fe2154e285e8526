# SPDX-License-Identifier: MIT

import pendulum

from mensual.color import NO_BACKGROUND_TEXT_COLOR
from mensual.model.aux_flags import AuxFlags
from mensual.model.entry import Entry
from mensual.service.month_style import MONTH_STYLES
from mensual.view.preview import entry_panel

FEBRUARY = MONTH_STYLES[2]


def _parts(panel):
    top, _, day, _ = panel.renderable.renderables
    return top, day.renderable


class TestEntryPanel:
    def test_month_colors_with_background(self):
        panel = entry_panel(Entry(date=pendulum.datetime(2024, 2, 4, tz="UTC")))

        top, day = _parts(panel)
        assert panel.style == f"on {FEBRUARY.background_color}"
        assert top.plain == f"{FEBRUARY.emoji_text} Sunday"
        assert top.spans[0].style == f"bold {FEBRUARY.weekday_text_color}"
        assert day.plain == "4"
        assert day.style == f"bold {FEBRUARY.day_text_color}"

    def test_white_text_without_background(self):
        panel = entry_panel(
            Entry(date=pendulum.datetime(2024, 2, 4, tz="UTC")), show_background=False
        )

        top, day = _parts(panel)
        assert panel.style == ""
        assert top.spans[0].style == f"bold {NO_BACKGROUND_TEXT_COLOR}"
        assert day.style == f"bold {NO_BACKGROUND_TEXT_COLOR}"

    def test_fun_font_italicises_the_day(self):
        entry = Entry(
            date=pendulum.datetime(2024, 2, 4, tz="UTC"), flags=AuxFlags(fun_font=True)
        )

        _, day = _parts(entry_panel(entry))

        assert day.style == f"bold {FEBRUARY.day_text_color} italic"

    def test_plain_font_is_not_italic(self):
        _, day = _parts(entry_panel(Entry(date=pendulum.datetime(2024, 2, 4, tz="UTC"))))

        assert "italic" not in str(day.style)
