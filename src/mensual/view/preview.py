# SPDX-License-Identifier: MIT

from typing import Iterable

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from mensual.color import NO_BACKGROUND_TEXT_COLOR
from mensual.model.entry import Entry
from mensual.service.month_style import resolve
from mensual.time import day_display_str, weekday_display_str
from mensual.view.header import header


def entry_panel(entry: Entry, show_background: bool = True) -> Panel:
    """
    Lay out one entry the way the widget does: emoji and weekday on top, the
    day of month underneath. Without a background both lines turn white.
    """
    style = resolve(entry.date)
    weekday_color = style.weekday_text_color
    day_color = style.day_text_color
    if not show_background:
        weekday_color = NO_BACKGROUND_TEXT_COLOR
        day_color = NO_BACKGROUND_TEXT_COLOR

    # the fun font has no terminal equivalent, italics stand in for it
    day_style = f"bold {day_color}"
    if entry.flags.fun_font:
        day_style += " italic"

    top = Text.assemble(
        f"{style.emoji_text} ",
        (weekday_display_str(entry.date), f"bold {weekday_color}"),
    )
    day = Align.center(Text(day_display_str(entry.date), style=day_style))

    return Panel(
        Group(top, Text(""), day, Text("")),
        width=18,
        style=f"on {style.background_color}" if show_background else "",
    )


def preview_view(entries: Iterable[Entry], show_background: bool = True) -> None:
    header("preview")

    console = Console()
    console.print(
        Columns([entry_panel(entry, show_background) for entry in entries])
    )
