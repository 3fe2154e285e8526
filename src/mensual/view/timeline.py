# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mensual.color import POLICY_COLOR
from mensual.model.style_config import StyleConfig
from mensual.model.timeline import Timeline
from mensual.service.month_style import MONTH_STYLES, resolve
from mensual.time import (
    datetime_to_display_datetime_str,
    day_display_str,
    weekday_display_str,
)
from mensual.view.header import header


def _swatch(color: str) -> Text:
    return Text.assemble(("  ", f"on {color}"), f" {color}")


def timeline_view(timeline: Timeline) -> None:
    header("timeline")

    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right", style="bright_black")
    table.add_column("Date")
    table.add_column("Weekday")
    table.add_column("Day", justify="right")
    table.add_column("")
    table.add_column("Background")
    table.add_column("Fun font")

    for index, entry in enumerate(timeline.entries):
        style = resolve(entry.date)
        table.add_row(
            str(index),
            datetime_to_display_datetime_str(entry.date),
            Text(weekday_display_str(entry.date), style=style.weekday_text_color),
            Text(day_display_str(entry.date), style=f"bold {style.day_text_color}"),
            style.emoji_text,
            _swatch(style.background_color),
            "✓" if entry.flags.fun_font else "✗",
        )

    console.print(table)
    console.print(
        f"[{POLICY_COLOR}]refresh: {timeline.policy}"
        f" after {datetime_to_display_datetime_str(timeline.stale_after)}"
        f"[/{POLICY_COLOR}]"
    )


def style_view(label: str, style: StyleConfig) -> None:
    header("style")

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("month", label)
    table.add_row("emoji_text", style.emoji_text)
    table.add_row("background_color", _swatch(style.background_color))
    table.add_row("weekday_text_color", _swatch(style.weekday_text_color))
    table.add_row("day_text_color", _swatch(style.day_text_color))

    console.print(table)


def months_view() -> None:
    header("months")

    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("Month", justify="right")
    table.add_column("")
    table.add_column("Background")
    table.add_column("Weekday text")
    table.add_column("Day text")

    for month, style in MONTH_STYLES.items():
        table.add_row(
            str(month),
            style.emoji_text,
            _swatch(style.background_color),
            _swatch(style.weekday_text_color),
            _swatch(style.day_text_color),
        )

    console.print(table)
