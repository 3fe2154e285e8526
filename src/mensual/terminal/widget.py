# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import pendulum
import typer
from rich.console import Console

from mensual.color import ERROR_COLOR
from mensual.error import MensualError
from mensual.model.aux_flags import AuxFlags
from mensual.model.granularity import Granularity
from mensual.model.mock_data import MOCK_ENTRIES
from mensual.repository.configuration import CONFIGURATION_REPO
from mensual.service.month_style import resolve, style_for_month
from mensual.service.provider import TimelineProvider
from mensual.terminal.parse import parse_datetime
from mensual.time import now_local
from mensual.view.preview import preview_view
from mensual.view.timeline import months_view, style_view, timeline_view

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, now, today, yesterday, tomorrow, or day offset like 1, -1"

error_console = Console(stderr=True)


def _fail(error: MensualError) -> NoReturn:
    error_console.print(f"[{ERROR_COLOR}]{error}[/{ERROR_COLOR}]")
    raise typer.Exit(1)


def timeline(
    at: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--at", "-a", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    horizon: Annotated[
        Optional[int],
        typer.Option(
            "--horizon",
            "-n",
            help="Number of entries (defaults to the configured timeline length)",
        ),
    ] = None,
    granularity: Annotated[
        Optional[Granularity],
        typer.Option("--granularity", "-g", help="Unit between entries"),
    ] = None,
    fun_font: Annotated[
        Optional[bool],
        typer.Option("--fun-font/--no-fun-font", help="Fun font flag for entries"),
    ] = None,
) -> None:
    """Generate and show a timeline of entries with their month styles."""
    provider = TimelineProvider(CONFIGURATION_REPO)
    flags = AuxFlags(fun_font=fun_font) if fun_font is not None else None

    try:
        result = provider.timeline(
            now=at, flags=flags, granularity=granularity, horizon=horizon
        )
    except MensualError as e:
        _fail(e)

    timeline_view(result)


def style(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Argument(parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    month: Annotated[
        Optional[int],
        typer.Option("--month", "-m", min=1, max=12, help="Month number 1-12"),
    ] = None,
) -> None:
    """Show the style for a date's month (defaults to today)."""
    if month is not None:
        style_view(pendulum.date(2000, month, 1).format("MMMM"), style_for_month(month))
        return

    if date is None:
        date = now_local()
    style_view(date.format("MMMM YYYY"), resolve(date))


def months() -> None:
    """Show the style of every month."""
    months_view()


def preview(
    mock: Annotated[
        bool,
        typer.Option("--mock/--no-mock", help="Preview the built-in sample entries"),
    ] = False,
    background: Annotated[
        bool,
        typer.Option(
            "--background/--no-background",
            help="Render with or without the month background",
        ),
    ] = True,
    at: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--at", "-a", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
) -> None:
    """Preview entries laid out like the widget."""
    if mock:
        preview_view(MOCK_ENTRIES, show_background=background)
        return

    provider = TimelineProvider(CONFIGURATION_REPO)
    try:
        entries = provider.timeline(now=at).entries
    except MensualError as e:
        _fail(e)

    preview_view(entries, show_background=background)
