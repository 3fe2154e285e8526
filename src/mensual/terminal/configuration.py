# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from mensual import configuration
from mensual.model.granularity import Granularity
from mensual.repository.configuration import CONFIGURATION_REPO
from mensual.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("timeline_days", str(config["timeline_days"]))
    table.add_row("timeline_hours", str(config["timeline_hours"]))
    table.add_row("granularity", config["granularity"])
    table.add_row("fun_font", "✓ Enabled" if config["fun_font"] else "✗ Disabled")
    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    timeline_days: Annotated[
        Optional[int],
        typer.Option(
            "--timeline-days",
            min=1,
            help="Number of daily entries in a generated timeline",
        ),
    ] = None,
    timeline_hours: Annotated[
        Optional[int],
        typer.Option(
            "--timeline-hours",
            min=1,
            help="Number of hourly entries in a generated timeline",
        ),
    ] = None,
    granularity: Annotated[
        Optional[Granularity],
        typer.Option(
            "--granularity",
            help="Default unit between timeline entries",
        ),
    ] = None,
    fun_font: Annotated[
        Optional[bool],
        typer.Option(
            "--fun-font/--no-fun-font",
            help="Enable/disable the fun font flag on generated entries",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header before output",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"Root log level, one of: {', '.join(configuration.LOG_LEVELS)}",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in configuration.LOG_LEVELS:
            raise typer.BadParameter(
                f"Log level must be one of: {', '.join(configuration.LOG_LEVELS)}",
                param_hint="--log-level",
            )

    CONFIGURATION_REPO.update_config(
        timeline_days=timeline_days,
        timeline_hours=timeline_hours,
        granularity=granularity.value if granularity is not None else None,
        fun_font=fun_font,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    view()
