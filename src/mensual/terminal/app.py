# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mensual.logs import configure_logging
from mensual.repository.configuration import CONFIGURATION_REPO
from mensual.terminal import configuration, widget
from mensual.terminal.custom_typer import AliasedTyperGroup
from mensual.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Mensual - A month-styled day widget in the CLI",
    no_args_is_help=True,
)
app.command(name="timeline, tl")(widget.timeline)
app.command(name="preview, p")(widget.preview)
app.command(name="style, st")(widget.style)
app.command(name="months, m")(widget.months)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """
    Mensual - A month-styled day widget in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging(CONFIGURATION_REPO.get_config()["log_level"], force_debug=True)


def run() -> None:
    app()
