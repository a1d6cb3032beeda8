"""
Main entry point for the moondoc CLI application.

This module sets up the Typer application and registers all commands
from the various submodules.
"""

import logging
from typing import Annotated

import typer
from dotenv import load_dotenv

from moondoc import __version__

# Import console for reconfiguration
from moondoc.cli import console as console_module
from moondoc.cli.extract import extract
from moondoc.cli.tags import list_tags

# Create the main app
app = typer.Typer(help="moondoc: extract doc entries from tagged Lua doc comments.")


def version_callback(value: bool) -> None:
    """Prints the version of the application and exits."""
    if value:
        print(f"moondoc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show the application's version and exit.",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output", envvar="NO_COLOR"),
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Use plain text output (no Unicode or colors)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log parsing details to stderr"),
    ] = False,
) -> None:
    """
    Extract documentation entries from Lua source files.
    """
    # Load environment variables from .env file
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if plain or no_color:
        console_module.console = console_module.create_console(plain=True)
        console_module.error_console = console_module.create_error_console(plain=True)


# Register all commands
app.command("extract")(extract)
app.command("tags")(list_tags)


if __name__ == "__main__":
    app()
