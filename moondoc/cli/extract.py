"""
Extract command for the moondoc CLI.

This module contains the extract command, which scans Lua files for doc
comments, builds doc entries from them and reports every diagnostic.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as ConfigValidationError
from rich.markup import escape

from moondoc.cli import console as console_module
from moondoc.cli.formatting import display_diagnostics, display_entries
from moondoc.extractor import DocExtractor
from moondoc.serialization import entries_to_json
from moondoc.utils.config import MoondocConfig
from moondoc.utils.errors import ParsingError


def load_config(config_path: Path | None) -> MoondocConfig:
    """Load the configuration file, or the defaults when none is given."""
    if config_path is None:
        return MoondocConfig()
    if not config_path.is_file():
        raise ParsingError(
            f"Config file not found: {config_path}",
            recovery_hint="Pass an existing YAML file to --config",
        )
    return MoondocConfig.from_yaml(str(config_path))


def extract(
    path: Annotated[Path, typer.Argument(help="Path to a Lua file or directory")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON instead of a table"),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML configuration file",
            envvar="MOONDOC_CONFIG",
        ),
    ] = None,
    within: Annotated[
        str | None,
        typer.Option("--within", help="Default scope for entries without @within"),
    ] = None,
    include_private: Annotated[
        bool,
        typer.Option("--include-private", help="Keep entries tagged @private"),
    ] = False,
) -> None:
    """
    Extract doc entries from Lua files.

    Every doc comment is processed independently; all diagnostics are
    printed and the command exits with status 1 if there were any.
    """
    console = console_module.console
    try:
        config = load_config(config_path)
        if within:
            config.extractor.default_within = within
        if include_private:
            config.extractor.include_private = True

        if not path.exists():
            console.print(f"[red]Error: {path} does not exist[/red]")
            raise typer.Exit(1)

        extractor = DocExtractor(config)
        files = extractor.find_files(path)
        if not files:
            console.print(f"[red]No Lua files found in {path}[/red]")
            raise typer.Exit(1)

        result = extractor.extract_path(path)

        if json_output:
            typer.echo(
                entries_to_json(result.entries, indent=config.output.json_indent)
            )
        else:
            display_entries(result.entries, len(files), path)

        if result.has_errors:
            display_diagnostics(result.diagnostics)
            raise typer.Exit(1)

    except ParsingError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        if e.recovery_hint:
            console.print(f"[yellow]Hint:[/yellow] {e.recovery_hint}")
        raise typer.Exit(1) from None
    except ConfigValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None
