"""
Formatting utilities for CLI output.

This module contains the display helpers used by the extract command.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from moondoc.cli import console as console_module
from moondoc.doc_entry import ClassDocEntry, DocEntry, FunctionDocEntry, TypeDocEntry
from moondoc.parser.diagnostic import Diagnostic


def entry_kind(entry: DocEntry) -> str:
    if isinstance(entry, FunctionDocEntry):
        return entry.function_type.value
    if isinstance(entry, TypeDocEntry):
        return "type"
    return "class"


def entry_summary(entry: DocEntry) -> str:
    """Short description of what the entry carries."""
    if isinstance(entry, FunctionDocEntry):
        parts = [f"{len(entry.params)} params", f"{len(entry.returns)} returns"]
        if entry.deprecated is not None:
            parts.append("deprecated")
        if entry.since:
            parts.append(f"since {entry.since}")
        return ", ".join(parts)
    if isinstance(entry, TypeDocEntry):
        summary = f"{len(entry.fields)} fields"
        return f"{entry.lua_type}, {summary}" if entry.lua_type else summary
    return f"{len(entry.tags)} tags" if isinstance(entry, ClassDocEntry) else ""


def display_entries(entries: list[DocEntry], file_count: int, path: Path) -> None:
    """Print doc entries as a table."""
    console = console_module.console
    if not entries:
        console.print("[yellow]No doc entries found.[/yellow]")
        return

    title = f"Doc entries in {path}" if file_count == 1 else (
        f"Doc entries in {file_count} files from {path}"
    )
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Within", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Details", style="white", max_width=40)

    for entry in entries:
        within = getattr(entry, "within", "")
        line = entry.source.output_source.line
        table.add_row(
            escape(entry.name),
            entry_kind(entry),
            escape(within),
            str(line),
            escape(entry_summary(entry)),
        )

    console.print(table)
    console.print(f"\n[green]Found {len(entries)} doc entries[/green]")


def display_diagnostics(diagnostics: list[Diagnostic]) -> None:
    """Print every diagnostic as ``file:line:column: message`` on stderr."""
    error_console = console_module.error_console
    for diagnostic in diagnostics:
        error_console.print(
            f"[red]error[/red] {escape(diagnostic.format())}", soft_wrap=True
        )
    count = len(diagnostics)
    error_console.print(
        f"[red]{count} diagnostic{'s' if count != 1 else ''} reported[/red]"
    )
