"""
Tags command for the moondoc CLI.

Lists every recognized tag and the doc entry kinds that accept it.
"""

from rich.table import Table

from moondoc.cli import console as console_module
from moondoc.doc_entry.class_entry import CLASS_TAG_ACTIONS
from moondoc.doc_entry.function import FUNCTION_TAG_ACTIONS
from moondoc.doc_entry.type_definition import TYPE_TAG_ACTIONS
from moondoc.parser.tags import TAG_PARSERS, CustomTag

ENTRY_ACTIONS = {
    "function": FUNCTION_TAG_ACTIONS,
    "type": TYPE_TAG_ACTIONS,
    "class": CLASS_TAG_ACTIONS,
}


def accepted_by(tag_class: type) -> list[str]:
    """Entry kinds whose builder folds ``tag_class``."""
    return [kind for kind, actions in ENTRY_ACTIONS.items() if tag_class in actions]


def list_tags() -> None:
    """
    List the recognized doc comment tags.

    Tags that are not listed are kept as custom tags on type and class entries.
    """
    console = console_module.console
    table = Table(title="Recognized tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Accepted by", style="green")

    for name, parse in TAG_PARSERS.items():
        tag_class = parse.__self__
        used = accepted_by(tag_class)
        table.add_row(f"@{name}", ", ".join(used) or "entry selection")

    table.add_row("@<other>", ", ".join(accepted_by(CustomTag)))
    console.print(table)
