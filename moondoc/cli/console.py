"""
Console configuration for the moondoc CLI.

This module provides a centralized console configuration that handles
Windows terminal encoding and the NO_COLOR convention.
"""

import os
import platform
import sys

from rich.console import Console

# Fix Windows encoding issues
if platform.system() == "Windows":
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"

    if hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            if hasattr(sys.stderr, "reconfigure"):
                sys.stderr.reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            pass


def create_console(plain: bool = False) -> Console:
    """Create a Console that respects NO_COLOR and plain output requests."""
    if plain:
        return Console(
            no_color=True,
            force_terminal=False,
            highlight=False,
            emoji=False,
            markup=True,
            soft_wrap=True,
        )
    return Console(
        no_color=bool(os.environ.get("NO_COLOR")),
        highlight=False,
        markup=True,
        log_time_format="[%X]",
    )


# Create a singleton console instance
console = create_console()


def create_error_console(plain: bool = False) -> Console:
    """Console writing to stderr, for diagnostics and warnings."""
    return Console(
        stderr=True,
        no_color=plain or bool(os.environ.get("NO_COLOR")),
        highlight=False,
        markup=True,
    )


error_console = create_error_console()
