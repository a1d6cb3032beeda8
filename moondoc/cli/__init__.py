"""
moondoc CLI package.

This package contains the command-line interface for moondoc.
"""

from moondoc.cli.main import app

__all__ = ["app"]
