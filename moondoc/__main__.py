"""
Allow moondoc to be invoked as a module.

This enables running the CLI with:
    python -m moondoc
"""

from moondoc.cli.main import app

if __name__ == "__main__":
    app()
