"""Entry point for ``python -m campus_directory``."""

from campus_directory.cli.main import app

app()
