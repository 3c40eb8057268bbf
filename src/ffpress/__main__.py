"""Allow ``python -m ffpress``."""

from ffpress.cli import app

app()
