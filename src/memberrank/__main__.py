"""Allow ``python -m memberrank``."""

from .cli import app

app()
