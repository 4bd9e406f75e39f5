"""Allow ``python -m ragchat``."""

from .adapters.inbound.cli.commands import app

app()
