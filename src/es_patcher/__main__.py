"""Allow `python -m es_patcher`."""

from es_patcher.cli import app

app()
