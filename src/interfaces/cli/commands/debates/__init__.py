"""Comandos de consulta del catálogo de debates."""

import click

from src.common.logging import setup_logging
from src.infrastructure.config.settings import get_settings
from src.interfaces.cli.commands.debates.catalog import candidates, check, stats
from src.interfaces.cli.commands.debates.conversation import (
    answers,
    conversation,
    wordcloud,
)


@click.group()
def debates():
    """Catálogo de debates presidenciales Chile 2025."""
    settings = get_settings()
    setup_logging(log_level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)


debates.add_command(stats)
debates.add_command(check)
debates.add_command(candidates)
debates.add_command(conversation)
debates.add_command(answers)
debates.add_command(wordcloud)
