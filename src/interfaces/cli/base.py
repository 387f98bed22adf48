"""Base utilities for CLI commands."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any, TypeVar

import click

from src.infrastructure.exceptions import InfrastructureError


logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def with_error_handling(func: F) -> F:
    """Convierte los errores de carga en un mensaje y código de salida 1.

    Las excepciones de click se dejan pasar: los comandos fijan su propio
    código de salida.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except InfrastructureError as e:
            click.echo(f"Error: {e.message}", err=True)
            for key, value in e.details.items():
                click.echo(f"  {key}: {value}", err=True)
            sys.exit(1)
        except Exception as e:
            logger.exception("Unexpected error in %s", func.__name__)
            click.echo(f"Error inesperado: {e}", err=True)
            sys.exit(1)

    return wrapper  # type: ignore[return-value]


def get_initialized_container():
    """Devuelve el contenedor, inicializándolo si hace falta."""
    from src.infrastructure.di.container import get_container, init_container

    try:
        return get_container()
    except RuntimeError:
        return init_container()


def echo_section(title: str) -> None:
    click.echo(f"=== {title} ===")
