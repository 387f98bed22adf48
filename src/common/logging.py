"""Logging configuration.

Configura structlog sobre el logging estándar. La capa de aplicación usa
get_logger(); la infraestructura usa logging.getLogger(__name__).
"""

import logging
import sys

from typing import Any

import structlog


_configured = False


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """Inicializa logging estándar y structlog.

    Args:
        log_level: nivel de log ("DEBUG", "INFO", ...)
        json_format: JSON si es True, salida de consola legible si es False
    """
    global _configured

    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger con nombre."""
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _configured
