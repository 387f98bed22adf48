"""Topic entity."""

from dataclasses import dataclass

from src.domain.entities.base import BaseEntity


@dataclass(frozen=True, kw_only=True)
class Topic(BaseEntity):
    """Tema/categoría con el que se clasifican las preguntas."""

    name: str
    color: str

    def __str__(self) -> str:
        return self.name
