"""Question entity."""

from dataclasses import dataclass

from src.domain.entities.base import BaseEntity


@dataclass(frozen=True, kw_only=True)
class Question(BaseEntity):
    """Pregunta formulada en un debate.

    order es la clave de orden dentro del debate: única por debate, pero no
    necesariamente contigua ni partiendo en 1.
    """

    debate_id: str
    text: str
    order: int
    topic_id: str | None = None

    def __str__(self) -> str:
        text = f"{self.text[:50]}..." if len(self.text) > 50 else self.text
        return f"{self.order}. {text}"
