"""Answer repository interface."""

from abc import abstractmethod

from src.domain.entities.answer import Answer
from src.domain.repositories.base import BaseRepository


class AnswerRepository(BaseRepository[Answer]):
    """Repository interface for aggregated answers.

    Todas las búsquedas respetan el orden de agregación de las particiones.
    """

    @abstractmethod
    def get_answer(self, question_id: str, candidate_id: str) -> Answer | None:
        """Primera respuesta que coincide con ambos campos (la primera gana)."""
        pass

    @abstractmethod
    def get_by_candidate(self, candidate_id: str) -> list[Answer]:
        pass

    @abstractmethod
    def get_by_question(self, question_id: str) -> list[Answer]:
        """Todas las respuestas a la pregunta, duplicados incluidos."""
        pass
