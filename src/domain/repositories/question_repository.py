"""Question repository interface."""

from abc import abstractmethod

from src.domain.entities.question import Question
from src.domain.repositories.identified_repository import IdentifiedRepository


class QuestionRepository(IdentifiedRepository[Question]):
    """Repository interface for questions."""

    @abstractmethod
    def get_by_debate(self, debate_id: str) -> list[Question]:
        """Preguntas del debate ordenadas por order ascendente.

        El orden es estable: ante empates se conserva el orden de entrada.
        """
        pass

    @abstractmethod
    def get_by_topic(self, topic_id: str) -> list[Question]:
        pass
