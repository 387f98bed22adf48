"""Question repository implementation."""

from src.domain.entities.question import Question
from src.domain.repositories.question_repository import QuestionRepository
from src.infrastructure.persistence.in_memory_repository_impl import (
    InMemoryRepositoryImpl,
)


class QuestionRepositoryImpl(InMemoryRepositoryImpl[Question], QuestionRepository):
    """Question repository over the in-memory registry."""

    def get_by_debate(self, debate_id: str) -> list[Question]:
        # sorted() es estable: los empates conservan el orden de entrada
        return sorted(
            (q for q in self._records if q.debate_id == debate_id),
            key=lambda q: q.order,
        )

    def get_by_topic(self, topic_id: str) -> list[Question]:
        return [q for q in self._records if q.topic_id == topic_id]
