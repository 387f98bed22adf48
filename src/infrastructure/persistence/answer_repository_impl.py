"""Answer repository implementation."""

from collections.abc import Iterable

from src.domain.entities.answer import Answer
from src.domain.repositories.answer_repository import AnswerRepository


class AnswerRepositoryImpl(AnswerRepository):
    """Respuestas agregadas, en el orden de concatenación de las particiones.

    Las búsquedas son recorridos lineales sobre la tupla: get_answer devuelve
    la primera coincidencia y las búsquedas masivas devuelven todas, con
    duplicados incluidos.
    """

    def __init__(self, answers: Iterable[Answer]):
        self._answers: tuple[Answer, ...] = tuple(answers)

    def get_all(self) -> list[Answer]:
        return list(self._answers)

    def count(self) -> int:
        return len(self._answers)

    def get_answer(self, question_id: str, candidate_id: str) -> Answer | None:
        return next(
            (
                a
                for a in self._answers
                if a.question_id == question_id and a.candidate_id == candidate_id
            ),
            None,
        )

    def get_by_candidate(self, candidate_id: str) -> list[Answer]:
        return [a for a in self._answers if a.candidate_id == candidate_id]

    def get_by_question(self, question_id: str) -> list[Answer]:
        return [a for a in self._answers if a.question_id == question_id]
