"""Value objects for a resolved debate conversation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic


@dataclass(frozen=True)
class ConversationTurn:
    """Una pregunta del debate junto con las respuestas de cada candidato.

    answers conserva el orden de agregación, incluidos los duplicados.
    answers_by_candidate agrupa esas mismas respuestas por candidato.
    """

    question: Question
    topic: Topic | None
    answers: tuple[Answer, ...]
    answers_by_candidate: Mapping[str, tuple[Answer, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls, question: Question, topic: Topic | None, answers: list[Answer]
    ) -> "ConversationTurn":
        grouped: dict[str, list[Answer]] = {}
        for answer in answers:
            grouped.setdefault(answer.candidate_id, []).append(answer)
        return cls(
            question=question,
            topic=topic,
            answers=tuple(answers),
            answers_by_candidate=MappingProxyType(
                {cid: tuple(items) for cid, items in grouped.items()}
            ),
        )

    def answer_for(self, candidate_id: str) -> Answer | None:
        """Primera respuesta del candidato (la primera gana)."""
        matches = self.answers_by_candidate.get(candidate_id)
        return matches[0] if matches else None


@dataclass(frozen=True)
class ResolvedConversation:
    """Debate → preguntas ordenadas → respuestas por candidato."""

    debate: Debate
    participants: tuple[Candidate, ...]
    turns: tuple[ConversationTurn, ...]

    @property
    def answer_count(self) -> int:
        return sum(len(turn.answers) for turn in self.turns)

    @property
    def unanswered_questions(self) -> list[Question]:
        return [turn.question for turn in self.turns if not turn.answers]
