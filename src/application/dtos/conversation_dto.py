"""DTOs para mostrar la conversación de un debate.

Los campos opcionales quedan en None cuando el dato no existe; la capa de
presentación los muestra como "sin datos" en lugar de fallar.
"""

from dataclasses import dataclass, field
from datetime import date

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate


@dataclass
class ParticipantOutputItem:
    id: str
    name: str
    abbreviation: str | None = None
    color: str | None = None

    @classmethod
    def from_entity(cls, entity: Candidate) -> "ParticipantOutputItem":
        return cls(
            id=entity.id,
            name=entity.name,
            abbreviation=entity.abbreviation,
            color=entity.color,
        )

    @classmethod
    def unknown(cls, candidate_id: str) -> "ParticipantOutputItem":
        """Participante que no existe en el registro de candidatos."""
        return cls(id=candidate_id, name=candidate_id)


@dataclass
class AnswerOutputItem:
    """Respuesta de un candidato, lista para mostrar."""

    candidate_id: str
    candidate_name: str
    summary: str
    elapsed: str | None = None
    transcript_link: str | None = None

    @classmethod
    def from_entity(
        cls,
        entity: Answer,
        candidate_name: str,
        elapsed: str | None,
        transcript_link: str | None,
    ) -> "AnswerOutputItem":
        return cls(
            candidate_id=entity.candidate_id,
            candidate_name=candidate_name,
            summary=entity.summary,
            elapsed=elapsed,
            transcript_link=transcript_link,
        )


@dataclass
class TurnOutputItem:
    """Una pregunta con sus respuestas."""

    question_id: str
    order: int
    question: str
    topic_name: str | None = None
    topic_color: str | None = None
    answers: list[AnswerOutputItem] = field(default_factory=list)
    silent_candidate_ids: list[str] = field(default_factory=list)


@dataclass
class ConversationOutputDto:
    """Conversación completa de un debate."""

    debate_id: str
    debate_name: str
    debate_date: date
    organizer: str
    duration: str | None = None
    moderators: list[str] = field(default_factory=list)
    transcript_url: str | None = None
    participants: list[ParticipantOutputItem] = field(default_factory=list)
    turns: list[TurnOutputItem] = field(default_factory=list)

    @property
    def answer_count(self) -> int:
        return sum(len(turn.answers) for turn in self.turns)
