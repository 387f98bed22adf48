"""Catalog snapshot value object."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.domain.value_objects.word_cloud import WordCloudResponse


@dataclass(frozen=True)
class Catalog:
    """Instantánea inmutable de todos los registros y respuestas agregadas.

    Se construye una sola vez durante la carga; nada la modifica después.
    """

    candidates: tuple[Candidate, ...] = ()
    topics: tuple[Topic, ...] = ()
    debates: tuple[Debate, ...] = ()
    questions: tuple[Question, ...] = ()
    answers: tuple[Answer, ...] = ()
    word_clouds: Mapping[str, WordCloudResponse] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def sizes(self) -> dict[str, int]:
        return {
            "candidates": len(self.candidates),
            "topics": len(self.topics),
            "debates": len(self.debates),
            "questions": len(self.questions),
            "answers": len(self.answers),
            "word_clouds": len(self.word_clouds),
        }
