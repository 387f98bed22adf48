"""Answer entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Answer:
    """Respuesta de un candidato a una pregunta.

    No tiene identificador propio: el par (question_id, candidate_id) se
    espera único, pero no se exige. timestamp son los segundos desde el
    inicio de la grabación del debate.
    """

    question_id: str
    candidate_id: str
    summary: str
    timestamp: int | float | None = None

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None

    def __str__(self) -> str:
        return f"{self.candidate_id} -> {self.question_id}"
