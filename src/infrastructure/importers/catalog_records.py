"""Pydantic models for the raw catalog JSON records.

Los archivos de datos usan las claves originales en español y camelCase
(nombre, fotoSinFondo, candidatosIds, preguntaId, ...). Cada modelo valida
un registro y lo convierte a la entidad de dominio.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic


class _RecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class CandidateRecord(_RecordModel):
    id: str = Field(min_length=1)
    nombre: str
    partido: str
    coalicion: str | None = None
    foto: str = ""
    foto_sin_fondo: str | None = Field(default=None, alias="fotoSinFondo")
    estado: CandidateStatus
    color: str
    abreviacion: str = Field(min_length=2, max_length=2)

    def to_entity(self) -> Candidate:
        return Candidate(
            id=self.id,
            name=self.nombre,
            party=self.partido,
            coalition=self.coalicion,
            photo=self.foto,
            photo_without_background=self.foto_sin_fondo,
            status=self.estado,
            color=self.color,
            abbreviation=self.abreviacion,
        )


class TopicRecord(_RecordModel):
    id: str = Field(min_length=1)
    nombre: str
    color: str

    def to_entity(self) -> Topic:
        return Topic(id=self.id, name=self.nombre, color=self.color)


class DebateRecord(_RecordModel):
    id: str = Field(min_length=1)
    nombre: str
    fecha: date
    organizador: str
    duracion: str | None = None
    conductores: list[str] = Field(default_factory=list)
    transcript_url: str = Field(default="", alias="transcriptUrl")
    candidatos_ids: list[str] = Field(default_factory=list, alias="candidatosIds")

    def to_entity(self) -> Debate:
        return Debate(
            id=self.id,
            name=self.nombre,
            debate_date=self.fecha,
            organizer=self.organizador,
            duration=self.duracion,
            moderators=tuple(self.conductores),
            transcript_url=self.transcript_url,
            candidate_ids=tuple(self.candidatos_ids),
        )


class QuestionRecord(_RecordModel):
    id: str = Field(min_length=1)
    debate_id: str = Field(alias="debateId")
    pregunta: str
    orden: int = Field(gt=0)
    tema_id: str | None = Field(default=None, alias="temaId")

    def to_entity(self) -> Question:
        return Question(
            id=self.id,
            debate_id=self.debate_id,
            text=self.pregunta,
            order=self.orden,
            topic_id=self.tema_id,
        )


class AnswerRecord(_RecordModel):
    pregunta_id: str = Field(alias="preguntaId")
    candidato_id: str = Field(alias="candidatoId")
    resumen: str
    # entero o fraccionario; se conserva tal cual viene en la fuente
    timestamp: int | float | None = None

    @field_validator("timestamp")
    @classmethod
    def _non_negative(cls, value: int | float | None) -> int | float | None:
        if value is not None and value < 0:
            raise ValueError("timestamp must be non-negative")
        return value

    def to_entity(self) -> Answer:
        return Answer(
            question_id=self.pregunta_id,
            candidate_id=self.candidato_id,
            summary=self.resumen,
            timestamp=self.timestamp,
        )
