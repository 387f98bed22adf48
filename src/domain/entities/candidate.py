"""Candidate entity."""

from dataclasses import dataclass
from enum import Enum

from src.domain.entities.base import BaseEntity


class CandidateStatus(Enum):
    """Estado de la candidatura."""

    CONFIRMED = "confirmado"
    PRE_CANDIDATE = "precandidata"
    POTENTIAL = "potencial"


@dataclass(frozen=True, kw_only=True)
class Candidate(BaseEntity):
    """Candidato presidencial.

    Attributes:
        id: slug estable (p. ej. "evelyn-matthei")
        name: nombre para mostrar
        party: partido político
        coalition: coalición, si pertenece a una
        photo: ruta de la foto
        photo_without_background: ruta de la foto sin fondo
        status: estado de la candidatura
        color: color hexadecimal del partido/candidato
        abbreviation: abreviación única de 2 letras
    """

    name: str
    party: str
    status: CandidateStatus
    color: str
    abbreviation: str
    photo: str = ""
    photo_without_background: str | None = None
    coalition: str | None = None

    def __str__(self) -> str:
        return self.name
