"""Value object con el resultado de cargar una partición de respuestas."""

from dataclasses import dataclass
from enum import Enum

from src.domain.entities.answer import Answer


class PartitionStatus(Enum):
    """Estado de carga de una partición de respuestas."""

    LOADED = "loaded"
    EMPTY = "empty"
    MISSING = "missing"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PartitionLoadResult:
    """Resultado de cargar una partición.

    Sólo LOADED aporta registros; cualquier otro estado aporta cero y no
    interrumpe la carga de las demás particiones.
    """

    name: str
    status: PartitionStatus
    answers: tuple[Answer, ...] = ()
    detail: str | None = None

    @property
    def contributed(self) -> int:
        return len(self.answers)

    @property
    def is_gap(self) -> bool:
        """True si la partición no aportó respuestas."""
        return self.status is not PartitionStatus.LOADED

    @classmethod
    def loaded(cls, name: str, answers: tuple[Answer, ...]) -> "PartitionLoadResult":
        if not answers:
            return cls(name=name, status=PartitionStatus.EMPTY)
        return cls(name=name, status=PartitionStatus.LOADED, answers=answers)

    @classmethod
    def missing(cls, name: str, detail: str | None = None) -> "PartitionLoadResult":
        return cls(name=name, status=PartitionStatus.MISSING, detail=detail)

    @classmethod
    def malformed(cls, name: str, detail: str) -> "PartitionLoadResult":
        return cls(name=name, status=PartitionStatus.MALFORMED, detail=detail)
