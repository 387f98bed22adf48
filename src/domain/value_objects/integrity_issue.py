"""Value objects del chequeo de integridad del catálogo."""

from dataclasses import dataclass
from enum import Enum


class IssueSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueKind(Enum):
    """Tipo de defecto de calidad de datos."""

    DUPLICATE_ID = "duplicate_id"
    DUPLICATE_ABBREVIATION = "duplicate_abbreviation"
    DUPLICATE_ORDER = "duplicate_order"
    UNKNOWN_CANDIDATE = "unknown_candidate"
    UNKNOWN_DEBATE = "unknown_debate"
    UNKNOWN_TOPIC = "unknown_topic"
    UNKNOWN_QUESTION = "unknown_question"
    NON_PARTICIPANT_ANSWER = "non_participant_answer"
    DUPLICATE_ANSWER = "duplicate_answer"


@dataclass(frozen=True)
class IntegrityIssue:
    """Defecto detectado en el catálogo.

    Attributes:
        kind: tipo de defecto
        severity: ERROR rompe la validez del catálogo, WARNING no
        entity: tipo de registro afectado ("candidate", "debate", ...)
        entity_id: identificador del registro afectado
        reference: valor problemático (id duplicado, referencia rota, ...)
    """

    kind: IssueKind
    severity: IssueSeverity
    entity: str
    entity_id: str
    reference: str

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR

    def __str__(self) -> str:
        return (
            f"[{self.severity.value}] {self.kind.value}: "
            f"{self.entity} {self.entity_id} -> {self.reference}"
        )
