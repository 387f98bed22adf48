"""Candidate repository interface."""

from abc import abstractmethod

from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.repositories.identified_repository import IdentifiedRepository


class CandidateRepository(IdentifiedRepository[Candidate]):
    """Repository interface for candidates."""

    @abstractmethod
    def get_by_status(self, status: CandidateStatus) -> list[Candidate]:
        """Candidatos con el estado indicado, en el orden del registro."""
        pass

    @abstractmethod
    def get_by_coalition(self, coalition: str) -> list[Candidate]:
        pass

    @abstractmethod
    def find_by_name(self, query: str) -> Candidate | None:
        """Primer candidato cuyo nombre contiene query (sin distinguir mayúsculas).

        Args:
            query: fragmento del nombre

        Returns:
            El primer candidato coincidente, o None
        """
        pass

    @abstractmethod
    def get_by_ids(self, ids: list[str]) -> list[Candidate]:
        """Resuelve varios identificadores.

        Los identificadores que no existen se descartan en silencio; el
        resultado respeta el orden de ids.
        """
        pass
