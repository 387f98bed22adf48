"""Debate repository interface."""

from abc import abstractmethod

from src.domain.entities.debate import Debate
from src.domain.repositories.identified_repository import IdentifiedRepository


class DebateRepository(IdentifiedRepository[Debate]):
    """Repository interface for debates."""

    @abstractmethod
    def get_by_candidate(self, candidate_id: str) -> list[Debate]:
        """Debates en los que participa el candidato, en el orden del registro."""
        pass
