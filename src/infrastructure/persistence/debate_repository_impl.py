"""Debate repository implementation."""

from src.domain.entities.debate import Debate
from src.domain.repositories.debate_repository import DebateRepository
from src.infrastructure.persistence.in_memory_repository_impl import (
    InMemoryRepositoryImpl,
)


class DebateRepositoryImpl(InMemoryRepositoryImpl[Debate], DebateRepository):
    """Debate repository over the in-memory registry."""

    def get_by_candidate(self, candidate_id: str) -> list[Debate]:
        return [d for d in self._records if d.has_participant(candidate_id)]
