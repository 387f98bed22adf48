"""Candidate repository implementation."""

from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.repositories.candidate_repository import CandidateRepository
from src.infrastructure.persistence.in_memory_repository_impl import (
    InMemoryRepositoryImpl,
)


class CandidateRepositoryImpl(InMemoryRepositoryImpl[Candidate], CandidateRepository):
    """Candidate repository over the in-memory registry."""

    def get_by_status(self, status: CandidateStatus) -> list[Candidate]:
        return [c for c in self._records if c.status is status]

    def get_by_coalition(self, coalition: str) -> list[Candidate]:
        return [c for c in self._records if c.coalition == coalition]

    def find_by_name(self, query: str) -> Candidate | None:
        needle = query.casefold()
        return next((c for c in self._records if needle in c.name.casefold()), None)

    def get_by_ids(self, ids: list[str]) -> list[Candidate]:
        candidates = (self.get_by_id(candidate_id) for candidate_id in ids)
        return [c for c in candidates if c is not None]
