"""Debate entity."""

from dataclasses import dataclass
from datetime import date

from src.domain.entities.base import BaseEntity


@dataclass(frozen=True, kw_only=True)
class Debate(BaseEntity):
    """Debate o foro presidencial.

    candidate_ids conserva el orden de los participantes tal como viene
    en la fuente. transcript_url puede ser una cadena vacía cuando aún no
    hay transcripción publicada.
    """

    name: str
    debate_date: date
    organizer: str
    transcript_url: str = ""
    candidate_ids: tuple[str, ...] = ()
    duration: str | None = None
    moderators: tuple[str, ...] = ()

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript_url)

    def has_participant(self, candidate_id: str) -> bool:
        """Indica si el candidato participa del debate."""
        return candidate_id in self.candidate_ids

    def __str__(self) -> str:
        return f"{self.name} ({self.debate_date.isoformat()})"
