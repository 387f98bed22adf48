"""Domain entities."""

from src.domain.entities.answer import Answer
from src.domain.entities.base import BaseEntity
from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic


__all__ = [
    "Answer",
    "BaseEntity",
    "Candidate",
    "CandidateStatus",
    "Debate",
    "Question",
    "Topic",
]
