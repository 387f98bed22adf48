"""Repository interfaces."""

from src.domain.repositories.answer_repository import AnswerRepository
from src.domain.repositories.base import BaseRepository
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.repositories.debate_repository import DebateRepository
from src.domain.repositories.identified_repository import IdentifiedRepository
from src.domain.repositories.question_repository import QuestionRepository
from src.domain.repositories.topic_repository import TopicRepository
from src.domain.repositories.word_cloud_repository import WordCloudRepository


__all__ = [
    "AnswerRepository",
    "BaseRepository",
    "CandidateRepository",
    "DebateRepository",
    "IdentifiedRepository",
    "QuestionRepository",
    "TopicRepository",
    "WordCloudRepository",
]
