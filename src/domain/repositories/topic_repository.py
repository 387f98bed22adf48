"""Topic repository interface."""

from src.domain.entities.topic import Topic
from src.domain.repositories.identified_repository import IdentifiedRepository


class TopicRepository(IdentifiedRepository[Topic]):
    """Repository interface for topics."""
