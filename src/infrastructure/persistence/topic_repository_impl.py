"""Topic repository implementation."""

from src.domain.entities.topic import Topic
from src.domain.repositories.topic_repository import TopicRepository
from src.infrastructure.persistence.in_memory_repository_impl import (
    InMemoryRepositoryImpl,
)


class TopicRepositoryImpl(InMemoryRepositoryImpl[Topic], TopicRepository):
    """Topic repository over the in-memory registry."""
