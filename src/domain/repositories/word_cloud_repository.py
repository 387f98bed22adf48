"""Word cloud repository interface."""

from abc import ABC, abstractmethod

from src.domain.value_objects.word_cloud import WordCloudResponse


class WordCloudRepository(ABC):
    """Repository interface for per-debate word clouds."""

    @abstractmethod
    def get_by_debate(self, debate_id: str) -> WordCloudResponse | None:
        """Nube de palabras del debate, o None si no hay una publicada."""
        pass
