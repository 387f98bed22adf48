"""Word cloud repository implementation."""

from collections.abc import Mapping
from types import MappingProxyType

from src.domain.repositories.word_cloud_repository import WordCloudRepository
from src.domain.value_objects.word_cloud import WordCloudResponse


class WordCloudRepositoryImpl(WordCloudRepository):
    """Nubes de palabras precargadas, indexadas por debate."""

    def __init__(self, clouds: Mapping[str, WordCloudResponse] | None = None):
        self._clouds = MappingProxyType(dict(clouds or {}))

    def get_by_debate(self, debate_id: str) -> WordCloudResponse | None:
        return self._clouds.get(debate_id)

    def debate_ids(self) -> list[str]:
        return list(self._clouds)
