"""Catalog data source service interfaces (domain layer)."""

from typing import Protocol

from src.domain.entities.candidate import Candidate
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.domain.value_objects.partition_load_result import PartitionLoadResult
from src.domain.value_objects.word_cloud import WordCloudResponse


class ICatalogDataSourceService(Protocol):
    """Fuente de los registros estáticos del catálogo.

    Un fallo al leer cualquiera de estos registros es fatal.
    """

    def load_candidates(self) -> list[Candidate]: ...

    def load_topics(self) -> list[Topic]: ...

    def load_debates(self) -> list[Debate]: ...

    def load_questions(self) -> list[Question]: ...


class IAnswerPartitionSourceService(Protocol):
    """Fuente de particiones de respuestas."""

    def load_partitions(self, names: list[str]) -> list[PartitionLoadResult]:
        """Carga las particiones indicadas, en el mismo orden.

        Args:
            names: nombres de partición en orden de concatenación

        Returns:
            Un resultado por partición; nunca lanza por una partición ausente
            o mal formada
        """
        ...


class IWordCloudSourceService(Protocol):
    def load_all(self, debate_ids: list[str]) -> dict[str, WordCloudResponse]: ...
