"""Caso de uso de carga del catálogo."""

from types import MappingProxyType

from src.application.dtos.catalog_dto import LoadCatalogInputDto, LoadCatalogOutputDto
from src.common.logging import get_logger
from src.domain.services.answer_aggregation_service import AnswerAggregationService
from src.domain.services.interfaces.catalog_data_source_service import (
    IAnswerPartitionSourceService,
    ICatalogDataSourceService,
    IWordCloudSourceService,
)
from src.domain.value_objects.catalog import Catalog


logger = get_logger(__name__)


class LoadCatalogUseCase:
    """Carga los registros y agrega las particiones de respuestas.

    Se ejecuta una vez, de forma síncrona, antes de atender consultas. Los
    registros estáticos son obligatorios; las particiones de respuestas no.
    """

    def __init__(
        self,
        catalog_source: ICatalogDataSourceService,
        partition_source: IAnswerPartitionSourceService,
        word_cloud_source: IWordCloudSourceService | None = None,
        aggregation_service: AnswerAggregationService | None = None,
    ) -> None:
        """Inicializa el caso de uso.

        Args:
            catalog_source: fuente de candidatos, temas, debates y preguntas
            partition_source: fuente de particiones de respuestas
            word_cloud_source: fuente opcional de nubes de palabras
            aggregation_service: servicio de concatenación de particiones
        """
        self.catalog_source = catalog_source
        self.partition_source = partition_source
        self.word_cloud_source = word_cloud_source
        self.aggregation_service = aggregation_service or AnswerAggregationService()

    def execute(self, input_dto: LoadCatalogInputDto) -> LoadCatalogOutputDto:
        """Construye la instantánea del catálogo.

        Raises:
            CatalogLoadError: si falta o es inválido un registro estático
        """
        candidates = self.catalog_source.load_candidates()
        topics = self.catalog_source.load_topics()
        debates = self.catalog_source.load_debates()
        questions = self.catalog_source.load_questions()

        results = self.partition_source.load_partitions(input_dto.partition_names)
        answers = self.aggregation_service.aggregate(results)

        for result in results:
            if result.is_gap:
                logger.warning(
                    "answer_partition_gap",
                    partition=result.name,
                    status=result.status.value,
                    detail=result.detail,
                )

        word_clouds = {}
        if input_dto.load_word_clouds and self.word_cloud_source is not None:
            word_clouds = self.word_cloud_source.load_all([d.id for d in debates])

        catalog = Catalog(
            candidates=tuple(candidates),
            topics=tuple(topics),
            debates=tuple(debates),
            questions=tuple(questions),
            answers=answers,
            word_clouds=MappingProxyType(word_clouds),
        )

        logger.info(
            "catalog_loaded",
            partitions=self.aggregation_service.summarize(results),
            **catalog.sizes(),
        )
        return LoadCatalogOutputDto(catalog=catalog, partition_results=results)
