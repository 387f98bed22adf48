"""Dependency container.

El catálogo se carga una sola vez en init_container() y los repositorios y
casos de uso se construyen sobre esa instantánea. Después de la
inicialización nada se modifica.
"""

from dataclasses import dataclass

from src.application.dtos.catalog_dto import LoadCatalogInputDto, LoadCatalogOutputDto
from src.application.usecases.check_catalog_integrity_usecase import (
    CheckCatalogIntegrityUseCase,
)
from src.application.usecases.load_catalog_usecase import LoadCatalogUseCase
from src.application.usecases.lookup_catalog_usecase import LookupCatalogUseCase
from src.domain.value_objects.catalog import Catalog
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.importers.answer_partition_loader import AnswerPartitionLoader
from src.infrastructure.importers.catalog_data_source import CatalogDataSource
from src.infrastructure.importers.word_cloud_data_source import WordCloudDataSource
from src.infrastructure.persistence.answer_repository_impl import AnswerRepositoryImpl
from src.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)
from src.infrastructure.persistence.debate_repository_impl import DebateRepositoryImpl
from src.infrastructure.persistence.question_repository_impl import (
    QuestionRepositoryImpl,
)
from src.infrastructure.persistence.topic_repository_impl import TopicRepositoryImpl
from src.infrastructure.persistence.word_cloud_repository_impl import (
    WordCloudRepositoryImpl,
)


@dataclass(frozen=True)
class RepositoryContainer:
    candidate_repository: CandidateRepositoryImpl
    topic_repository: TopicRepositoryImpl
    debate_repository: DebateRepositoryImpl
    question_repository: QuestionRepositoryImpl
    answer_repository: AnswerRepositoryImpl
    word_cloud_repository: WordCloudRepositoryImpl

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "RepositoryContainer":
        return cls(
            candidate_repository=CandidateRepositoryImpl(catalog.candidates),
            topic_repository=TopicRepositoryImpl(catalog.topics),
            debate_repository=DebateRepositoryImpl(catalog.debates),
            question_repository=QuestionRepositoryImpl(catalog.questions),
            answer_repository=AnswerRepositoryImpl(catalog.answers),
            word_cloud_repository=WordCloudRepositoryImpl(catalog.word_clouds),
        )


@dataclass(frozen=True)
class UseCaseContainer:
    lookup: LookupCatalogUseCase
    check_integrity: CheckCatalogIntegrityUseCase

    @classmethod
    def from_repositories(cls, repos: RepositoryContainer) -> "UseCaseContainer":
        return cls(
            lookup=LookupCatalogUseCase(
                candidate_repository=repos.candidate_repository,
                topic_repository=repos.topic_repository,
                debate_repository=repos.debate_repository,
                question_repository=repos.question_repository,
                answer_repository=repos.answer_repository,
                word_cloud_repository=repos.word_cloud_repository,
            ),
            check_integrity=CheckCatalogIntegrityUseCase(
                candidate_repository=repos.candidate_repository,
                topic_repository=repos.topic_repository,
                debate_repository=repos.debate_repository,
                question_repository=repos.question_repository,
                answer_repository=repos.answer_repository,
            ),
        )


@dataclass(frozen=True)
class Container:
    settings: Settings
    load_result: LoadCatalogOutputDto
    repositories: RepositoryContainer
    usecases: UseCaseContainer

    @property
    def catalog(self) -> Catalog:
        return self.load_result.catalog


_container: Container | None = None


def build_container(settings: Settings) -> Container:
    """Carga el catálogo según settings y arma el contenedor.

    Raises:
        CatalogLoadError: si falta o es inválido un registro estático
    """
    load_usecase = LoadCatalogUseCase(
        catalog_source=CatalogDataSource(settings.CATALOG_DATA_DIR),
        partition_source=AnswerPartitionLoader(settings.ANSWERS_DIR),
        word_cloud_source=WordCloudDataSource(settings.WORDCLOUDS_DIR),
    )
    load_result = load_usecase.execute(
        LoadCatalogInputDto(partition_names=list(settings.ANSWER_PARTITIONS))
    )
    repositories = RepositoryContainer.from_catalog(load_result.catalog)
    return Container(
        settings=settings,
        load_result=load_result,
        repositories=repositories,
        usecases=UseCaseContainer.from_repositories(repositories),
    )


def init_container(settings: Settings | None = None) -> Container:
    global _container
    _container = build_container(settings or get_settings())
    return _container


def get_container() -> Container:
    if _container is None:
        raise RuntimeError("Container not initialized. Call init_container() first.")
    return _container


def reset_container() -> None:
    global _container
    _container = None
