"""Pruebas del caso de uso de carga del catálogo."""

from unittest.mock import MagicMock

import pytest

from src.application.dtos.catalog_dto import LoadCatalogInputDto
from src.application.usecases.load_catalog_usecase import LoadCatalogUseCase
from src.domain.entities.answer import Answer
from src.domain.value_objects.partition_load_result import PartitionLoadResult
from src.infrastructure.exceptions import CatalogLoadError


@pytest.fixture
def catalog_source(candidates, topics, debates, questions) -> MagicMock:
    source = MagicMock()
    source.load_candidates.return_value = candidates
    source.load_topics.return_value = topics
    source.load_debates.return_value = debates
    source.load_questions.return_value = questions
    return source


@pytest.fixture
def partition_source() -> MagicMock:
    source = MagicMock()
    source.load_partitions.return_value = [
        PartitionLoadResult.loaded(
            "clapes",
            (
                Answer("q-clapes-1", "evelyn-matthei", "r1", 42),
                Answer("q-clapes-2", "evelyn-matthei", "r2"),
            ),
        ),
        PartitionLoadResult.missing("t13"),
        PartitionLoadResult.loaded(
            "otra", (Answer("q-clapes-1", "jeannette-jara", "r3"),)
        ),
    ]
    return source


class TestLoadCatalogUseCase:
    def test_aggregates_partitions(self, catalog_source, partition_source) -> None:
        usecase = LoadCatalogUseCase(catalog_source, partition_source)

        output = usecase.execute(LoadCatalogInputDto(["clapes", "t13", "otra"]))

        partition_source.load_partitions.assert_called_once_with(
            ["clapes", "t13", "otra"]
        )
        assert output.answers_loaded == 3
        assert [a.summary for a in output.catalog.answers] == ["r1", "r2", "r3"]
        assert [r.name for r in output.partition_gaps] == ["t13"]
        assert output.catalog.sizes()["candidates"] == 4

    def test_loads_word_clouds_for_all_debates(
        self, catalog_source, partition_source
    ) -> None:
        word_cloud_source = MagicMock()
        word_cloud_source.load_all.return_value = {}
        usecase = LoadCatalogUseCase(
            catalog_source, partition_source, word_cloud_source=word_cloud_source
        )

        usecase.execute(LoadCatalogInputDto([]))

        word_cloud_source.load_all.assert_called_once_with(
            ["clapes-uc-2025-08-05", "primarias-t13-2025-06-15"]
        )

    def test_word_clouds_can_be_skipped(
        self, catalog_source, partition_source
    ) -> None:
        word_cloud_source = MagicMock()
        usecase = LoadCatalogUseCase(
            catalog_source, partition_source, word_cloud_source=word_cloud_source
        )

        output = usecase.execute(LoadCatalogInputDto([], load_word_clouds=False))

        word_cloud_source.load_all.assert_not_called()
        assert len(output.catalog.word_clouds) == 0

    def test_registry_error_propagates(self, catalog_source, partition_source) -> None:
        catalog_source.load_debates.side_effect = CatalogLoadError(
            "debates.json", "archivo no encontrado"
        )
        usecase = LoadCatalogUseCase(catalog_source, partition_source)

        with pytest.raises(CatalogLoadError):
            usecase.execute(LoadCatalogInputDto([]))
        partition_source.load_partitions.assert_not_called()
