"""Word cloud data source.

Un archivo <debateId>.json por debate. Las nubes son opcionales: un archivo
ausente o inválido se trata como "sin nube" para ese debate.
"""

import json
import logging

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.domain.value_objects.word_cloud import (
    CandidateWordCloud,
    GeneralWordCloud,
    WordCloudData,
    WordCloudMetadata,
    WordCloudResponse,
    WordData,
)
from src.infrastructure.importers._constants import PARTITION_SUFFIX
from src.infrastructure.importers.catalog_data_source import read_json


logger = logging.getLogger(__name__)


class _WordModel(BaseModel):
    text: str
    weight: float
    color: str

    def to_value(self) -> WordData:
        return WordData(text=self.text, weight=self.weight, color=self.color)


class _CandidateCloudModel(BaseModel):
    nombre: str
    color: str
    words: list[_WordModel] = Field(default_factory=list)


class _GeneralCloudModel(BaseModel):
    title: str
    words: list[_WordModel] = Field(default_factory=list)


class _CloudDataModel(BaseModel):
    general: _GeneralCloudModel
    candidatos: dict[str, _CandidateCloudModel] = Field(default_factory=dict)


class _MetadataModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_words: int = Field(alias="totalWords")
    candidatos_count: int = Field(alias="candidatosCount")
    created: str
    source: str
    description: str


class WordCloudFileModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    debate_id: str = Field(alias="debateId")
    wordcloud_data: _CloudDataModel = Field(alias="wordcloudData")
    metadata: _MetadataModel

    def to_value(self) -> WordCloudResponse:
        data = self.wordcloud_data
        return WordCloudResponse(
            debate_id=self.debate_id,
            data=WordCloudData(
                general=GeneralWordCloud(
                    title=data.general.title,
                    words=tuple(w.to_value() for w in data.general.words),
                ),
                candidates={
                    candidate_id: CandidateWordCloud(
                        name=cloud.nombre,
                        color=cloud.color,
                        words=tuple(w.to_value() for w in cloud.words),
                    )
                    for candidate_id, cloud in data.candidatos.items()
                },
            ),
            metadata=WordCloudMetadata(
                total_words=self.metadata.total_words,
                candidates_count=self.metadata.candidatos_count,
                created=self.metadata.created,
                source=self.metadata.source,
                description=self.metadata.description,
            ),
        )


class WordCloudDataSource:
    """Nubes de palabras guardadas en un directorio, una por debate."""

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    def load_all(self, debate_ids: list[str]) -> dict[str, WordCloudResponse]:
        """Carga las nubes disponibles de los debates indicados."""
        clouds = {}
        for debate_id in debate_ids:
            cloud = self.load(debate_id)
            if cloud is not None:
                clouds[debate_id] = cloud
        logger.info("Nubes de palabras cargadas: %d/%d", len(clouds), len(debate_ids))
        return clouds

    def load(self, debate_id: str) -> WordCloudResponse | None:
        path = self._directory / f"{debate_id}{PARTITION_SUFFIX}"
        try:
            payload = read_json(path)
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as e:
            logger.warning("Nube de palabras %s con JSON inválido: %s", debate_id, e)
            return None

        try:
            cloud = WordCloudFileModel.model_validate(payload).to_value()
        except ValidationError as e:
            logger.warning(
                "Nube de palabras %s inválida: %d errores", debate_id, e.error_count()
            )
            return None

        if cloud.debate_id != debate_id:
            logger.warning(
                "Nube de palabras %s declara debateId=%s", debate_id, cloud.debate_id
            )
        return cloud
