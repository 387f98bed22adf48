"""Catalog registry data source.

Lee los registros estáticos (candidatos, temas, debates, preguntas) desde
archivos JSON. A diferencia de las particiones de respuestas, un registro
ausente o inválido es fatal: sin él no hay catálogo utilizable.
"""

import json
import logging

from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.domain.entities.candidate import Candidate
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.infrastructure.exceptions import CatalogLoadError
from src.infrastructure.importers._constants import (
    CANDIDATES_FIELD,
    CANDIDATES_FILE,
    DEBATES_FIELD,
    DEBATES_FILE,
    QUESTIONS_FIELD,
    QUESTIONS_FILE,
    TOPICS_FIELD,
    TOPICS_FILE,
)
from src.infrastructure.importers.catalog_records import (
    CandidateRecord,
    DebateRecord,
    QuestionRecord,
    TopicRecord,
)


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def read_json(file_path: Path) -> Any:
    with open(file_path, encoding="utf-8") as f:
        return json.load(f)


class CatalogDataSource:
    """Registros del catálogo guardados en un directorio de archivos JSON."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def load_candidates(self) -> list[Candidate]:
        return [
            record.to_entity()
            for record in self._load_records(
                CANDIDATES_FILE, CANDIDATES_FIELD, CandidateRecord
            )
        ]

    def load_topics(self) -> list[Topic]:
        return [
            record.to_entity()
            for record in self._load_records(TOPICS_FILE, TOPICS_FIELD, TopicRecord)
        ]

    def load_debates(self) -> list[Debate]:
        return [
            record.to_entity()
            for record in self._load_records(DEBATES_FILE, DEBATES_FIELD, DebateRecord)
        ]

    def load_questions(self) -> list[Question]:
        return [
            record.to_entity()
            for record in self._load_records(
                QUESTIONS_FILE, QUESTIONS_FIELD, QuestionRecord
            )
        ]

    def _load_records(
        self, file_name: str, field: str, model: type[M]
    ) -> list[M]:
        path = self._data_dir / file_name
        try:
            payload = read_json(path)
        except FileNotFoundError as e:
            raise CatalogLoadError(str(path), "archivo no encontrado") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(str(path), f"JSON inválido: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get(field), list):
            raise CatalogLoadError(str(path), f"falta el campo '{field}'")

        records = []
        for index, raw in enumerate(payload[field]):
            try:
                records.append(model.model_validate(raw))
            except ValidationError as e:
                raise CatalogLoadError(
                    str(path), f"registro {index} inválido: {e}"
                ) from e

        logger.info("%s: %d registros cargados", file_name, len(records))
        return records
