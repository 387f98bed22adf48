"""Answer partition loader.

Cada partición es un archivo JSON con un campo "respuestas" que contiene
las respuestas de un debate. Una partición ausente, vacía o mal formada
aporta cero respuestas y nunca interrumpe la carga de las demás.
"""

import json
import logging

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from src.domain.value_objects.partition_load_result import PartitionLoadResult
from src.infrastructure.importers._constants import ANSWERS_FIELD, PARTITION_SUFFIX
from src.infrastructure.importers.catalog_data_source import read_json
from src.infrastructure.importers.catalog_records import AnswerRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionSource:
    """Fuente con nombre de una partición de respuestas."""

    name: str
    path: Path

    @classmethod
    def in_directory(cls, directory: Path, name: str) -> "PartitionSource":
        return cls(name=name, path=Path(directory) / f"{name}{PARTITION_SUFFIX}")


def partition_sources(directory: Path, names: list[str]) -> list[PartitionSource]:
    """Fuentes para las particiones indicadas, en el mismo orden."""
    return [PartitionSource.in_directory(directory, name) for name in names]


class AnswerPartitionLoader:
    """Carga particiones de respuestas devolviendo un resultado explícito por
    partición en lugar de lanzar excepciones."""

    def __init__(self, directory: Path | None = None) -> None:
        self._directory = Path(directory) if directory is not None else None

    def load(self, source: PartitionSource) -> PartitionLoadResult:
        try:
            payload = read_json(source.path)
        except FileNotFoundError:
            logger.warning("Partición %s no encontrada: %s", source.name, source.path)
            return PartitionLoadResult.missing(source.name, str(source.path))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Partición %s con JSON inválido: %s", source.name, e)
            return PartitionLoadResult.malformed(source.name, f"JSON inválido: {e}")
        except OSError as e:
            logger.warning("Partición %s ilegible: %s", source.name, e)
            return PartitionLoadResult.missing(source.name, str(e))

        return self.parse(source.name, payload)

    def parse(self, name: str, payload: object) -> PartitionLoadResult:
        """Valida el contenido de una partición ya leída.

        La partición es todo o nada: un solo registro inválido la descarta
        completa.
        """
        if not isinstance(payload, dict) or ANSWERS_FIELD not in payload:
            logger.warning("Partición %s sin campo '%s'", name, ANSWERS_FIELD)
            return PartitionLoadResult.malformed(
                name, f"falta el campo '{ANSWERS_FIELD}'"
            )

        raw_answers = payload[ANSWERS_FIELD]
        if raw_answers is None:
            return PartitionLoadResult.loaded(name, ())
        if not isinstance(raw_answers, list):
            logger.warning("Partición %s: '%s' no es una lista", name, ANSWERS_FIELD)
            return PartitionLoadResult.malformed(
                name, f"'{ANSWERS_FIELD}' no es una lista"
            )

        answers = []
        for index, raw in enumerate(raw_answers):
            try:
                answers.append(AnswerRecord.model_validate(raw).to_entity())
            except ValidationError as e:
                logger.warning(
                    "Partición %s: registro %d inválido, se descarta la partición",
                    name,
                    index,
                )
                return PartitionLoadResult.malformed(
                    name, f"registro {index} inválido: {e.error_count()} errores"
                )

        logger.debug("Partición %s: %d respuestas", name, len(answers))
        return PartitionLoadResult.loaded(name, tuple(answers))

    def load_all(self, sources: list[PartitionSource]) -> list[PartitionLoadResult]:
        """Carga todas las particiones en el orden dado."""
        return [self.load(source) for source in sources]

    def load_partitions(self, names: list[str]) -> list[PartitionLoadResult]:
        """Carga las particiones con nombre desde el directorio configurado."""
        if self._directory is None:
            raise ValueError("AnswerPartitionLoader requires a directory")
        return self.load_all(partition_sources(self._directory, names))
