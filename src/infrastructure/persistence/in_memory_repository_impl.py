"""Base in-memory repository implementation."""

from collections.abc import Iterable
from types import MappingProxyType
from typing import TypeVar

from src.domain.entities.base import BaseEntity
from src.domain.repositories.identified_repository import IdentifiedRepository


T = TypeVar("T", bound=BaseEntity)


class InMemoryRepositoryImpl(IdentifiedRepository[T]):
    """Registro inmutable en memoria indexado por identificador.

    Los registros se guardan como tupla en el orden de la fuente y se indexan
    una sola vez al construir el repositorio. Si hay identificadores
    duplicados, el índice conserva el primero; el chequeo de integridad los
    reporta.

    Type Parameters:
        T: Domain entity type that extends BaseEntity
    """

    def __init__(self, records: Iterable[T]):
        self._records: tuple[T, ...] = tuple(records)
        index: dict[str, T] = {}
        for record in self._records:
            index.setdefault(record.id, record)
        self._index = MappingProxyType(index)

    def get_by_id(self, entity_id: str) -> T | None:
        return self._index.get(entity_id)

    def get_all(self) -> list[T]:
        return list(self._records)

    def count(self) -> int:
        return len(self._records)
