"""Repository interface for entities with a slug identifier."""

from abc import abstractmethod
from typing import TypeVar

from src.domain.entities.base import BaseEntity
from src.domain.repositories.base import BaseRepository


T = TypeVar("T", bound=BaseEntity)


class IdentifiedRepository(BaseRepository[T]):
    """Registro indexado por identificador."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> T | None:
        """Busca un registro por identificador.

        Returns:
            El registro, o None si no existe (no es un error)
        """
        pass

    def exists(self, entity_id: str) -> bool:
        return self.get_by_id(entity_id) is not None
