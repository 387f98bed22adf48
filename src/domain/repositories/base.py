"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Interfaz de solo lectura común a todos los registros del catálogo.

    El catálogo es inmutable después de la carga: no hay operaciones de
    escritura.
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """Todos los registros en el orden del registro."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
