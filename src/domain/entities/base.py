"""Base entity for catalog records."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class BaseEntity:
    """Entidad del catálogo identificada por un slug.

    Las entidades del catálogo se cargan una sola vez y no se modifican
    después; por eso son dataclasses congeladas.
    """

    id: str

    def __str__(self) -> str:
        return self.id
