"""Application use cases."""

from src.application.usecases.check_catalog_integrity_usecase import (
    CheckCatalogIntegrityUseCase,
)
from src.application.usecases.load_catalog_usecase import LoadCatalogUseCase
from src.application.usecases.lookup_catalog_usecase import LookupCatalogUseCase


__all__ = [
    "CheckCatalogIntegrityUseCase",
    "LoadCatalogUseCase",
    "LookupCatalogUseCase",
]
