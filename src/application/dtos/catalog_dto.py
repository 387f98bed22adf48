"""DTOs for catalog loading and integrity checks."""

from dataclasses import dataclass, field

from src.domain.value_objects.catalog import Catalog
from src.domain.value_objects.integrity_issue import IntegrityIssue
from src.domain.value_objects.partition_load_result import PartitionLoadResult


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class LoadCatalogInputDto:
    """Entrada de la carga del catálogo."""

    partition_names: list[str]
    load_word_clouds: bool = True


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class LoadCatalogOutputDto:
    """Resultado de la carga: el catálogo y el estado de cada partición."""

    catalog: Catalog
    partition_results: list[PartitionLoadResult] = field(default_factory=list)

    @property
    def partition_gaps(self) -> list[PartitionLoadResult]:
        return [r for r in self.partition_results if r.is_gap]

    @property
    def answers_loaded(self) -> int:
        return sum(r.contributed for r in self.partition_results)


@dataclass
class CheckCatalogIntegrityOutputDto:
    """Resultado del chequeo de integridad."""

    issues: list[IntegrityIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[IntegrityIssue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> list[IntegrityIssue]:
        return [i for i in self.issues if not i.is_error]

    @property
    def is_valid(self) -> bool:
        """True si no hay defectos de severidad ERROR."""
        return not self.errors
