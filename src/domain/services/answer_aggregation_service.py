"""Domain service that merges answer partitions."""

from src.domain.entities.answer import Answer
from src.domain.value_objects.partition_load_result import PartitionLoadResult


class AnswerAggregationService:
    """Concatena las particiones de respuestas en una sola colección.

    Las particiones se concatenan en el orden recibido, sin deduplicar:
    si dos particiones traen el mismo par (pregunta, candidato), ambas
    respuestas se conservan. Las particiones que no se cargaron aportan
    cero registros.
    """

    def aggregate(self, results: list[PartitionLoadResult]) -> tuple[Answer, ...]:
        combined: list[Answer] = []
        for result in results:
            if result.is_gap:
                continue
            combined.extend(result.answers)
        return tuple(combined)

    @staticmethod
    def summarize(results: list[PartitionLoadResult]) -> dict[str, int]:
        """Cantidad de particiones por estado (p. ej. {"loaded": 9, "missing": 2})."""
        summary: dict[str, int] = {}
        for result in results:
            key = result.status.value
            summary[key] = summary.get(key, 0) + 1
        return summary
