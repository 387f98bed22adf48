"""Caso de uso de verificación de integridad del catálogo."""

from src.application.dtos.catalog_dto import CheckCatalogIntegrityOutputDto
from src.common.logging import get_logger
from src.domain.repositories.answer_repository import AnswerRepository
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.repositories.debate_repository import DebateRepository
from src.domain.repositories.question_repository import QuestionRepository
from src.domain.repositories.topic_repository import TopicRepository
from src.domain.services.catalog_integrity_service import CatalogIntegrityService


logger = get_logger(__name__)


class CheckCatalogIntegrityUseCase:
    """Detecta defectos de calidad de datos sin bloquear la carga."""

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        topic_repository: TopicRepository,
        debate_repository: DebateRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        integrity_service: CatalogIntegrityService | None = None,
    ) -> None:
        self.candidate_repository = candidate_repository
        self.topic_repository = topic_repository
        self.debate_repository = debate_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.integrity_service = integrity_service or CatalogIntegrityService()

    def execute(self) -> CheckCatalogIntegrityOutputDto:
        issues = self.integrity_service.check(
            candidates=self.candidate_repository.get_all(),
            topics=self.topic_repository.get_all(),
            debates=self.debate_repository.get_all(),
            questions=self.question_repository.get_all(),
            answers=self.answer_repository.get_all(),
        )
        output = CheckCatalogIntegrityOutputDto(issues=issues)

        if issues:
            logger.warning(
                "catalog_integrity_issues",
                errors=len(output.errors),
                warnings=len(output.warnings),
            )
        else:
            logger.info("catalog_integrity_ok")
        return output
