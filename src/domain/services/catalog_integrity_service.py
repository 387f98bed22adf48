"""Referential integrity checks over the catalog.

Las invariantes del catálogo (identificadores únicos, referencias entre
debates, preguntas, temas, candidatos y respuestas) no se exigen al cargar.
Este servicio las verifica y devuelve los defectos encontrados sin lanzar
excepciones.
"""

from collections.abc import Iterable

from src.domain.entities.answer import Answer
from src.domain.entities.base import BaseEntity
from src.domain.entities.candidate import Candidate
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.domain.value_objects.integrity_issue import (
    IntegrityIssue,
    IssueKind,
    IssueSeverity,
)


def _answer_key(answer: Answer) -> str:
    return f"{answer.question_id}/{answer.candidate_id}"


class CatalogIntegrityService:
    """Verifica unicidad e integridad referencial del catálogo."""

    def check(
        self,
        candidates: list[Candidate],
        topics: list[Topic],
        debates: list[Debate],
        questions: list[Question],
        answers: list[Answer],
    ) -> list[IntegrityIssue]:
        """Ejecuta todas las verificaciones.

        Returns:
            Lista de defectos, vacía si el catálogo es válido
        """
        issues: list[IntegrityIssue] = []
        issues.extend(self.check_unique_ids("candidate", candidates))
        issues.extend(self.check_unique_abbreviations(candidates))
        issues.extend(self.check_unique_ids("topic", topics))
        issues.extend(self.check_unique_ids("debate", debates))
        issues.extend(self.check_unique_ids("question", questions))
        issues.extend(self.check_debates(debates, candidates))
        issues.extend(self.check_questions(questions, debates, topics))
        issues.extend(self.check_answers(answers, questions, debates, candidates))
        return issues

    @staticmethod
    def check_unique_ids(
        entity: str, records: Iterable[BaseEntity]
    ) -> list[IntegrityIssue]:
        seen: set[str] = set()
        issues = []
        for record in records:
            if record.id in seen:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.DUPLICATE_ID,
                        severity=IssueSeverity.ERROR,
                        entity=entity,
                        entity_id=record.id,
                        reference=record.id,
                    )
                )
            seen.add(record.id)
        return issues

    @staticmethod
    def check_unique_abbreviations(
        candidates: list[Candidate],
    ) -> list[IntegrityIssue]:
        seen: dict[str, str] = {}
        issues = []
        for candidate in candidates:
            owner = seen.get(candidate.abbreviation)
            if owner is not None:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.DUPLICATE_ABBREVIATION,
                        severity=IssueSeverity.ERROR,
                        entity="candidate",
                        entity_id=candidate.id,
                        reference=f"{candidate.abbreviation} ({owner})",
                    )
                )
            else:
                seen[candidate.abbreviation] = candidate.id
        return issues

    @staticmethod
    def check_debates(
        debates: list[Debate], candidates: list[Candidate]
    ) -> list[IntegrityIssue]:
        candidate_ids = {c.id for c in candidates}
        return [
            IntegrityIssue(
                kind=IssueKind.UNKNOWN_CANDIDATE,
                severity=IssueSeverity.ERROR,
                entity="debate",
                entity_id=debate.id,
                reference=candidate_id,
            )
            for debate in debates
            for candidate_id in debate.candidate_ids
            if candidate_id not in candidate_ids
        ]

    @staticmethod
    def check_questions(
        questions: list[Question], debates: list[Debate], topics: list[Topic]
    ) -> list[IntegrityIssue]:
        debate_ids = {d.id for d in debates}
        topic_ids = {t.id for t in topics}
        orders: dict[tuple[str, int], str] = {}
        issues = []

        for question in questions:
            if question.debate_id not in debate_ids:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.UNKNOWN_DEBATE,
                        severity=IssueSeverity.ERROR,
                        entity="question",
                        entity_id=question.id,
                        reference=question.debate_id,
                    )
                )
            if question.topic_id is not None and question.topic_id not in topic_ids:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.UNKNOWN_TOPIC,
                        severity=IssueSeverity.ERROR,
                        entity="question",
                        entity_id=question.id,
                        reference=question.topic_id,
                    )
                )

            key = (question.debate_id, question.order)
            if key in orders:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.DUPLICATE_ORDER,
                        severity=IssueSeverity.ERROR,
                        entity="question",
                        entity_id=question.id,
                        reference=f"orden {question.order} ({orders[key]})",
                    )
                )
            else:
                orders[key] = question.id
        return issues

    @staticmethod
    def check_answers(
        answers: list[Answer],
        questions: list[Question],
        debates: list[Debate],
        candidates: list[Candidate],
    ) -> list[IntegrityIssue]:
        questions_by_id = {q.id: q for q in questions}
        debates_by_id = {d.id: d for d in debates}
        candidate_ids = {c.id for c in candidates}
        seen: set[str] = set()
        issues = []

        for answer in answers:
            key = _answer_key(answer)
            question = questions_by_id.get(answer.question_id)

            if question is None:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.UNKNOWN_QUESTION,
                        severity=IssueSeverity.ERROR,
                        entity="answer",
                        entity_id=key,
                        reference=answer.question_id,
                    )
                )
            if answer.candidate_id not in candidate_ids:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.UNKNOWN_CANDIDATE,
                        severity=IssueSeverity.ERROR,
                        entity="answer",
                        entity_id=key,
                        reference=answer.candidate_id,
                    )
                )
            elif question is not None:
                debate = debates_by_id.get(question.debate_id)
                if debate is not None and not debate.has_participant(
                    answer.candidate_id
                ):
                    issues.append(
                        IntegrityIssue(
                            kind=IssueKind.NON_PARTICIPANT_ANSWER,
                            severity=IssueSeverity.WARNING,
                            entity="answer",
                            entity_id=key,
                            reference=debate.id,
                        )
                    )

            if key in seen:
                issues.append(
                    IntegrityIssue(
                        kind=IssueKind.DUPLICATE_ANSWER,
                        severity=IssueSeverity.WARNING,
                        entity="answer",
                        entity_id=key,
                        reference=key,
                    )
                )
            seen.add(key)
        return issues
