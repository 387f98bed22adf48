"""Pruebas del chequeo de integridad del catálogo."""

from dataclasses import replace

import pytest

from src.domain.entities.answer import Answer
from src.domain.entities.question import Question
from src.domain.services.catalog_integrity_service import CatalogIntegrityService
from src.domain.value_objects.integrity_issue import IssueKind, IssueSeverity


@pytest.fixture
def service() -> CatalogIntegrityService:
    return CatalogIntegrityService()


def _kinds(issues) -> list[IssueKind]:
    return [issue.kind for issue in issues]


class TestCheck:
    def test_consistent_catalog_has_no_issues(
        self, service, candidates, topics, debates, questions, answers
    ) -> None:
        assert service.check(candidates, topics, debates, questions, answers) == []

    def test_duplicate_candidate_id(
        self, service, candidates, topics, debates, questions, answers
    ) -> None:
        duplicated = [*candidates, replace(candidates[0], abbreviation="E2")]

        issues = service.check(duplicated, topics, debates, questions, answers)

        assert _kinds(issues) == [IssueKind.DUPLICATE_ID]
        assert issues[0].entity == "candidate"
        assert issues[0].entity_id == "evelyn-matthei"
        assert issues[0].is_error

    def test_duplicate_abbreviation(
        self, service, candidates, topics, debates, questions, answers
    ) -> None:
        clash = [*candidates[:3], replace(candidates[3], abbreviation="EM")]

        issues = service.check(clash, topics, debates, questions, answers)

        assert _kinds(issues) == [IssueKind.DUPLICATE_ABBREVIATION]
        assert issues[0].entity_id == "carolina-toha"
        assert "evelyn-matthei" in issues[0].reference

    def test_debate_with_unknown_candidate(
        self, service, candidates, topics, debates, questions, answers
    ) -> None:
        broken = [
            replace(debates[0], candidate_ids=("evelyn-matthei", "nadie")),
            debates[1],
        ]

        issues = service.check(candidates, topics, broken, questions, answers)

        assert _kinds(issues) == [IssueKind.UNKNOWN_CANDIDATE]
        assert issues[0].entity == "debate"
        assert issues[0].reference == "nadie"


class TestCheckQuestions:
    def test_unknown_debate_and_topic(self, debates, topics) -> None:
        questions = [
            Question(id="q1", debate_id="no-existe", text="?", order=1, topic_id="x")
        ]

        issues = CatalogIntegrityService.check_questions(questions, debates, topics)

        assert _kinds(issues) == [IssueKind.UNKNOWN_DEBATE, IssueKind.UNKNOWN_TOPIC]

    def test_duplicate_order_within_debate(self, debates, topics) -> None:
        debate_id = debates[0].id
        questions = [
            Question(id="q1", debate_id=debate_id, text="?", order=1),
            Question(id="q2", debate_id=debate_id, text="?", order=1),
        ]

        issues = CatalogIntegrityService.check_questions(questions, debates, topics)

        assert _kinds(issues) == [IssueKind.DUPLICATE_ORDER]
        assert issues[0].entity_id == "q2"

    def test_same_order_in_different_debates_is_fine(self, debates, topics) -> None:
        questions = [
            Question(id="q1", debate_id=debates[0].id, text="?", order=1),
            Question(id="q2", debate_id=debates[1].id, text="?", order=1),
        ]

        assert CatalogIntegrityService.check_questions(questions, debates, topics) == []


class TestCheckAnswers:
    def test_unknown_question(self, questions, debates, candidates) -> None:
        answers = [Answer("q-inexistente", "evelyn-matthei", "r")]

        issues = CatalogIntegrityService.check_answers(
            answers, questions, debates, candidates
        )

        assert _kinds(issues) == [IssueKind.UNKNOWN_QUESTION]
        assert issues[0].entity_id == "q-inexistente/evelyn-matthei"

    def test_unknown_candidate(self, questions, debates, candidates) -> None:
        answers = [Answer("q-clapes-1", "nadie", "r")]

        issues = CatalogIntegrityService.check_answers(
            answers, questions, debates, candidates
        )

        assert _kinds(issues) == [IssueKind.UNKNOWN_CANDIDATE]

    def test_non_participant_is_a_warning(
        self, questions, debates, candidates
    ) -> None:
        answers = [Answer("q-clapes-1", "carolina-toha", "r")]

        issues = CatalogIntegrityService.check_answers(
            answers, questions, debates, candidates
        )

        assert _kinds(issues) == [IssueKind.NON_PARTICIPANT_ANSWER]
        assert issues[0].severity is IssueSeverity.WARNING
        assert issues[0].reference == "clapes-uc-2025-08-05"

    def test_duplicate_answer_is_a_warning(
        self, questions, debates, candidates
    ) -> None:
        answers = [
            Answer("q-clapes-1", "evelyn-matthei", "primera"),
            Answer("q-clapes-1", "evelyn-matthei", "segunda"),
        ]

        issues = CatalogIntegrityService.check_answers(
            answers, questions, debates, candidates
        )

        assert _kinds(issues) == [IssueKind.DUPLICATE_ANSWER]
        assert not issues[0].is_error

    def test_issue_str(self, questions, debates, candidates) -> None:
        answers = [Answer("q-clapes-1", "nadie", "r")]

        issue = CatalogIntegrityService.check_answers(
            answers, questions, debates, candidates
        )[0]

        assert str(issue) == (
            "[error] unknown_candidate: answer q-clapes-1/nadie -> nadie"
        )
