"""Pruebas de los repositorios en memoria."""

from dataclasses import replace

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import CandidateStatus
from src.infrastructure.persistence.answer_repository_impl import AnswerRepositoryImpl
from src.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)
from src.infrastructure.persistence.question_repository_impl import (
    QuestionRepositoryImpl,
)
from src.infrastructure.persistence.word_cloud_repository_impl import (
    WordCloudRepositoryImpl,
)


class TestCandidateRepositoryImpl:
    def test_get_by_id(self, candidate_repository) -> None:
        assert candidate_repository.get_by_id("jeannette-jara").name == "Jeannette Jara"
        assert candidate_repository.get_by_id("nadie") is None

    def test_exists(self, candidate_repository) -> None:
        assert candidate_repository.exists("johannes-kaiser")
        assert not candidate_repository.exists("nadie")

    def test_get_all_keeps_registry_order(self, candidate_repository) -> None:
        assert [c.abbreviation for c in candidate_repository.get_all()] == [
            "EM",
            "JJ",
            "JK",
            "CT",
        ]
        assert candidate_repository.count() == 4

    def test_get_by_status(self, candidate_repository) -> None:
        result = candidate_repository.get_by_status(CandidateStatus.PRE_CANDIDATE)
        assert [c.id for c in result] == ["carolina-toha"]

    def test_get_by_coalition(self, candidate_repository) -> None:
        result = candidate_repository.get_by_coalition("Unidad por Chile")
        assert [c.id for c in result] == ["jeannette-jara", "carolina-toha"]

    def test_find_by_name_ignores_case(self, candidate_repository) -> None:
        assert candidate_repository.find_by_name("KAISER").id == "johannes-kaiser"
        assert candidate_repository.find_by_name("tohá").id == "carolina-toha"
        assert candidate_repository.find_by_name("bachelet") is None

    def test_get_by_ids_keeps_order_and_drops_unknown(
        self, candidate_repository
    ) -> None:
        result = candidate_repository.get_by_ids(
            ["carolina-toha", "nadie", "evelyn-matthei"]
        )
        assert [c.id for c in result] == ["carolina-toha", "evelyn-matthei"]

    def test_duplicate_id_first_wins(self, candidates) -> None:
        repository = CandidateRepositoryImpl(
            [*candidates, replace(candidates[0], name="Duplicada")]
        )

        assert repository.get_by_id("evelyn-matthei").name == "Evelyn Matthei"
        assert repository.count() == 5


class TestDebateRepositoryImpl:
    def test_get_by_candidate(self, debate_repository) -> None:
        result = debate_repository.get_by_candidate("jeannette-jara")
        assert [d.id for d in result] == [
            "clapes-uc-2025-08-05",
            "primarias-t13-2025-06-15",
        ]
        assert debate_repository.get_by_candidate("johannes-kaiser") == []


class TestQuestionRepositoryImpl:
    def test_get_by_debate_sorted_by_order(self, question_repository) -> None:
        result = question_repository.get_by_debate("clapes-uc-2025-08-05")
        assert [q.id for q in result] == ["q-clapes-1", "q-clapes-2"]

    def test_get_by_debate_unknown(self, question_repository) -> None:
        assert question_repository.get_by_debate("no-existe") == []

    def test_ties_keep_registry_order(self, questions) -> None:
        tied = [
            replace(questions[0], id="b", order=1),
            replace(questions[0], id="a", order=1),
        ]
        repository = QuestionRepositoryImpl(tied)

        result = repository.get_by_debate("clapes-uc-2025-08-05")

        assert [q.id for q in result] == ["b", "a"]

    def test_get_by_topic(self, question_repository) -> None:
        assert [q.id for q in question_repository.get_by_topic("economia")] == [
            "q-clapes-1"
        ]


class TestAnswerRepositoryImpl:
    def test_get_answer(self, answer_repository) -> None:
        answer = answer_repository.get_answer("q-clapes-1", "jeannette-jara")
        assert answer.timestamp == 3725

    def test_get_answer_missing(self, answer_repository) -> None:
        assert answer_repository.get_answer("q-t13-1", "carolina-toha") is None

    def test_first_wins_but_bulk_keeps_all(self) -> None:
        first = Answer("q1", "c1", "primera")
        second = Answer("q1", "c1", "segunda")
        repository = AnswerRepositoryImpl([first, second])

        assert repository.get_answer("q1", "c1") is first
        assert repository.get_by_question("q1") == [first, second]
        assert repository.get_by_candidate("c1") == [first, second]

    def test_get_by_candidate(self, answer_repository) -> None:
        result = answer_repository.get_by_candidate("evelyn-matthei")
        assert [a.question_id for a in result] == ["q-clapes-1", "q-clapes-2"]


class TestWordCloudRepositoryImpl:
    def test_empty(self) -> None:
        repository = WordCloudRepositoryImpl()
        assert repository.get_by_debate("x") is None
        assert repository.debate_ids() == []
