"""Caso de uso de consultas sobre el catálogo.

Todas las operaciones son lecturas puras sobre repositorios inmutables: no
hay estado compartido que proteger y se pueden llamar desde varios lectores
a la vez. Las búsquedas puntuales devuelven None cuando no hay coincidencia.
"""

from src.application.dtos.conversation_dto import (
    AnswerOutputItem,
    ConversationOutputDto,
    ParticipantOutputItem,
    TurnOutputItem,
)
from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.domain.repositories.answer_repository import AnswerRepository
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.repositories.debate_repository import DebateRepository
from src.domain.repositories.question_repository import QuestionRepository
from src.domain.repositories.topic_repository import TopicRepository
from src.domain.repositories.word_cloud_repository import WordCloudRepository
from src.domain.utils.elapsed_time import format_elapsed
from src.domain.value_objects.conversation import (
    ConversationTurn,
    ResolvedConversation,
)
from src.domain.value_objects.word_cloud import WordCloudResponse


TIMESTAMP_QUERY_PARAM = "t"


class LookupCatalogUseCase:
    """Superficie de consulta que usa la capa de presentación."""

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        topic_repository: TopicRepository,
        debate_repository: DebateRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        word_cloud_repository: WordCloudRepository | None = None,
    ) -> None:
        self.candidate_repository = candidate_repository
        self.topic_repository = topic_repository
        self.debate_repository = debate_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.word_cloud_repository = word_cloud_repository

    # -------------------------------------------------------------------------
    # Registros
    # -------------------------------------------------------------------------

    def get_candidate(self, candidate_id: str) -> Candidate | None:
        return self.candidate_repository.get_by_id(candidate_id)

    def get_candidates_by_status(self, status: CandidateStatus) -> list[Candidate]:
        return self.candidate_repository.get_by_status(status)

    def get_candidates_by_coalition(self, coalition: str) -> list[Candidate]:
        return self.candidate_repository.get_by_coalition(coalition)

    def find_candidate_by_name(self, query: str) -> Candidate | None:
        return self.candidate_repository.find_by_name(query)

    def get_candidates_by_ids(self, ids: list[str]) -> list[Candidate]:
        return self.candidate_repository.get_by_ids(ids)

    def list_candidates(self) -> list[Candidate]:
        return self.candidate_repository.get_all()

    def get_topic(self, topic_id: str) -> Topic | None:
        return self.topic_repository.get_by_id(topic_id)

    def get_debate(self, debate_id: str) -> Debate | None:
        return self.debate_repository.get_by_id(debate_id)

    def list_debates(self) -> list[Debate]:
        return self.debate_repository.get_all()

    def get_debates_by_candidate(self, candidate_id: str) -> list[Debate]:
        return self.debate_repository.get_by_candidate(candidate_id)

    def get_questions_by_debate(self, debate_id: str) -> list[Question]:
        """Preguntas del debate ordenadas por order ascendente."""
        return self.question_repository.get_by_debate(debate_id)

    def get_questions_by_topic(self, topic_id: str) -> list[Question]:
        return self.question_repository.get_by_topic(topic_id)

    # -------------------------------------------------------------------------
    # Respuestas
    # -------------------------------------------------------------------------

    def get_answer(self, question_id: str, candidate_id: str) -> Answer | None:
        """Primera respuesta del candidato a la pregunta, en orden de agregación."""
        return self.answer_repository.get_answer(question_id, candidate_id)

    def get_answers_by_candidate(self, candidate_id: str) -> list[Answer]:
        return self.answer_repository.get_by_candidate(candidate_id)

    def get_answers_by_question(self, question_id: str) -> list[Answer]:
        return self.answer_repository.get_by_question(question_id)

    def get_word_cloud(self, debate_id: str) -> WordCloudResponse | None:
        if self.word_cloud_repository is None:
            return None
        return self.word_cloud_repository.get_by_debate(debate_id)

    # -------------------------------------------------------------------------
    # Composición
    # -------------------------------------------------------------------------

    def resolve_conversation(self, debate_id: str) -> ResolvedConversation | None:
        """Debate → preguntas ordenadas → respuestas por candidato.

        Se arma en cada llamada a partir de los repositorios; no guarda estado.

        Returns:
            La conversación, o None si el debate no existe
        """
        debate = self.debate_repository.get_by_id(debate_id)
        if debate is None:
            return None

        turns = []
        for question in self.question_repository.get_by_debate(debate_id):
            topic = (
                self.topic_repository.get_by_id(question.topic_id)
                if question.topic_id
                else None
            )
            turns.append(
                ConversationTurn.build(
                    question,
                    topic,
                    self.answer_repository.get_by_question(question.id),
                )
            )

        return ResolvedConversation(
            debate=debate,
            participants=tuple(
                self.candidate_repository.get_by_ids(list(debate.candidate_ids))
            ),
            turns=tuple(turns),
        )

    def describe_conversation(self, debate_id: str) -> ConversationOutputDto | None:
        """Conversación lista para mostrar, con tiempos y enlaces resueltos."""
        conversation = self.resolve_conversation(debate_id)
        if conversation is None:
            return None

        debate = conversation.debate
        names = {c.id: c.name for c in conversation.participants}
        participants = [
            ParticipantOutputItem.from_entity(c)
            if (c := self.candidate_repository.get_by_id(candidate_id))
            else ParticipantOutputItem.unknown(candidate_id)
            for candidate_id in debate.candidate_ids
        ]

        turns = []
        for turn in conversation.turns:
            answers = []
            for answer in turn.answers:
                candidate_name = names.get(answer.candidate_id) or self._candidate_name(
                    answer.candidate_id
                )
                answers.append(
                    AnswerOutputItem.from_entity(
                        answer,
                        candidate_name=candidate_name,
                        elapsed=(
                            format_elapsed(answer.timestamp)
                            if answer.timestamp is not None
                            else None
                        ),
                        transcript_link=(
                            self._timestamped_url(debate, answer.timestamp)
                            if answer.timestamp is not None and debate.has_transcript
                            else None
                        ),
                    )
                )
            turns.append(
                TurnOutputItem(
                    question_id=turn.question.id,
                    order=turn.question.order,
                    question=turn.question.text,
                    topic_name=turn.topic.name if turn.topic else None,
                    topic_color=turn.topic.color if turn.topic else None,
                    answers=answers,
                    silent_candidate_ids=[
                        cid
                        for cid in debate.candidate_ids
                        if cid not in turn.answers_by_candidate
                    ],
                )
            )

        return ConversationOutputDto(
            debate_id=debate.id,
            debate_name=debate.name,
            debate_date=debate.debate_date,
            organizer=debate.organizer,
            duration=debate.duration,
            moderators=list(debate.moderators),
            transcript_url=debate.transcript_url or None,
            participants=participants,
            turns=turns,
        )

    # -------------------------------------------------------------------------
    # Utilidades de presentación
    # -------------------------------------------------------------------------

    @staticmethod
    def format_elapsed(seconds: float) -> str:
        """Formato "H:MM:SS" desde 3600 segundos, "M:SS" por debajo."""
        return format_elapsed(seconds)

    def build_timestamped_transcript_url(
        self, debate_id: str, seconds: float
    ) -> str:
        """URL de la transcripción posicionada en seconds.

        Returns:
            Cadena vacía si el debate no existe
        """
        debate = self.debate_repository.get_by_id(debate_id)
        if debate is None:
            return ""
        return self._timestamped_url(debate, seconds)

    def _candidate_name(self, candidate_id: str) -> str:
        candidate = self.candidate_repository.get_by_id(candidate_id)
        return candidate.name if candidate else candidate_id

    @staticmethod
    def _timestamped_url(debate: Debate, seconds: float) -> str:
        separator = "&" if "?" in debate.transcript_url else "?"
        return f"{debate.transcript_url}{separator}{TIMESTAMP_QUERY_PARAM}={seconds}"
