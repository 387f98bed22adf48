"""Fixtures compartidos: un catálogo pequeño y sus archivos JSON."""

import json

from datetime import date
from pathlib import Path

import pytest

from src.domain.entities.answer import Answer
from src.domain.entities.candidate import Candidate, CandidateStatus
from src.domain.entities.debate import Debate
from src.domain.entities.question import Question
from src.domain.entities.topic import Topic
from src.domain.value_objects.catalog import Catalog
from src.infrastructure.persistence.answer_repository_impl import AnswerRepositoryImpl
from src.infrastructure.persistence.candidate_repository_impl import (
    CandidateRepositoryImpl,
)
from src.infrastructure.persistence.debate_repository_impl import DebateRepositoryImpl
from src.infrastructure.persistence.question_repository_impl import (
    QuestionRepositoryImpl,
)
from src.infrastructure.persistence.topic_repository_impl import TopicRepositoryImpl


TRANSCRIPT_URL = "https://example.org/clapes-uc"


@pytest.fixture
def candidates() -> list[Candidate]:
    return [
        Candidate(
            id="evelyn-matthei",
            name="Evelyn Matthei",
            party="UDI",
            coalition="Chile Vamos",
            status=CandidateStatus.CONFIRMED,
            color="#0033A0",
            abbreviation="EM",
        ),
        Candidate(
            id="jeannette-jara",
            name="Jeannette Jara",
            party="Partido Comunista",
            coalition="Unidad por Chile",
            status=CandidateStatus.CONFIRMED,
            color="#C8102E",
            abbreviation="JJ",
        ),
        Candidate(
            id="johannes-kaiser",
            name="Johannes Kaiser",
            party="Partido Nacional Libertario",
            status=CandidateStatus.CONFIRMED,
            color="#1A1A1A",
            abbreviation="JK",
        ),
        Candidate(
            id="carolina-toha",
            name="Carolina Tohá",
            party="PPD",
            coalition="Unidad por Chile",
            status=CandidateStatus.PRE_CANDIDATE,
            color="#F28C28",
            abbreviation="CT",
        ),
    ]


@pytest.fixture
def topics() -> list[Topic]:
    return [
        Topic(id="economia", name="Economía", color="#2563eb"),
        Topic(id="seguridad", name="Seguridad", color="#dc2626"),
    ]


@pytest.fixture
def debates() -> list[Debate]:
    return [
        Debate(
            id="clapes-uc-2025-08-05",
            name="Foro CLAPES UC",
            debate_date=date(2025, 8, 5),
            organizer="CLAPES UC",
            transcript_url=TRANSCRIPT_URL,
            candidate_ids=("evelyn-matthei", "jeannette-jara"),
            duration="1h 30m",
            moderators=("Juan Manuel Astorga",),
        ),
        Debate(
            id="primarias-t13-2025-06-15",
            name="Debate primarias T13",
            debate_date=date(2025, 6, 15),
            organizer="T13",
            candidate_ids=("jeannette-jara", "carolina-toha"),
        ),
    ]


@pytest.fixture
def questions() -> list[Question]:
    # q-clapes-2 va antes que q-clapes-1 en el registro
    return [
        Question(
            id="q-clapes-2",
            debate_id="clapes-uc-2025-08-05",
            text="¿Cómo enfrentará el crimen organizado?",
            order=2,
            topic_id="seguridad",
        ),
        Question(
            id="q-clapes-1",
            debate_id="clapes-uc-2025-08-05",
            text="¿Cómo recuperar el crecimiento?",
            order=1,
            topic_id="economia",
        ),
        Question(
            id="q-t13-1",
            debate_id="primarias-t13-2025-06-15",
            text="¿Por qué usted?",
            order=1,
        ),
    ]


@pytest.fixture
def answers() -> list[Answer]:
    return [
        Answer("q-clapes-1", "evelyn-matthei", "Reducir la permisología", 42),
        Answer("q-clapes-1", "jeannette-jara", "Aumentar la inversión pública", 3725),
        Answer("q-clapes-2", "evelyn-matthei", "Más carabineros en las calles"),
    ]


@pytest.fixture
def catalog(candidates, topics, debates, questions, answers) -> Catalog:
    return Catalog(
        candidates=tuple(candidates),
        topics=tuple(topics),
        debates=tuple(debates),
        questions=tuple(questions),
        answers=tuple(answers),
    )


@pytest.fixture
def candidate_repository(candidates) -> CandidateRepositoryImpl:
    return CandidateRepositoryImpl(candidates)


@pytest.fixture
def topic_repository(topics) -> TopicRepositoryImpl:
    return TopicRepositoryImpl(topics)


@pytest.fixture
def debate_repository(debates) -> DebateRepositoryImpl:
    return DebateRepositoryImpl(debates)


@pytest.fixture
def question_repository(questions) -> QuestionRepositoryImpl:
    return QuestionRepositoryImpl(questions)


@pytest.fixture
def answer_repository(answers) -> AnswerRepositoryImpl:
    return AnswerRepositoryImpl(answers)


# -----------------------------------------------------------------------------
# Archivos JSON
# -----------------------------------------------------------------------------


def write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def raw_registries() -> dict[str, dict]:
    """Contenido de los cuatro archivos de registro, con las claves de origen."""
    return {
        "candidatos.json": {
            "candidatos": [
                {
                    "id": "evelyn-matthei",
                    "nombre": "Evelyn Matthei",
                    "partido": "UDI",
                    "coalicion": "Chile Vamos",
                    "foto": "/blog/candidatos/evelyn-matthei.webp",
                    "fotoSinFondo": "/blog/candidatos/sin-fondo/evelyn-matthei.webp",
                    "estado": "confirmado",
                    "color": "#0033A0",
                    "abreviacion": "EM",
                },
                {
                    "id": "jeannette-jara",
                    "nombre": "Jeannette Jara",
                    "partido": "Partido Comunista",
                    "coalicion": "Unidad por Chile",
                    "foto": "/blog/candidatos/jeannette-jara.webp",
                    "estado": "confirmado",
                    "color": "#C8102E",
                    "abreviacion": "JJ",
                },
            ]
        },
        "temas.json": {
            "temas": [{"id": "economia", "nombre": "Economía", "color": "#2563eb"}]
        },
        "debates.json": {
            "debates": [
                {
                    "id": "clapes-uc-2025-08-05",
                    "nombre": "Foro CLAPES UC",
                    "fecha": "2025-08-05",
                    "organizador": "CLAPES UC",
                    "duracion": "1h 30m",
                    "conductores": ["Juan Manuel Astorga"],
                    "transcriptUrl": TRANSCRIPT_URL,
                    "candidatosIds": ["evelyn-matthei", "jeannette-jara"],
                }
            ]
        },
        "preguntas.json": {
            "preguntas": [
                {
                    "id": "q-clapes-2",
                    "debateId": "clapes-uc-2025-08-05",
                    "pregunta": "¿Cómo enfrentará el crimen organizado?",
                    "orden": 2,
                },
                {
                    "id": "q-clapes-1",
                    "debateId": "clapes-uc-2025-08-05",
                    "pregunta": "¿Cómo recuperar el crecimiento?",
                    "orden": 1,
                    "temaId": "economia",
                },
            ]
        },
    }


@pytest.fixture
def catalog_dir(tmp_path: Path, raw_registries: dict[str, dict]) -> Path:
    directory = tmp_path / "catalog"
    for file_name, payload in raw_registries.items():
        write_json(directory / file_name, payload)
    return directory


@pytest.fixture
def answers_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "respuestas"
    directory.mkdir()
    return directory


@pytest.fixture
def json_file():
    """write_json(path, payload) para armar archivos en tmp_path."""
    return write_json
