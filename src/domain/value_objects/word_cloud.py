"""Value objects de nubes de palabras."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WordData:
    text: str
    weight: float
    color: str


@dataclass(frozen=True)
class CandidateWordCloud:
    name: str
    color: str
    words: tuple[WordData, ...] = ()


@dataclass(frozen=True)
class GeneralWordCloud:
    title: str
    words: tuple[WordData, ...] = ()


@dataclass(frozen=True)
class WordCloudData:
    general: GeneralWordCloud
    candidates: dict[str, CandidateWordCloud] = field(default_factory=dict)


@dataclass(frozen=True)
class WordCloudMetadata:
    total_words: int
    candidates_count: int
    created: str
    source: str
    description: str


@dataclass(frozen=True)
class WordCloudResponse:
    """Nube de palabras de un debate (general y por candidato)."""

    debate_id: str
    data: WordCloudData
    metadata: WordCloudMetadata

    def top_words(self, limit: int = 10) -> list[WordData]:
        """Palabras de la nube general ordenadas por peso descendente."""
        return sorted(self.data.general.words, key=lambda w: w.weight, reverse=True)[
            :limit
        ]

    def for_candidate(self, candidate_id: str) -> CandidateWordCloud | None:
        return self.data.candidates.get(candidate_id)
