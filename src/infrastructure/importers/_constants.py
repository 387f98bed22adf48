"""Constantes compartidas por los importadores."""

# Particiones de respuestas de los debates 2025, en orden de concatenación
DEFAULT_ANSWER_PARTITIONS: list[str] = [
    "enade-icare-2025-10-14",
    "clapes-uc-2025-08-05",
    "primarias-oficialistas-t13-2025-06-15",
    "primarias-oficialistas-tvn-2025-06-22",
    "salmon-summit-2025-07-22",
    "sofofa-2025-07-31",
    "mineria-uc-2025-08-06",
    "asimet-foro-2025-08-28",
    "chv-debate-presidencial-2025-09-10-BASE",
    "enatrans-2025-08-07",
    "icare-congreso-2025-08-26-BASE",
]

# Archivos de registro dentro de CATALOG_DATA_DIR y su campo contenedor
CANDIDATES_FILE = "candidatos.json"
TOPICS_FILE = "temas.json"
DEBATES_FILE = "debates.json"
QUESTIONS_FILE = "preguntas.json"

CANDIDATES_FIELD = "candidatos"
TOPICS_FIELD = "temas"
DEBATES_FIELD = "debates"
QUESTIONS_FIELD = "preguntas"
ANSWERS_FIELD = "respuestas"

PARTITION_SUFFIX = ".json"
