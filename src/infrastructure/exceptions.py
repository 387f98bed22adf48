"""Infrastructure layer exceptions."""


class InfrastructureError(Exception):
    """Base class for infrastructure errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogLoadError(InfrastructureError):
    """Un archivo de registro (candidatos, temas, debates, preguntas) no se pudo
    cargar. Sin registros no hay catálogo utilizable."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"No se pudo cargar el registro {path}: {reason}",
            {"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason
