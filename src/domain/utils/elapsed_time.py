"""Formato de tiempos transcurridos en una grabación."""

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def format_elapsed(seconds: float) -> str:
    """Formatea segundos como "M:SS" o, desde una hora, "H:MM:SS".

    Minutos y segundos van con dos dígitos; las horas no se rellenan.
    Los valores fraccionarios se truncan al segundo.

    Ej.: 59 -> "0:59", 60 -> "1:00", 3600 -> "1:00:00"

    Raises:
        ValueError: si seconds es negativo
    """
    total = int(seconds)
    if total < 0:
        raise ValueError(f"seconds must be non-negative: {seconds}")

    hours, remainder = divmod(total, SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, SECONDS_PER_MINUTE)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
